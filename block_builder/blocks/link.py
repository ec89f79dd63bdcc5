"""Bloc Link — lien ouvert dans un nouvel onglet."""
from typing import Literal
from pydantic import Field
from .base import BaseBlock, BlockContent


class LinkContent(BlockContent):
    text: str
    href: str


class LinkBlock(BaseBlock):
    kind: Literal["link"] = Field(default="link", frozen=True)
    content: LinkContent = LinkContent(text="", href="")
