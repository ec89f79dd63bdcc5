"""Bloc Embed — fragment HTML brut (iframe vidéo, carte...), injecté tel quel."""
from typing import Literal
from pydantic import Field
from .base import BaseBlock, BlockContent


class EmbedContent(BlockContent):
    code: str


class EmbedBlock(BaseBlock):
    kind: Literal["embed"] = Field(default="embed", frozen=True)
    content: EmbedContent = EmbedContent(code="")
