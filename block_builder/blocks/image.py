"""Bloc Image — src (data URL ou URL) + alt."""
from typing import Literal
from pydantic import Field
from .base import BaseBlock, BlockContent


class ImageContent(BlockContent):
    src: str
    alt: str


class ImageBlock(BaseBlock):
    kind: Literal["image"] = Field(default="image", frozen=True)
    content: ImageContent = ImageContent(src="", alt="")
