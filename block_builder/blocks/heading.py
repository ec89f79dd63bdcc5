"""Bloc Heading — titre h1..h6."""
from typing import Literal
from pydantic import Field
from .base import BaseBlock, BlockContent


class HeadingContent(BlockContent):
    text: str
    level: int = Field(..., ge=1, le=6)


class HeadingBlock(BaseBlock):
    kind: Literal["heading"] = Field(default="heading", frozen=True)
    content: HeadingContent = HeadingContent(text="", level=1)
