"""Bloc Paragraph — texte libre, les retours à la ligne deviennent des <br>."""
from typing import Literal
from pydantic import Field
from .base import BaseBlock, BlockContent


class ParagraphContent(BlockContent):
    text: str


class ParagraphBlock(BaseBlock):
    kind: Literal["paragraph"] = Field(default="paragraph", frozen=True)
    content: ParagraphContent = ParagraphContent(text="")
