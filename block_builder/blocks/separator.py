"""Bloc Separator — ligne horizontale, aucun champ."""
from typing import Literal
from pydantic import Field
from .base import BaseBlock, BlockContent


class SeparatorContent(BlockContent):
    pass


class SeparatorBlock(BaseBlock):
    kind: Literal["separator"] = Field(default="separator", frozen=True)
    content: SeparatorContent = SeparatorContent()
