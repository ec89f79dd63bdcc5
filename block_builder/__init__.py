"""
Block Builder — page HTML autonome à partir d'une liste ordonnée de blocs.

Usage (store):
    >>> from block_builder import BlockStore, render_page
    >>> store = BlockStore()
    >>> h = store.add_block("heading")
    >>> store.update_block_content(h.id, {"text": "Bienvenue", "level": 1})
    >>> html = render_page(store.snapshot())

Usage (JSON):
    >>> from block_builder import Page, render_page
    >>> import json
    >>> with open("seeds/demo_page.json") as f:
    ...     page = Page.model_validate(json.load(f))
    >>> html = render_page(page)
"""

__version__ = "0.1.0"

from .blocks import (
    BaseBlock, BlockContent,
    HeadingBlock, HeadingContent,
    ParagraphBlock, ParagraphContent,
    ImageBlock, ImageContent,
    LinkBlock, LinkContent,
    EmbedBlock, EmbedContent,
    SeparatorBlock, SeparatorContent,
    BlockKind, BlockUnion, BLOCK_REGISTRY, new_block,
)
from .core import BlockStore, Page
from .renderer import render_block, render_page

__all__ = [
    "BaseBlock", "BlockContent",
    "HeadingBlock", "HeadingContent",
    "ParagraphBlock", "ParagraphContent",
    "ImageBlock", "ImageContent",
    "LinkBlock", "LinkContent",
    "EmbedBlock", "EmbedContent",
    "SeparatorBlock", "SeparatorContent",
    "BlockKind", "BlockUnion", "BLOCK_REGISTRY", "new_block",
    "BlockStore", "Page",
    "render_block", "render_page",
]
