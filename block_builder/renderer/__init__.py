"""Renderer HTML du document final."""
from .html import render_block, render_page

__all__ = ["render_block", "render_page"]
