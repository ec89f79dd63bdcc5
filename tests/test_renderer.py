"""Tests renderer HTML — fragments par kind, document, déterminisme, seed."""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import json
import re
from pathlib import Path

import pytest

from block_builder.blocks import (
    HeadingBlock, HeadingContent, ParagraphBlock, ParagraphContent,
    ImageBlock, ImageContent, LinkBlock, LinkContent,
    EmbedBlock, EmbedContent, SeparatorBlock,
)
from block_builder.core import BlockStore, Page
from block_builder.renderer.html import render_block, render_page

SEEDS_DIR = Path(__file__).parent.parent / "seeds"


def _body(html: str) -> str:
    return html.split("<body>", 1)[1].split("</body>", 1)[0]


# ── Fragments ─────────────────────────────────────────────────────────────────

def test_heading_fragment():
    b = HeadingBlock(id="h", content=HeadingContent(text="Hi", level=2))
    assert render_block(b) == "<h2>Hi</h2>"


def test_heading_text_not_escaped():
    b = HeadingBlock(id="h", content=HeadingContent(text="<em>A & B</em>", level=1))
    assert render_block(b) == "<h1><em>A & B</em></h1>"


def test_heading_bypassed_level_fails_loudly():
    content = HeadingContent.model_construct(text="x", level=9)
    b = HeadingBlock.model_construct(id="h", kind="heading", content=content)
    with pytest.raises(ValueError):
        render_block(b)


def test_paragraph_newlines():
    b = ParagraphBlock(id="p", content=ParagraphContent(text="a\nb"))
    assert render_block(b) == "<p>a<br>b</p>"


def test_paragraph_multiple_newlines():
    b = ParagraphBlock(id="p", content=ParagraphContent(text="a\n\nb\n"))
    assert render_block(b) == "<p>a<br><br>b<br></p>"


class TestLink:
    def test_both_empty_renders_nothing(self):
        b = LinkBlock(id="l", content=LinkContent(text="", href=""))
        assert render_block(b) == ""

    def test_text_and_href(self):
        b = LinkBlock(id="l", content=LinkContent(text="Docs", href="https://x.dev"))
        assert render_block(b) == (
            '<p><a href="https://x.dev" target="_blank" rel="noopener noreferrer">Docs</a></p>'
        )

    def test_empty_text_uses_href(self):
        b = LinkBlock(id="l", content=LinkContent(text="", href="https://x.dev"))
        assert ">https://x.dev</a>" in render_block(b)

    def test_empty_href_defaults_to_hash(self):
        b = LinkBlock(id="l", content=LinkContent(text="Top", href=""))
        assert 'href="#"' in render_block(b)
        assert ">Top</a>" in render_block(b)


def test_image_fragment():
    b = ImageBlock(id="i", content=ImageContent(src="data:image/png;base64,AAAA", alt="Logo"))
    assert render_block(b) == (
        '<img src="data:image/png;base64,AAAA" alt="Logo" '
        'style="max-width: 100%; height: auto; margin: 1rem 0;">'
    )


def test_image_empty_src_still_rendered():
    b = ImageBlock(id="i")
    assert render_block(b).startswith('<img src=""')


def test_embed_verbatim():
    code = '<iframe src="https://www.youtube.com/embed/x"></iframe>'
    b = EmbedBlock(id="e", content=EmbedContent(code=code))
    assert render_block(b) == f'<div class="embed-container">{code}</div>'


def test_separator():
    assert render_block(SeparatorBlock(id="s")) == "<hr>"


def test_unknown_kind_renders_empty():
    class Other:
        kind = "carousel"
        id = "z"
    assert render_block(Other()) == ""


# ── Document ─────────────────────────────────────────────────────────────────

def test_empty_page_document():
    html = render_page(Page(title="Vide"))
    assert html.startswith("<!DOCTYPE html>")
    assert "<title>Vide</title>" in html
    assert '<meta charset="UTF-8">' in html
    assert html.rstrip().endswith("</html>")
    assert _body(html).strip() == ""


def test_heading_round_trip_once():
    s = BlockStore()
    b = s.add_block("heading")
    s.update_block_content(b.id, {"text": "Hi", "level": 2})
    html = render_page(s.snapshot())
    assert _body(html).count("<h2>Hi</h2>") == 1


def test_empty_link_contributes_no_anchor():
    s = BlockStore()
    s.add_block("link")
    assert "<a " not in _body(render_page(s.page))


def test_fragments_in_order_newline_joined():
    s = BlockStore()
    h = s.add_block("heading")
    s.update_block_content(h.id, {"text": "T", "level": 1})
    s.add_block("separator")
    p = s.add_block("paragraph")
    s.update_block_content(p.id, {"text": "fin"})
    assert _body(render_page(s.page)) == "\n<h1>T</h1>\n<hr>\n<p>fin</p>\n"

    s.move_block(p.id, "up")
    assert _body(render_page(s.page)) == "\n<h1>T</h1>\n<p>fin</p>\n<hr>\n"


def test_style_is_embedded():
    html = render_page(Page())
    assert "<style>" in html
    assert ".embed-container" in html
    assert "56.25%" in html
    assert "<link " not in html
    assert "<script" not in html


def test_deterministic():
    s = BlockStore()
    for k in ("heading", "paragraph", "image", "link", "embed", "separator"):
        s.add_block(k)
    assert render_page(s.page) == render_page(s.page)


# ── Seed ─────────────────────────────────────────────────────────────────────

def test_demo_seed_renders():
    path = SEEDS_DIR / "demo_page.json"
    assert path.exists(), "seeds/demo_page.json introuvable"
    with open(path, encoding="utf-8") as f:
        page = Page.model_validate(json.load(f))
    html = render_page(page)
    assert "<title>Atelier Dupont</title>" in html
    assert "<p>Menuiserie sur mesure.<br>Devis gratuit.</p>" in html
    assert html.index("<h1>") < html.index("<hr>") < html.index("<h2>")
    assert len(re.findall(r"<iframe", html)) == 1
