"""
Renderer HTML — génère le document HTML complet d'une Page.
Fonctions pures : même page → même chaîne, octet pour octet.

Aucun échappement : textes, href et code embed sont injectés tels quels
(auteur unique et local, hypothèse de confiance assumée).
"""
import logging
from typing import Callable, Dict

from ..blocks import (
    BLOCK_REGISTRY, BaseBlock,
    HeadingBlock, ParagraphBlock, ImageBlock, LinkBlock, EmbedBlock, SeparatorBlock,
)
from ..core.schemas import Page
from .css import PAGE_CSS

log = logging.getLogger(__name__)


# ── Point d'entrée public ───────────────────────────────────────────────────

def render_page(page: Page) -> str:
    """Génère le HTML complet d'une page."""
    body = "\n".join(render_block(b) for b in page.blocks)

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{page.title}</title>
  <style>
{PAGE_CSS}
  </style>
</head>
<body>
{body}
</body>
</html>"""


# ── Dispatch bloc ────────────────────────────────────────────────────────────

def render_block(block: BaseBlock) -> str:
    """Fragment HTML d'un bloc. Kind inconnu → chaîne vide."""
    renderer = _RENDERERS.get(getattr(block, "kind", None))
    if renderer is None:
        log.warning("Bloc non rendu, kind inconnu : %r", getattr(block, "kind", None))
        return ""
    return renderer(block)


# ── Renderers par kind ───────────────────────────────────────────────────────

def render_heading_block(b: HeadingBlock) -> str:
    level = b.content.level
    if not isinstance(level, int) or not 1 <= level <= 6:
        raise ValueError(f"Niveau de titre hors limites : {level!r} (bloc {b.id})")
    return f"<h{level}>{b.content.text}</h{level}>"


def render_paragraph_block(b: ParagraphBlock) -> str:
    return f"<p>{b.content.text.replace(chr(10), '<br>')}</p>"


def render_link_block(b: LinkBlock) -> str:
    d = b.content
    text = d.text or d.href
    if not text:
        return ""
    return f'<p><a href="{d.href or "#"}" target="_blank" rel="noopener noreferrer">{text}</a></p>'


def render_image_block(b: ImageBlock) -> str:
    # src vide → image cassée, pas de fallback
    d = b.content
    return f'<img src="{d.src}" alt="{d.alt}" style="max-width: 100%; height: auto; margin: 1rem 0;">'


def render_embed_block(b: EmbedBlock) -> str:
    return f'<div class="embed-container">{b.content.code}</div>'


def render_separator_block(b: SeparatorBlock) -> str:
    return "<hr>"


_RENDERERS: Dict[str, Callable[..., str]] = {
    "heading":   render_heading_block,
    "paragraph": render_paragraph_block,
    "link":      render_link_block,
    "image":     render_image_block,
    "embed":     render_embed_block,
    "separator": render_separator_block,
}

if set(_RENDERERS) != set(BLOCK_REGISTRY):
    raise RuntimeError(f"Renderer manquant pour : {sorted(set(BLOCK_REGISTRY) - set(_RENDERERS))}")
