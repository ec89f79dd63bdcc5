"""
Blocs — exports publics + BlockUnion discriminé par `kind`.
"""
from typing import Annotated, Dict, Literal, Type, Union, get_args
from pydantic import Field

from .base import BaseBlock, BlockContent
from .heading import HeadingBlock, HeadingContent
from .paragraph import ParagraphBlock, ParagraphContent
from .image import ImageBlock, ImageContent
from .link import LinkBlock, LinkContent
from .embed import EmbedBlock, EmbedContent
from .separator import SeparatorBlock, SeparatorContent

BlockKind = Literal["heading", "paragraph", "image", "link", "embed", "separator"]

# Union discriminée par kind — utilisable dans Pydantic avec discriminator
BlockUnion = Annotated[
    Union[
        HeadingBlock,
        ParagraphBlock,
        ImageBlock,
        LinkBlock,
        EmbedBlock,
        SeparatorBlock,
    ],
    Field(discriminator="kind"),
]

BLOCK_REGISTRY: Dict[str, Type[BaseBlock]] = {
    cls.model_fields["kind"].default: cls
    for cls in get_args(get_args(BlockUnion)[0])
}

# Entrées du menu "ajouter un bloc", dans l'ordre d'affichage
BLOCK_MENU = [
    ("Heading",        "heading"),
    ("Paragraph",      "paragraph"),
    ("Link",           "link"),
    ("Image",          "image"),
    ("Embed HTML",     "embed"),
    ("Separator Line", "separator"),
]

if set(BLOCK_REGISTRY) != set(get_args(BlockKind)):
    raise RuntimeError(f"BlockUnion et BlockKind divergent : {sorted(BLOCK_REGISTRY)}")


def new_block(kind: str, block_id: str) -> BaseBlock:
    """Instancie un bloc du kind donné avec son contenu par défaut."""
    block_cls = BLOCK_REGISTRY.get(kind)
    if block_cls is None:
        raise ValueError(f"Bloc inconnu : {kind!r}. Registry : {list(BLOCK_REGISTRY)}")
    return block_cls(id=block_id)


__all__ = [
    "BaseBlock", "BlockContent",
    "HeadingBlock", "HeadingContent",
    "ParagraphBlock", "ParagraphContent",
    "ImageBlock", "ImageContent",
    "LinkBlock", "LinkContent",
    "EmbedBlock", "EmbedContent",
    "SeparatorBlock", "SeparatorContent",
    "BlockKind", "BlockUnion", "BLOCK_REGISTRY", "BLOCK_MENU",
    "new_block",
]
