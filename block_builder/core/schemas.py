"""
Schémas Pydantic pour le Block Builder.
Structure plate : Page → liste ordonnée de blocs (l'ordre de la liste = ordre de rendu).
"""
from typing import List
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..blocks import BlockUnion
from ..config import DEFAULT_PAGE_TITLE


class Page(BaseModel):
    """Page complète : titre + blocs ordonnés."""
    model_config = ConfigDict(validate_assignment=True)

    title: str = DEFAULT_PAGE_TITLE
    blocks: List[BlockUnion] = Field(default_factory=list)

    @field_validator("blocks")
    @classmethod
    def _unique_ids(cls, blocks):
        seen = set()
        for b in blocks:
            if b.id in seen:
                raise ValueError(f"id de bloc en double : {b.id!r}")
            seen.add(b.id)
        return blocks

    @property
    def is_blank(self) -> bool:
        """Rien à générer : aucun bloc et titre vide."""
        return not self.blocks and not self.title.strip()
