"""
Blocs de base — id immuable + kind figé + content typé par kind.
"""
from pydantic import BaseModel, ConfigDict, Field


class BlockContent(BaseModel):
    """Contenu d'un bloc. Remplacé en entier à chaque édition, jamais fusionné."""
    model_config = ConfigDict(extra="forbid", frozen=True)


class BaseBlock(BaseModel):
    """Bloc de base (classe parente de tous les blocs)."""
    model_config = ConfigDict(validate_assignment=True)

    id: str = Field(..., frozen=True, description="Identifiant opaque, unique dans la page")
    kind: str = Field(..., frozen=True)
    content: BlockContent
