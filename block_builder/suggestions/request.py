"""
Requête de suggestion — snapshot du bloc au lancement, commit conditionnel au retour.

Le résultat n'est appliqué que si le bloc existe encore et que son contenu n'a
pas changé entre-temps. Sinon il est écarté (résultat périmé).
"""
import logging
from typing import Any, Dict, Optional

from pydantic import BaseModel

from ..blocks import BaseBlock
from ..core.store import BlockStore
from .service import suggest_heading_level, suggest_image_alt_text
from .model import TextModel

log = logging.getLogger(__name__)

SUGGESTIBLE_KINDS = ("heading", "image")


class SuggestionRequest(BaseModel):
    block_id: str
    kind: str
    content: Dict[str, Any]

    @classmethod
    def start(cls, store: BlockStore, block_id: str) -> Optional["SuggestionRequest"]:
        """Snapshot du bloc. None si le bloc est absent."""
        block = store.get_block(block_id)
        if block is None:
            return None
        return cls(block_id=block.id, kind=block.kind, content=block.content.model_dump())

    def is_stale(self, store: BlockStore) -> bool:
        block = store.get_block(self.block_id)
        return block is None or block.content.model_dump() != self.content

    def merged(self, result: Any) -> Dict[str, Any]:
        """Contenu complet à écrire : snapshot + champ suggéré."""
        if self.kind == "heading":
            return {**self.content, "level": result}
        if self.kind == "image":
            return {**self.content, "alt": result}
        raise ValueError(f"Aucune suggestion pour le kind {self.kind!r}")

    def commit(self, store: BlockStore, result: Any) -> Optional[BaseBlock]:
        """Applique le résultat via update_block_content. None si périmé."""
        if self.is_stale(store):
            log.info("Suggestion périmée écartée pour le bloc %s", self.block_id)
            return None
        return store.update_block_content(self.block_id, self.merged(result))


async def run_suggestion(store: BlockStore, block_id: str, model: Optional[TextModel] = None) -> Optional[BaseBlock]:
    """
    Lance la suggestion adaptée au kind du bloc puis la commit.

    Returns:
        Le bloc mis à jour, None si le bloc est absent ou le résultat périmé

    Raises:
        ValueError: kind sans suggestion (paragraph, link...)
    """
    req = SuggestionRequest.start(store, block_id)
    if req is None:
        return None
    if req.kind == "heading":
        result = await suggest_heading_level(req.content["text"], model=model)
    elif req.kind == "image":
        result = await suggest_image_alt_text(req.content["src"], model=model)
    else:
        raise ValueError(f"Aucune suggestion pour le kind {req.kind!r}")
    return req.commit(store, result)
