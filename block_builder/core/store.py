"""
Block Store — séquence ordonnée de blocs + titre, opérations de mutation.

Politique "introuvable" : no-op silencieux partout. L'appelant le détecte
uniquement via la valeur de retour (None / False), jamais via une exception.
Chaque opération s'applique entièrement ou laisse le store inchangé.
"""
import logging
import uuid
from typing import Any, Callable, Literal, Optional

from ..blocks import BaseBlock, BlockContent, new_block
from .schemas import Page

log = logging.getLogger(__name__)

Direction = Literal["up", "down"]


def uuid_id() -> str:
    return str(uuid.uuid4())


class BlockStore:
    """
    Store d'une page en cours d'édition.

    Usage:
        >>> store = BlockStore()
        >>> block = store.add_block("heading")
        >>> store.update_block_content(block.id, {"text": "Bonjour", "level": 2})
        >>> store.move_block(block.id, "down")
    """

    def __init__(self, page: Optional[Page] = None, id_factory: Callable[[], str] = uuid_id):
        self.page = page if page is not None else Page()
        self.id_factory = id_factory

    # ── Lecture ──────────────────────────────────────────────────────────────

    @property
    def blocks(self) -> list:
        """Copie de la séquence : les ajouts passent par add_block."""
        return list(self.page.blocks)

    def _index(self, block_id: str) -> int:
        for i, b in enumerate(self.page.blocks):
            if b.id == block_id:
                return i
        return -1

    def get_block(self, block_id: str) -> Optional[BaseBlock]:
        i = self._index(block_id)
        return self.page.blocks[i] if i >= 0 else None

    def snapshot(self) -> Page:
        """Copie profonde de la page (générateur, requêtes de suggestion)."""
        return self.page.model_copy(deep=True)

    # ── Mutations ────────────────────────────────────────────────────────────

    def add_block(self, kind: str) -> BaseBlock:
        """Crée un bloc du kind donné (contenu par défaut) et l'ajoute en fin de page."""
        block_id = self.id_factory()
        if self._index(block_id) >= 0:
            raise ValueError(f"id de bloc déjà utilisé : {block_id!r}")
        block = new_block(kind, block_id)
        self.page.blocks.append(block)
        log.debug("Bloc ajouté %s (%s) — %d blocs", block.id, kind, len(self.page.blocks))
        return block

    def update_block_content(self, block_id: str, new_content: Any) -> Optional[BaseBlock]:
        """
        Remplace entièrement le content du bloc.

        Args:
            block_id: id du bloc
            new_content: dict ou BlockContent complet pour le kind du bloc

        Returns:
            Le bloc mis à jour, None si l'id est absent (no-op)

        Raises:
            pydantic.ValidationError: contenu de forme invalide (bloc inchangé)
        """
        block = self.get_block(block_id)
        if block is None:
            log.debug("update ignoré — bloc %s introuvable", block_id)
            return None
        if isinstance(new_content, BlockContent):
            new_content = new_content.model_dump()
        block.content = new_content
        return block

    def delete_block(self, block_id: str) -> bool:
        i = self._index(block_id)
        if i < 0:
            log.debug("delete ignoré — bloc %s introuvable", block_id)
            return False
        del self.page.blocks[i]
        log.debug("Bloc supprimé %s — %d blocs", block_id, len(self.page.blocks))
        return True

    def move_block(self, block_id: str, direction: Direction) -> bool:
        """Échange le bloc avec son voisin immédiat. No-op en bordure ou si absent."""
        if direction not in ("up", "down"):
            raise ValueError(f"Direction inconnue : {direction!r}")
        i = self._index(block_id)
        if i < 0:
            return False
        j = i - 1 if direction == "up" else i + 1
        if j < 0 or j >= len(self.page.blocks):
            return False
        blocks = self.page.blocks
        blocks[i], blocks[j] = blocks[j], blocks[i]
        return True

    def set_title(self, title: str) -> None:
        self.page.title = title
