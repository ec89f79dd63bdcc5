"""
Registry des pages en cours d'édition — en mémoire uniquement, aucune persistance.
"""
import logging
import uuid
from typing import Dict, Optional

from .core.schemas import Page
from .core.store import BlockStore

log = logging.getLogger(__name__)


class PageRegistry:
    """page_id → BlockStore."""

    def __init__(self):
        self.stores: Dict[str, BlockStore] = {}

    def create(self, title: Optional[str] = None) -> "tuple[str, BlockStore]":
        page_id = uuid.uuid4().hex
        store = BlockStore(Page(title=title) if title is not None else None)
        self.stores[page_id] = store
        log.info("Page créée %s — %d pages en mémoire", page_id, len(self.stores))
        return page_id, store

    def get(self, page_id: str) -> Optional[BlockStore]:
        return self.stores.get(page_id)

    def delete(self, page_id: str) -> bool:
        if self.stores.pop(page_id, None) is None:
            return False
        log.info("Page supprimée %s — %d pages en mémoire", page_id, len(self.stores))
        return True


_REGISTRY = PageRegistry()


def get_registry() -> PageRegistry:
    return _REGISTRY
