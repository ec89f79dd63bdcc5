"""Core module pour block_builder."""
from .schemas import Page
from .store import BlockStore, Direction, uuid_id

__all__ = [
    "Page",
    "BlockStore",
    "Direction",
    "uuid_id",
]
