"""Core — document, helpers d'arbre et mutations."""
from .schemas import Document, DocumentAdapter
from .tree import (
    BlockLocation,
    child_sequences,
    collect_ids,
    count_blocks,
    find_block,
    has_unique_ids,
    is_descendant,
    iter_blocks,
    locate_block,
    refresh_ids,
    walk,
)
from .mutations import (
    duplicate_block,
    insert_block,
    move_adjacent,
    move_block,
    remove_block,
    update_block,
)

__all__ = [
    "Document", "DocumentAdapter",
    "BlockLocation", "child_sequences", "collect_ids", "count_blocks", "find_block",
    "has_unique_ids", "is_descendant", "iter_blocks", "locate_block", "refresh_ids", "walk",
    "insert_block", "remove_block", "update_block", "duplicate_block",
    "move_adjacent", "move_block",
]
