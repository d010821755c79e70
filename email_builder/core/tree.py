"""
Helpers génériques de parcours / reconstruction de l'arbre de blocs.

L'arbre est une valeur : aucune fonction ici ne modifie une liste ou un bloc
existant. Les reconstructions renvoient de nouvelles listes et de nouveaux
blocs columns ; les sous-arbres non touchés sont partagés tels quels.
"""
from typing import Callable, Iterator, List, NamedTuple, Optional, Tuple

from ..blocks import Block, ColumnsBlock, generate_id

Sequence = List[Block]


class BlockLocation(NamedTuple):
    """Position d'un bloc : parent_id None = niveau racine du document."""
    parent_id: Optional[str]
    column_index: Optional[int]
    index: int


# ── Lecture ──────────────────────────────────────────────────────────────────

def child_sequences(block: Block) -> List[Sequence]:
    """Séquences de blocs directement contenues par `block` (vide hors columns)."""
    if isinstance(block, ColumnsBlock):
        return [col.blocks for col in block.content.children]
    return []


def walk(blocks: Sequence, parent_id: Optional[str] = None,
         column_index: Optional[int] = None) -> Iterator[Tuple[Block, BlockLocation]]:
    """Parcours en profondeur, ordre d'affichage, avec la position de chaque bloc."""
    for i, block in enumerate(blocks):
        yield block, BlockLocation(parent_id, column_index, i)
        for col_idx, seq in enumerate(child_sequences(block)):
            yield from walk(seq, block.id, col_idx)


def iter_blocks(blocks: Sequence) -> Iterator[Block]:
    for block, _ in walk(blocks):
        yield block


def find_block(blocks: Sequence, block_id: str) -> Optional[Block]:
    for block in iter_blocks(blocks):
        if block.id == block_id:
            return block
    return None


def locate_block(blocks: Sequence, block_id: str) -> Optional[BlockLocation]:
    for block, location in walk(blocks):
        if block.id == block_id:
            return location
    return None


def collect_ids(blocks: Sequence) -> List[str]:
    return [block.id for block in iter_blocks(blocks)]


def count_blocks(blocks: Sequence) -> int:
    """Nombre total de blocs, toutes profondeurs confondues."""
    return sum(1 for _ in iter_blocks(blocks))


def has_unique_ids(blocks: Sequence) -> bool:
    ids = collect_ids(blocks)
    return len(ids) == len(set(ids))


def is_descendant(blocks: Sequence, ancestor_id: str, block_id: str) -> bool:
    """True si `block_id` est dans le sous-arbre de `ancestor_id` (lui-même exclu)."""
    ancestor = find_block(blocks, ancestor_id)
    if ancestor is None:
        return False
    return any(
        find_block(seq, block_id) is not None
        for seq in child_sequences(ancestor)
    )


# ── Reconstruction ───────────────────────────────────────────────────────────

def with_columns(block: ColumnsBlock, fn: Callable[[int, Sequence], Sequence]) -> ColumnsBlock:
    """Nouveau bloc columns dont chaque colonne i vaut fn(i, blocs de la colonne)."""
    children = [
        col.model_copy(update={"blocks": fn(i, col.blocks)})
        for i, col in enumerate(block.content.children)
    ]
    content = block.content.model_copy(update={"children": children})
    return block.model_copy(update={"content": content})


def map_sequences(blocks: Sequence, fn: Callable[[Sequence], Sequence]) -> Sequence:
    """
    Applique `fn` à chaque séquence de l'arbre (racine puis colonnes, récursivement).
    `fn` reçoit une liste et renvoie une nouvelle liste ; la descente se fait
    dans le résultat de `fn`.
    """
    result = []
    for block in fn(blocks):
        if isinstance(block, ColumnsBlock):
            block = with_columns(block, lambda _i, seq: map_sequences(seq, fn))
        result.append(block)
    return result


def map_blocks(blocks: Sequence, fn: Callable[[Block], Block]) -> Sequence:
    """Applique `fn` à chaque bloc de l'arbre, le parent avant ses descendants."""
    return map_sequences(blocks, lambda seq: [fn(b) for b in seq])


def refresh_ids(block: Block) -> Block:
    """Clone profond de `block` : nouvel id pour lui et pour chaque descendant."""
    clone = block.model_copy(update={"id": generate_id()})
    if isinstance(clone, ColumnsBlock):
        clone = with_columns(clone, lambda _i, seq: [refresh_ids(b) for b in seq])
    return clone