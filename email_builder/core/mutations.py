"""
Mutations de l'arbre — fonctions pures (tree, args) → nouveau tree.

Aucune mutation ne lève d'exception : une référence introuvable (id périmé,
double événement UI…) renvoie l'arbre reçu, inchangé. Les invariants
(ids uniques, ordre des frères, content/styles toujours présents) sont
vérifiés avant de renvoyer un nouvel arbre ; une opération qui les violerait
est refusée de la même façon.
"""
import logging
from typing import Any, Dict, Literal, Optional, Union

from pydantic import AliasChoices, BaseModel, ValidationError

from ..blocks import Block, ColumnsBlock
from .tree import (
    Sequence,
    child_sequences,
    collect_ids,
    find_block,
    has_unique_ids,
    is_descendant,
    locate_block,
    map_blocks,
    map_sequences,
    refresh_ids,
    with_columns,
)

log = logging.getLogger(__name__)

Direction = Literal["up", "down"]
Partial = Union[Dict[str, Any], BaseModel, None]


# ── Helpers ──────────────────────────────────────────────────────────────────

def _spliced(seq: Sequence, block: Block, index: Optional[int]) -> Sequence:
    result = list(seq)
    result.insert(len(result) if index is None else index, block)
    return result


def _column_exists(parent: Optional[Block], column_index: int) -> bool:
    return (isinstance(parent, ColumnsBlock)
            and 0 <= column_index < len(parent.content.children))


def _dump_keys(model_cls) -> Dict[str, str]:
    """Toute clé acceptée en entrée (nom, alias, alias de validation) → clé du dump."""
    keys = {}
    for name, field in model_cls.model_fields.items():
        target = field.serialization_alias or field.alias or name
        keys[name] = target
        if field.alias:
            keys[field.alias] = target
        choices = field.validation_alias
        if isinstance(choices, str):
            keys[choices] = target
        elif isinstance(choices, AliasChoices):
            for choice in choices.choices:
                if isinstance(choice, str):
                    keys[choice] = target
    return keys


def _shallow_merge(model: BaseModel, partial: Partial) -> BaseModel:
    """Nouveau modèle = champs de `model` écrasés par `partial` (1 niveau)."""
    if partial is None:
        return model
    if isinstance(partial, BaseModel):
        partial = partial.model_dump(by_alias=True, exclude_unset=True)
    if not partial:
        return model
    keys = _dump_keys(type(model))
    data = model.model_dump(by_alias=True)
    data.update({keys.get(k, k): v for k, v in partial.items()})
    return type(model).model_validate(data)


# ── Mutations ────────────────────────────────────────────────────────────────

def insert_block(tree: Sequence, new_block: Block, parent_id: Optional[str] = None,
                 column_index: int = 0, index: Optional[int] = None) -> Sequence:
    """
    Insère `new_block` à la racine (parent_id None) ou dans la colonne
    `column_index` du bloc columns `parent_id`, à la position `index`
    (None = à la fin).

    No-op si le parent est introuvable, n'est pas un bloc columns, si la
    colonne n'existe pas, ou si un id de `new_block` existe déjà dans l'arbre.
    """
    if set(collect_ids([new_block])) & set(collect_ids(tree)):
        log.debug("insert_block : id %s déjà présent — arbre inchangé", new_block.id)
        return tree

    if parent_id is None:
        return _spliced(tree, new_block, index)

    if not _column_exists(find_block(tree, parent_id), column_index):
        log.debug("insert_block : colonne %s[%s] introuvable — arbre inchangé", parent_id, column_index)
        return tree

    def place(block: Block) -> Block:
        if block.id != parent_id:
            return block
        return with_columns(
            block,
            lambda i, seq: _spliced(seq, new_block, index) if i == column_index else seq,
        )

    return map_blocks(tree, place)


def remove_block(tree: Sequence, block_id: str) -> Sequence:
    """Retire le bloc (et tout son sous-arbre s'il s'agit d'un columns)."""
    if find_block(tree, block_id) is None:
        log.debug("remove_block : bloc %s introuvable — arbre inchangé", block_id)
        return tree
    return map_sequences(tree, lambda seq: [b for b in seq if b.id != block_id])


def update_block(tree: Sequence, block_id: str, content: Partial = None,
                 styles: Partial = None) -> Sequence:
    """
    Merge superficiel de `content` et `styles` dans le bloc `block_id`.

    Les clés inconnues sont conservées telles quelles (le renderer les ignore).
    Une valeur de type invalide pour la variante, ou des enfants columns qui
    dupliqueraient des ids, rendent l'arbre inchangé.
    """
    target = find_block(tree, block_id)
    if target is None:
        log.debug("update_block : bloc %s introuvable — arbre inchangé", block_id)
        return tree

    try:
        updated = target.model_copy(update={
            "content": _shallow_merge(target.content, content),
            "styles":  _shallow_merge(target.styles, styles),
        })
    except ValidationError as exc:
        log.debug("update_block : mise à jour refusée pour %s (%s)", block_id, exc.error_count())
        return tree

    result = map_blocks(tree, lambda b: updated if b.id == block_id else b)
    if isinstance(updated, ColumnsBlock) and not has_unique_ids(result):
        log.debug("update_block : ids dupliqués dans les colonnes de %s — arbre inchangé", block_id)
        return tree
    return result


def duplicate_block(tree: Sequence, block_id: str) -> Sequence:
    """
    Clone le bloc juste après l'original, dans la même séquence.
    Le clone et tous ses descendants reçoivent des ids neufs.
    """
    original = find_block(tree, block_id)
    if original is None:
        log.debug("duplicate_block : bloc %s introuvable — arbre inchangé", block_id)
        return tree

    clone = refresh_ids(original)

    def after_original(seq: Sequence) -> Sequence:
        result = []
        for block in seq:
            result.append(block)
            if block.id == block_id:
                result.append(clone)
        return result

    return map_sequences(tree, after_original)


def move_adjacent(tree: Sequence, block_id: str, direction: Direction) -> Sequence:
    """
    Échange le bloc avec son voisin immédiat (haut/bas) dans sa séquence.
    Premier bloc vers le haut / dernier vers le bas → arbre inchangé.
    """
    location = locate_block(tree, block_id)
    if location is None or direction not in ("up", "down"):
        log.debug("move_adjacent : %s (%s) impossible — arbre inchangé", block_id, direction)
        return tree

    if location.parent_id is None:
        siblings = tree
    else:
        siblings = child_sequences(find_block(tree, location.parent_id))[location.column_index]

    i = location.index
    j = i - 1 if direction == "up" else i + 1
    if not 0 <= j < len(siblings):
        return tree

    def swap(seq: Sequence) -> Sequence:
        if len(seq) > i and seq[i].id == block_id:
            seq = list(seq)
            seq[i], seq[j] = seq[j], seq[i]
        return seq

    return map_sequences(tree, swap)


def move_block(tree: Sequence, block_id: str, parent_id: Optional[str] = None,
               column_index: int = 0, index: Optional[int] = None) -> Sequence:
    """
    Déplace un bloc existant vers une autre séquence (drag & drop).
    `index` s'entend dans l'arbre après retrait du bloc.

    Refusé si la cible est le bloc lui-même ou l'un de ses descendants.
    """
    block = find_block(tree, block_id)
    if block is None:
        log.debug("move_block : bloc %s introuvable — arbre inchangé", block_id)
        return tree

    if parent_id is not None:
        if parent_id == block_id or is_descendant(tree, block_id, parent_id):
            log.debug("move_block : %s ne peut pas entrer dans son propre sous-arbre", block_id)
            return tree
        if not _column_exists(find_block(tree, parent_id), column_index):
            log.debug("move_block : colonne %s[%s] introuvable — arbre inchangé", parent_id, column_index)
            return tree

    return insert_block(remove_block(tree, block_id), block, parent_id, column_index, index)
