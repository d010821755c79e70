"""
Bloc Columns — mise en page multi-colonnes.
Chaque Column contient une séquence ordonnée de blocs (récursif : BlockUnion
est résolu dans blocks/__init__.py via model_rebuild).
"""
from typing import TYPE_CHECKING, List, Literal

from pydantic import AliasChoices, Field

from .base import BaseBlock, BlockContent, EmailModel

if TYPE_CHECKING:
    from . import BlockUnion


class Column(EmailModel):
    """Colonne d'un bloc columns — n'existe que dans ColumnsContent.children."""
    blocks: List["BlockUnion"] = Field(default_factory=list)


def _two_columns() -> List[Column]:
    return [Column(), Column()]


class ColumnsContent(BlockContent):
    # "columns" : clé historique des templates déjà sauvegardés
    column_count: int = Field(
        default=2,
        validation_alias=AliasChoices("columnCount", "column_count", "columns"),
        serialization_alias="columnCount",
    )
    children: List[Column] = Field(default_factory=_two_columns)


class ColumnsBlock(BaseBlock):
    type: Literal["columns"] = "columns"
    content: ColumnsContent = Field(default_factory=ColumnsContent)
