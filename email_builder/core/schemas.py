"""
Schémas du document email.
Structure récursive : Document → Block → (columns) Column → Block …
"""
from typing import List

from pydantic import TypeAdapter

from ..blocks import BlockUnion

# Le document est la séquence ordonnée des blocs racine (haut → bas)
Document = List[BlockUnion]

DocumentAdapter: TypeAdapter = TypeAdapter(Document)
