"""
Parser template — JSON (persistance) → EmailTemplate / Document validés.

C'est la seule frontière qui valide la forme de l'arbre : les mutations et le
renderer supposent un document bien formé.
"""
import json
import re
from typing import Any, List, Union

from ..blocks import BLOCK_REGISTRY
from ..core.schemas import Document, DocumentAdapter
from ..core.tree import collect_ids
from .schema import EmailTemplate

RawJSON = Union[str, bytes, dict, list]


def _loads(data: RawJSON) -> Any:
    if isinstance(data, (str, bytes)):
        return json.loads(data)
    return data


def _check_block_types(raw_blocks: Any, path: str = "blocks") -> None:
    """Parcourt les blocs bruts et lève ValueError au premier type inconnu."""
    if not isinstance(raw_blocks, list):
        return
    for i, raw in enumerate(raw_blocks):
        if not isinstance(raw, dict):
            continue
        block_type = raw.get("type")
        if block_type not in BLOCK_REGISTRY:
            raise ValueError(
                f"Bloc inconnu : {block_type!r} ({path}[{i}]). Registry : {list(BLOCK_REGISTRY)}"
            )
        if block_type == "columns":
            content = raw.get("content") or {}
            for c, col in enumerate(content.get("children") or []):
                if isinstance(col, dict):
                    _check_block_types(col.get("blocks"), f"{path}[{i}].children[{c}].blocks")


def _check_unique_ids(blocks: Document) -> None:
    seen, dupes = set(), []
    for block_id in collect_ids(blocks):
        if block_id in seen:
            dupes.append(block_id)
        seen.add(block_id)
    if dupes:
        raise ValueError(f"Ids de blocs dupliqués : {sorted(set(dupes))}")


def load_document(data: RawJSON) -> Document:
    """Block[] JSON (liste ou chaîne) → Document validé."""
    raw = _loads(data)
    _check_block_types(raw)
    blocks = DocumentAdapter.validate_python(raw)
    _check_unique_ids(blocks)
    return blocks


def parse_template(data: RawJSON) -> EmailTemplate:
    """
    Template JSON → EmailTemplate.

    1. Vérifie que chaque bloc (à toute profondeur) a un type connu
    2. Valide la forme via Pydantic (ValidationError si invalide)
    3. Vérifie l'unicité globale des ids
    """
    raw = _loads(data)
    if isinstance(raw, dict):
        _check_block_types(raw.get("blocks"))
    template = EmailTemplate.model_validate(raw)
    _check_unique_ids(template.blocks)
    return template


def dump_document(blocks: Document) -> List[dict]:
    """Document → valeur JSON-sérialisable (clés camelCase)."""
    return DocumentAdapter.dump_python(blocks, mode="json", by_alias=True, exclude_none=True)


def dump_template(template: EmailTemplate) -> dict:
    return template.model_dump(mode="json", by_alias=True, exclude_none=True)


def export_filename(name: str) -> str:
    """Nom du fichier HTML exporté : "Ma newsletter" → "Ma_newsletter.html"."""
    stem = re.sub(r"\s+", "_", name.strip()) or "email"
    return f"{stem}.html"
