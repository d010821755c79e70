"""
Router FastAPI — endpoints email_builder.

POST /email-builder/compile            → EmailTemplate → HTMLResponse
POST /email-builder/export             → EmailTemplate → HTML en pièce jointe
POST /email-builder/validate           → template JSON → {"valid": bool, "error"?}
GET  /email-builder/catalog            → palette + JSON schemas des blocs
GET  /email-builder/blocks/{type}/default → bloc neuf avec les valeurs par défaut
POST /email-builder/tree/{op}          → applique UNE mutation, renvoie {"blocks": [...]}

Chaque appel /tree/* correspond à une action utilisateur : le client remplace
son arbre par celui renvoyé.
"""
import logging
from typing import Any, Dict, List, Literal, Optional

from fastapi import APIRouter, Body, Depends, HTTPException
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import Field, ValidationError

from .blocks import BLOCK_PALETTE, BLOCK_REGISTRY, BlockUnion, EmailModel, create_default_block
from .config import CompilerSettings, get_settings
from .core import (
    duplicate_block,
    has_unique_ids,
    insert_block,
    move_adjacent,
    move_block,
    remove_block,
    update_block,
)
from .renderer.html import compile_document
from .template import EmailTemplate, dump_document, export_filename, parse_template

log = logging.getLogger(__name__)

router = APIRouter(prefix="/email-builder", tags=["email_builder"])


# ── Corps des requêtes /tree ─────────────────────────────────────────────────

class TreeRequest(EmailModel):
    blocks: List[BlockUnion] = Field(default_factory=list)


class InsertRequest(TreeRequest):
    block: BlockUnion
    parent_id: Optional[str] = None
    column_index: int = 0
    index: Optional[int] = None


class BlockRequest(TreeRequest):
    block_id: str


class UpdateRequest(BlockRequest):
    content: Optional[Dict[str, Any]] = None
    styles: Optional[Dict[str, Any]] = None


class MoveAdjacentRequest(BlockRequest):
    direction: Literal["up", "down"]


class MoveRequest(BlockRequest):
    parent_id: Optional[str] = None
    column_index: int = 0
    index: Optional[int] = None


def _tree(req: TreeRequest) -> list:
    """L'arbre reçu doit respecter l'unicité des ids avant toute mutation."""
    if not has_unique_ids(req.blocks):
        raise HTTPException(422, "Ids de blocs dupliqués dans l'arbre reçu")
    return list(req.blocks)


def _tree_response(blocks: list) -> dict:
    return {"blocks": dump_document(blocks)}


# ── Rendu ────────────────────────────────────────────────────────────────────

@router.post("/compile", response_class=HTMLResponse, summary="Compile un template en HTML email")
def compile_template(template: EmailTemplate,
                     settings: CompilerSettings = Depends(get_settings)) -> HTMLResponse:
    """Reçoit un EmailTemplate JSON, retourne le HTML complet de l'email."""
    html = compile_document(template.blocks, settings=settings, title=template.subject)
    return HTMLResponse(content=html)


@router.post("/export", response_class=HTMLResponse, summary="Exporte le HTML en fichier")
def export_template(template: EmailTemplate,
                    settings: CompilerSettings = Depends(get_settings)) -> HTMLResponse:
    html = compile_document(template.blocks, settings=settings, title=template.subject)
    filename = export_filename(template.name)
    log.info("Export HTML %s (%d octets)", filename, len(html))
    return HTMLResponse(
        content=html,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("/validate", summary="Valide un template sans le rendre")
def validate(payload: Dict[str, Any] = Body(...)) -> dict:
    """Valide la structure d'un template (types connus, forme, ids uniques)."""
    try:
        parse_template(payload)
        return {"valid": True}
    except (ValidationError, ValueError) as e:
        return {"valid": False, "error": str(e)}


# ── Catalogue ────────────────────────────────────────────────────────────────

@router.get("/catalog", summary="Liste les blocs disponibles et leurs schemas")
def catalog() -> JSONResponse:
    """Retourne la palette de blocs avec leurs JSON schemas Pydantic."""
    catalog_data = [
        {
            "type":   block_type,
            "label":  label,
            "schema": BLOCK_REGISTRY[block_type].model_json_schema(by_alias=True),
        }
        for block_type, label in BLOCK_PALETTE
    ]
    return JSONResponse({"blocks": catalog_data})


@router.get("/blocks/{block_type}/default", summary="Bloc neuf avec les valeurs par défaut")
def default_block(block_type: str) -> dict:
    if block_type not in BLOCK_REGISTRY:
        raise HTTPException(404, f"Type de bloc inconnu : {block_type}")
    return dump_document([create_default_block(block_type)])[0]


# ── Mutations ────────────────────────────────────────────────────────────────

@router.post("/tree/insert")
def tree_insert(req: InsertRequest) -> dict:
    return _tree_response(insert_block(_tree(req), req.block, req.parent_id, req.column_index, req.index))


@router.post("/tree/remove")
def tree_remove(req: BlockRequest) -> dict:
    return _tree_response(remove_block(_tree(req), req.block_id))


@router.post("/tree/update")
def tree_update(req: UpdateRequest) -> dict:
    return _tree_response(update_block(_tree(req), req.block_id, content=req.content, styles=req.styles))


@router.post("/tree/duplicate")
def tree_duplicate(req: BlockRequest) -> dict:
    return _tree_response(duplicate_block(_tree(req), req.block_id))


@router.post("/tree/move-adjacent")
def tree_move_adjacent(req: MoveAdjacentRequest) -> dict:
    return _tree_response(move_adjacent(_tree(req), req.block_id, req.direction))


@router.post("/tree/move")
def tree_move(req: MoveRequest) -> dict:
    return _tree_response(move_block(_tree(req), req.block_id, req.parent_id, req.column_index, req.index))
