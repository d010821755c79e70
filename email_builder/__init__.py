"""
Email Builder — document email par blocs + compilation en HTML autonome.

Usage :
    >>> from email_builder import create_default_block, insert_block, compile_document
    >>> tree = insert_block([], create_default_block("header"))
    >>> tree = insert_block(tree, create_default_block("columns"))
    >>> tree = insert_block(tree, create_default_block("button"), parent_id=tree[1].id, column_index=0)
    >>> html = compile_document(tree)

Usage (template persistant) :
    >>> from email_builder import parse_template, dump_template
    >>> template = parse_template(json_text)
    >>> html = compile_document(template.blocks, title=template.subject)
"""

# ── Blocs ────────────────────────────────────────────────────────────────────
from .blocks import (
    BaseBlock, BlockContent, BlockStyles, generate_id,
    TextBlock, HeaderBlock, FooterBlock, TextContent,
    ImageBlock, ImageContent,
    ButtonBlock, ButtonContent,
    DividerBlock, DividerContent,
    SpacerBlock, SpacerContent,
    SocialBlock, SocialContent, SocialPlatform,
    ColumnsBlock, ColumnsContent, Column,
    ProductBlock, ProductContent,
    Block, BlockUnion, BLOCK_REGISTRY,
    BLOCK_PALETTE, create_default_block,
)

# ── Arbre + mutations ────────────────────────────────────────────────────────
from .core import (
    Document, DocumentAdapter, BlockLocation,
    iter_blocks, find_block, locate_block, collect_ids, count_blocks,
    has_unique_ids, is_descendant, refresh_ids,
    insert_block, remove_block, update_block, duplicate_block,
    move_adjacent, move_block,
)

# ── Renderer ─────────────────────────────────────────────────────────────────
from .config import DEFAULT_SETTINGS, CompilerSettings, get_settings
from .renderer import compile_document, render_block

# ── Template ─────────────────────────────────────────────────────────────────
from .template import (
    EmailTemplate, load_document, parse_template,
    dump_document, dump_template, export_filename,
)

__version__ = "0.1.0"

__all__ = [
    # Blocs
    "BaseBlock", "BlockContent", "BlockStyles", "generate_id",
    "TextBlock", "HeaderBlock", "FooterBlock", "TextContent",
    "ImageBlock", "ImageContent",
    "ButtonBlock", "ButtonContent",
    "DividerBlock", "DividerContent",
    "SpacerBlock", "SpacerContent",
    "SocialBlock", "SocialContent", "SocialPlatform",
    "ColumnsBlock", "ColumnsContent", "Column",
    "ProductBlock", "ProductContent",
    "Block", "BlockUnion", "BLOCK_REGISTRY",
    "BLOCK_PALETTE", "create_default_block",
    # Arbre
    "Document", "DocumentAdapter", "BlockLocation",
    "iter_blocks", "find_block", "locate_block", "collect_ids", "count_blocks",
    "has_unique_ids", "is_descendant", "refresh_ids",
    "insert_block", "remove_block", "update_block", "duplicate_block",
    "move_adjacent", "move_block",
    # Renderer
    "CompilerSettings", "DEFAULT_SETTINGS", "get_settings", "compile_document", "render_block",
    # Template
    "EmailTemplate", "load_document", "parse_template",
    "dump_document", "dump_template", "export_filename",
]
