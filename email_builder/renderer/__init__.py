"""Renderer — compilation Document → HTML email."""
from .html import compile_document, render_block
from .styles import DEFAULT_STYLES

__all__ = ["compile_document", "render_block", "DEFAULT_STYLES"]
