"""
Styles inline — valeurs par défaut + sérialisation en attribut style="…".

Les clients mail ignorent les feuilles externes : tout est inliné bloc par bloc.
"""
from html import escape
from typing import Optional

from ..blocks import BlockStyles

# Défauts appliqués quand un champ de BlockStyles est absent
DEFAULT_STYLES = {
    "background_color": "transparent",
    "padding":          "16px",
    "text_align":       "left",
    "color":            "#333333",
    "font_size":        "16px",
    "font_weight":      "normal",
    "line_height":      "1.5",
}


def style_value(styles: Optional[BlockStyles], name: str) -> str:
    value = getattr(styles, name, None) if styles is not None else None
    if value is None or value == "":
        return DEFAULT_STYLES[name]
    return str(value)


def base_style(styles: Optional[BlockStyles], text_align: Optional[str] = None) -> str:
    """Fond + padding + alignement — commun à tous les blocs."""
    align = text_align or style_value(styles, "text_align")
    return (
        f"background-color: {style_value(styles, 'background_color')}; "
        f"padding: {style_value(styles, 'padding')}; "
        f"text-align: {align};"
    )


def text_style(styles: Optional[BlockStyles]) -> str:
    """base_style + typographie (text / header / footer)."""
    return (
        f"{base_style(styles)} "
        f"font-size: {style_value(styles, 'font_size')}; "
        f"color: {style_value(styles, 'color')}; "
        f"font-weight: {style_value(styles, 'font_weight')}; "
        f"line-height: {style_value(styles, 'line_height')};"
    )


def attr(value) -> str:
    """Échappe une valeur d'attribut HTML (URL, alt…)."""
    return escape("" if value is None else str(value), quote=True)
