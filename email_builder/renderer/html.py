"""
Renderer HTML — compile un Document en email HTML autonome.

Mise en page à base de <table> et styles inline uniquement (contraintes des
clients mail). Fonction pure : même arbre → même sortie, octet pour octet.
"""
import logging
from typing import Any, Optional

from ..blocks import (
    ButtonBlock,
    ColumnsBlock,
    DividerBlock,
    FooterBlock,
    HeaderBlock,
    ImageBlock,
    ProductBlock,
    SocialBlock,
    SpacerBlock,
    TextBlock,
)
from ..config import DEFAULT_SETTINGS, CompilerSettings
from ..core.schemas import Document
from .styles import attr, base_style, text_style

log = logging.getLogger(__name__)


# ── Point d'entrée public ───────────────────────────────────────────────────

def compile_document(blocks: Document, settings: Optional[CompilerSettings] = None,
                     title: Optional[str] = None) -> str:
    """Génère le HTML complet de l'email (squelette + blocs racine dans l'ordre)."""
    settings = settings or DEFAULT_SETTINGS
    blocks_html = "".join(render_block(b, settings) for b in blocks)
    page_title = attr(title if title is not None else settings.title)

    return f"""<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{page_title}</title>
</head>
<body style="margin: 0; padding: 0; font-family: {settings.font_family};">
  <table width="100%" cellpadding="0" cellspacing="0" style="background-color: {settings.page_background};">
    <tr>
      <td align="center" style="padding: 40px 20px;">
        <table width="{settings.container_width}" cellpadding="0" cellspacing="0" style="background-color: {settings.container_background}; border-radius: 8px; overflow: hidden; box-shadow: 0 2px 8px rgba(0,0,0,0.1);">
          <tr>
            <td>
              {blocks_html}
            </td>
          </tr>
        </table>
      </td>
    </tr>
  </table>
</body>
</html>"""


# ── Dispatch bloc ────────────────────────────────────────────────────────────

def render_block(block: Any, settings: Optional[CompilerSettings] = None) -> str:
    """Dispatch vers le renderer de la variante. Type inconnu → chaîne vide."""
    if isinstance(block, (TextBlock, HeaderBlock, FooterBlock)): return render_text_block(block)
    if isinstance(block, ImageBlock):   return render_image_block(block)
    if isinstance(block, ButtonBlock):  return render_button_block(block)
    if isinstance(block, DividerBlock): return render_divider_block(block)
    if isinstance(block, SpacerBlock):  return render_spacer_block(block)
    if isinstance(block, SocialBlock):  return render_social_block(block, settings or DEFAULT_SETTINGS)
    if isinstance(block, ColumnsBlock): return render_columns_block(block, settings or DEFAULT_SETTINGS)
    if isinstance(block, ProductBlock): return render_product_block(block)

    log.warning("Bloc non rendu (type inconnu) : %r", getattr(block, "type", type(block).__name__))
    return ""


# ── Renderers par variante ───────────────────────────────────────────────────

def render_text_block(b) -> str:
    text = str(b.content.text or "").replace("\n", "<br>")
    return f'<div style="{text_style(b.styles)}">{text}</div>'


def render_image_block(b: ImageBlock) -> str:
    c = b.content
    if not c.src:
        # Emplacement réservé tant qu'aucun asset n'est choisi
        return (
            f'<div style="{base_style(b.styles)}">'
            f'<div style="background-color: #f0f0f0; color: #999999; padding: 40px 0; '
            f'text-align: center; font-size: 14px;">{attr(c.alt or "Image")}</div>'
            f'</div>'
        )

    height = f" height: {c.height};" if c.height and c.height != "auto" else ""
    img = (
        f'<img src="{attr(c.src)}" alt="{attr(c.alt)}" '
        f'style="width: {c.width}; max-width: 100%;{height} display: block; margin: 0 auto; border: 0;">'
    )
    if c.link:
        img = f'<a href="{attr(c.link)}" target="_blank">{img}</a>'
    return f'<div style="{base_style(b.styles)}">{img}</div>'


def render_button_block(b: ButtonBlock) -> str:
    c = b.content
    return (
        f'<div style="{base_style(b.styles, text_align=c.align)}">'
        f'<a href="{attr(c.url)}" style="display: inline-block; padding: 12px 24px; '
        f'background-color: {c.background_color}; color: {c.text_color}; '
        f'border-radius: {c.border_radius}; text-decoration: none; font-weight: 600;">'
        f'{c.text}</a>'
        f'</div>'
    )


def render_divider_block(b: DividerBlock) -> str:
    c = b.content
    return (
        f'<div style="{base_style(b.styles)}">'
        f'<hr style="border: none; border-top: {c.thickness} solid {c.color}; margin: 0;">'
        f'</div>'
    )


def render_spacer_block(b: SpacerBlock) -> str:
    height = b.content.height
    return f'<div style="height: {height}; line-height: {height}; font-size: 1px;">&nbsp;</div>'


def render_social_block(b: SocialBlock, settings: CompilerSettings) -> str:
    links = []
    for platform in b.content.platforms:
        if not platform.enabled:
            continue
        icon = settings.social_icons.get(platform.name)
        if icon:
            inner = (
                f'<img src="{attr(icon)}" alt="{attr(platform.name)}" width="24" height="24" '
                f'style="width: 24px; height: 24px; display: block; border: 0;">'
            )
        else:
            inner = attr(platform.name)
        links.append(
            f'<a href="{attr(platform.href)}" target="_blank" '
            f'style="display: inline-block; text-decoration: none; margin: 0 8px;">{inner}</a>'
        )
    return f'<div style="{base_style(b.styles)}">{"".join(links)}</div>'


def render_columns_block(b: ColumnsBlock, settings: CompilerSettings) -> str:
    c = b.content
    count = c.column_count if c.column_count and c.column_count > 0 else (len(c.children) or 1)
    width = f"{100 / count:g}%"

    cells = "".join(
        f'<td width="{width}" valign="top" style="vertical-align: top;">'
        f'{"".join(render_block(child, settings) for child in col.blocks)}'
        f'</td>'
        for col in c.children
    )
    return (
        f'<table width="100%" cellpadding="0" cellspacing="0" '
        f'style="{base_style(b.styles)} table-layout: fixed;">'
        f'<tr>{cells}</tr>'
        f'</table>'
    )


def render_product_block(b: ProductBlock) -> str:
    c = b.content
    image_row = ""
    if c.image:
        image_row = (
            f'<tr><td style="padding: 0;">'
            f'<img src="{attr(c.image)}" alt="{attr(c.title)}" style="width: 100%; height: auto; display: block;">'
            f'</td></tr>'
        )
    radius = c.button_border_radius or "4px"

    return f"""<div style="{base_style(b.styles, text_align="center")}">
  <table width="100%" cellpadding="0" cellspacing="0" style="max-width: 300px; margin: 0 auto; border: 1px solid #e5e5e5; border-radius: 8px; overflow: hidden; background-color: #ffffff;">
    {image_row}
    <tr>
      <td style="padding: 20px;">
        <h3 style="margin: 0 0 8px 0; font-size: 18px; color: #333333;">{c.title}</h3>
        <p style="margin: 0 0 12px 0; font-size: 18px; font-weight: bold; color: #0071e3;">{c.price}</p>
        <p style="margin: 0 0 20px 0; font-size: 14px; color: #666666;">{c.description}</p>
        <a href="{attr(c.button_url)}" style="display: inline-block; padding: 10px 20px; background-color: {c.button_color}; color: {c.button_text_color}; border-radius: {radius}; text-decoration: none; font-weight: 600;">{c.button_text}</a>
      </td>
    </tr>
  </table>
</div>"""
