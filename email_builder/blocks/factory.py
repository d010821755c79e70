"""
Factory des blocs par défaut — ce que la palette de l'éditeur dépose sur le canvas.
"""
from typing import TYPE_CHECKING

from .base import BlockStyles
from .button import ButtonBlock, ButtonContent
from .columns import ColumnsBlock, ColumnsContent
from .divider import DividerBlock, DividerContent
from .image import ImageBlock, ImageContent
from .product import ProductBlock, ProductContent
from .social import SocialBlock, SocialContent
from .spacer import SpacerBlock, SpacerContent
from .text import FooterBlock, HeaderBlock, TextBlock, TextContent

if TYPE_CHECKING:
    from . import Block

# (type, label) dans l'ordre de la palette
BLOCK_PALETTE = [
    ("text",    "Text"),
    ("image",   "Image"),
    ("button",  "Button"),
    ("divider", "Divider"),
    ("spacer",  "Spacer"),
    ("social",  "Social"),
    ("columns", "2 Columns"),
    ("header",  "Header"),
    ("footer",  "Footer"),
    ("product", "Product"),
]


def create_default_block(block_type: str) -> "Block":
    """
    Crée un bloc neuf (id frais) avec le contenu et les styles par défaut.
    Type inconnu → bloc texte "New block".
    """
    if block_type == "text":
        return TextBlock(
            content=TextContent(text="<p>Edit this text...</p>"),
            styles=BlockStyles(padding="20px", text_align="left", color="#000000",
                               font_size="16px", line_height="1.5"),
        )
    if block_type == "image":
        return ImageBlock(
            content=ImageContent(src="", alt="Image", width="100%", height="auto"),
            styles=BlockStyles(padding="10px", text_align="center"),
        )
    if block_type == "button":
        return ButtonBlock(
            content=ButtonContent(align="center"),
            styles=BlockStyles(padding="20px", text_align="center"),
        )
    if block_type == "divider":
        return DividerBlock(content=DividerContent(), styles=BlockStyles(padding="20px"))
    if block_type == "spacer":
        return SpacerBlock(content=SpacerContent(height="20px"))
    if block_type == "social":
        return SocialBlock(
            content=SocialContent(),
            styles=BlockStyles(padding="20px", text_align="center"),
        )
    if block_type == "columns":
        return ColumnsBlock(content=ColumnsContent(), styles=BlockStyles(padding="10px"))
    if block_type == "header":
        return HeaderBlock(
            content=TextContent(text="Your Company Name"),
            styles=BlockStyles(background_color="#0071e3", color="#ffffff", font_size="24px",
                               font_weight="bold", text_align="center", padding="24px"),
        )
    if block_type == "footer":
        return FooterBlock(
            content=TextContent(
                text="© 2024 Your Company. All rights reserved.\n\nUnsubscribe | Privacy Policy"
            ),
            styles=BlockStyles(background_color="#f5f5f5", color="#666666", font_size="12px",
                               text_align="center", padding="24px"),
        )
    if block_type == "product":
        return ProductBlock(
            content=ProductContent(description="Product description goes here.",
                                   button_border_radius="4px"),
            styles=BlockStyles(padding="20px", text_align="center", background_color="#ffffff"),
        )
    return TextBlock(content=TextContent(text="New block"), styles=BlockStyles(padding="16px"))
