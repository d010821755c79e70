"""
Blocs — exports publics + BlockUnion discriminé par `type`.
"""
from typing import Annotated, Union

from pydantic import Field

from .base import BaseBlock, BlockContent, BlockStyles, EmailModel, generate_id
from .text import TextBlock, HeaderBlock, FooterBlock, TextContent
from .image import ImageBlock, ImageContent
from .button import ButtonBlock, ButtonContent
from .divider import DividerBlock, DividerContent
from .spacer import SpacerBlock, SpacerContent
from .social import SocialBlock, SocialContent, SocialPlatform, SOCIAL_BASE_URLS
from .columns import ColumnsBlock, ColumnsContent, Column
from .product import ProductBlock, ProductContent
from .factory import BLOCK_PALETTE, create_default_block

# Union discriminée par type — utilisable dans Pydantic avec discriminator
BlockUnion = Annotated[
    Union[
        TextBlock,
        ImageBlock,
        ButtonBlock,
        DividerBlock,
        SpacerBlock,
        SocialBlock,
        ColumnsBlock,
        HeaderBlock,
        FooterBlock,
        ProductBlock,
    ],
    Field(discriminator="type"),
]

# Alias court pour les annotations
Block = BlockUnion

# Column référence BlockUnion (récursion) : résolution une fois l'union définie
Column.model_rebuild(force=True)
ColumnsContent.model_rebuild(force=True)
ColumnsBlock.model_rebuild(force=True)

BLOCK_REGISTRY: dict = {
    "text":    TextBlock,
    "image":   ImageBlock,
    "button":  ButtonBlock,
    "divider": DividerBlock,
    "spacer":  SpacerBlock,
    "social":  SocialBlock,
    "columns": ColumnsBlock,
    "header":  HeaderBlock,
    "footer":  FooterBlock,
    "product": ProductBlock,
}

__all__ = [
    # Base
    "BaseBlock", "BlockContent", "BlockStyles", "EmailModel", "generate_id",
    # Variantes
    "TextBlock", "HeaderBlock", "FooterBlock", "TextContent",
    "ImageBlock", "ImageContent",
    "ButtonBlock", "ButtonContent",
    "DividerBlock", "DividerContent",
    "SpacerBlock", "SpacerContent",
    "SocialBlock", "SocialContent", "SocialPlatform", "SOCIAL_BASE_URLS",
    "ColumnsBlock", "ColumnsContent", "Column",
    "ProductBlock", "ProductContent",
    # Union
    "BlockUnion", "Block", "BLOCK_REGISTRY",
    # Factory
    "BLOCK_PALETTE", "create_default_block",
]
