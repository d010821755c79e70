"""Bloc Product — carte produit (image, titre, prix, description, CTA)."""
from typing import Literal, Optional

from pydantic import Field

from .base import BaseBlock, BlockContent


class ProductContent(BlockContent):
    product_id: Optional[str] = None
    image: Optional[str] = None
    title: str = "Product Name"
    price: str = "$0.00"
    description: str = ""
    button_text: str = "Buy Now"
    button_url: str = "#"
    button_color: str = "#0071e3"
    button_text_color: str = "#ffffff"
    button_border_radius: Optional[str] = None


class ProductBlock(BaseBlock):
    type: Literal["product"] = "product"
    content: ProductContent = Field(default_factory=ProductContent)
