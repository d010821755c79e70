"""Bloc Image — image hébergée (URL fournie par la couche assets)."""
from typing import Literal, Optional

from pydantic import Field

from .base import BaseBlock, BlockContent


class ImageContent(BlockContent):
    src: str = ""
    alt: str = "Image"
    width: str = "100%"
    height: str = "auto"
    link: Optional[str] = None


class ImageBlock(BaseBlock):
    type: Literal["image"] = "image"
    content: ImageContent = Field(default_factory=ImageContent)
