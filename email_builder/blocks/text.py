"""Blocs texte — text, header, footer (même contenu, rendus identiques)."""
from typing import Literal

from pydantic import Field

from .base import BaseBlock, BlockContent


class TextContent(BlockContent):
    text: str = ""


class TextBlock(BaseBlock):
    type: Literal["text"] = "text"
    content: TextContent = Field(default_factory=TextContent)


class HeaderBlock(BaseBlock):
    type: Literal["header"] = "header"
    content: TextContent = Field(default_factory=TextContent)


class FooterBlock(BaseBlock):
    type: Literal["footer"] = "footer"
    content: TextContent = Field(default_factory=TextContent)
