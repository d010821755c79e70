"""Bloc Button — lien stylé façon bouton."""
from typing import Literal, Optional

from pydantic import Field

from .base import BaseBlock, BlockContent


class ButtonContent(BlockContent):
    text: str = "Click Me"
    url: str = "#"
    background_color: str = "#0071e3"
    text_color: str = "#ffffff"
    border_radius: str = "4px"
    align: Optional[Literal["left", "center", "right"]] = None


class ButtonBlock(BaseBlock):
    type: Literal["button"] = "button"
    content: ButtonContent = Field(default_factory=ButtonContent)
