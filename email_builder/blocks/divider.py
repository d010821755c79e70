"""Bloc Divider — filet horizontal."""
from typing import Literal

from pydantic import Field

from .base import BaseBlock, BlockContent


class DividerContent(BlockContent):
    color: str = "#e5e5e5"
    thickness: str = "1px"


class DividerBlock(BaseBlock):
    type: Literal["divider"] = "divider"
    content: DividerContent = Field(default_factory=DividerContent)
