"""Bloc Spacer — espace vertical vide."""
from typing import Literal

from pydantic import Field

from .base import BaseBlock, BlockContent


class SpacerContent(BlockContent):
    height: str = "20px"


class SpacerBlock(BaseBlock):
    type: Literal["spacer"] = "spacer"
    content: SpacerContent = Field(default_factory=SpacerContent)
