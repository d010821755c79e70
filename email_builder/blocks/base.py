"""
Blocs de base pour email_builder.
Content/styles séparés + BaseBlock discriminé par `type`.
"""
import uuid
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def generate_id() -> str:
    """Identifiant unique d'un bloc (jamais réutilisé)."""
    return str(uuid.uuid4())


class EmailModel(BaseModel):
    """Modèle commun : clés camelCase en JSON, snake_case en Python, valeurs immuables."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        coerce_numbers_to_str=True,
    )


class BlockContent(EmailModel):
    """Payload propre à chaque variante. Clés inconnues conservées (merge superficiel)."""
    model_config = ConfigDict(extra="allow")


class BlockStyles(EmailModel):
    """Styles génériques — tous optionnels, défauts appliqués au rendu."""
    model_config = ConfigDict(extra="allow")

    padding: Optional[str] = None
    text_align: Optional[str] = None
    background_color: Optional[str] = None
    color: Optional[str] = None
    font_size: Optional[str] = None
    font_weight: Optional[str] = None
    line_height: Optional[str] = None
    font_family: Optional[str] = None
    border: Optional[str] = None
    border_radius: Optional[str] = None


class BaseBlock(EmailModel):
    """Bloc de base (classe parente de toutes les variantes)."""
    type: str
    id: str = Field(default_factory=generate_id)
    styles: BlockStyles = Field(default_factory=BlockStyles)
