"""
Configuration du renderer — variables d'environnement avec valeurs par défaut.

EMAIL_BUILDER_CONTAINER_WIDTH  largeur du conteneur central (600)
EMAIL_BUILDER_PAGE_BG          fond autour du conteneur (#f5f5f5)
EMAIL_BUILDER_CONTAINER_BG     fond du conteneur (#ffffff)
EMAIL_BUILDER_TITLE            <title> du document (Email)
EMAIL_BUILDER_FONT_FAMILY      pile de polices du <body>
EMAIL_BUILDER_LOG_LEVEL        niveau de log de l'app HTTP (INFO)
"""
import logging
import os
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field

log = logging.getLogger(__name__)

DEFAULT_FONT_FAMILY = "-apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, Helvetica, Arial, sans-serif"

# Icônes hébergées par plateforme sociale (24×24 au rendu)
DEFAULT_SOCIAL_ICONS = {
    "Facebook":  "https://I8OXklu4Tq3i4aWc.public.blob.vercel-storage.com/2021_Facebook_icon.svg.webp",
    "Twitter":   "https://I8OXklu4Tq3i4aWc.public.blob.vercel-storage.com/X-Logo-Round-Color.png",
    "Instagram": "https://I8OXklu4Tq3i4aWc.public.blob.vercel-storage.com/Instagram_logo_2016.svg.webp",
    "LinkedIn":  "https://I8OXklu4Tq3i4aWc.public.blob.vercel-storage.com/LinkedIn_logo_initials.png",
    "TikTok":    "https://I8OXklu4Tq3i4aWc.public.blob.vercel-storage.com/tiktok-6338432_1280.webp",
}


class CompilerSettings(BaseModel):
    """Options du squelette HTML généré autour des blocs."""
    model_config = ConfigDict(frozen=True)

    container_width: int = Field(default=600, gt=0)
    page_background: str = "#f5f5f5"
    container_background: str = "#ffffff"
    title: str = "Email"
    font_family: str = DEFAULT_FONT_FAMILY
    social_icons: Dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_SOCIAL_ICONS))
    log_level: str = "INFO"


# Réglages utilisés par le renderer quand l'appelant n'en fournit pas
DEFAULT_SETTINGS = CompilerSettings()


def _container_width() -> int:
    raw = os.getenv("EMAIL_BUILDER_CONTAINER_WIDTH")
    if raw is None:
        return DEFAULT_SETTINGS.container_width
    try:
        width = int(raw)
    except ValueError:
        width = 0
    if width <= 0:
        log.warning("EMAIL_BUILDER_CONTAINER_WIDTH invalide (%r) — %d utilisé",
                    raw, DEFAULT_SETTINGS.container_width)
        return DEFAULT_SETTINGS.container_width
    return width


def get_settings() -> CompilerSettings:
    """
    Lit l'environnement. Appelé en bordure (app, router), jamais par le
    renderer lui-même. Une valeur invalide retombe sur la valeur par défaut.
    """
    return CompilerSettings(
        container_width=_container_width(),
        page_background=os.getenv("EMAIL_BUILDER_PAGE_BG", DEFAULT_SETTINGS.page_background),
        container_background=os.getenv("EMAIL_BUILDER_CONTAINER_BG", DEFAULT_SETTINGS.container_background),
        title=os.getenv("EMAIL_BUILDER_TITLE", DEFAULT_SETTINGS.title),
        font_family=os.getenv("EMAIL_BUILDER_FONT_FAMILY", DEFAULT_FONT_FAMILY),
        log_level=os.getenv("EMAIL_BUILDER_LOG_LEVEL", "INFO").upper(),
    )
