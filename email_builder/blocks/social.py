"""Bloc Social — rangée d'icônes vers les profils activés."""
from typing import List, Literal

from pydantic import Field

from .base import BaseBlock, BlockContent, EmailModel

# URLs de base par plateforme (le slug du profil est ajouté à la suite)
SOCIAL_BASE_URLS = {
    "Facebook":  "https://facebook.com/",
    "Twitter":   "https://x.com/",
    "Instagram": "https://instagram.com/",
    "LinkedIn":  "https://linkedin.com/in/",
    "TikTok":    "https://tiktok.com/@",
}


class SocialPlatform(EmailModel):
    name: str
    url: str = ""
    slug: str = ""
    enabled: bool = True

    @property
    def href(self) -> str:
        """URL du profil telle que stockée ; à défaut, URL de base + slug."""
        if self.url:
            return self.url
        if self.slug:
            return f"{SOCIAL_BASE_URLS.get(self.name, '')}{self.slug}"
        return ""


def _default_platforms() -> List[SocialPlatform]:
    enabled = {"Facebook", "Twitter", "Instagram"}
    return [
        SocialPlatform(name=name, url=url, enabled=name in enabled)
        for name, url in SOCIAL_BASE_URLS.items()
    ]


class SocialContent(BlockContent):
    platforms: List[SocialPlatform] = Field(default_factory=_default_platforms)


class SocialBlock(BaseBlock):
    type: Literal["social"] = "social"
    content: SocialContent = Field(default_factory=SocialContent)
