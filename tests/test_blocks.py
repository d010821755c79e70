"""Tests blocs — valeurs par défaut, factory, union discriminée, clés JSON."""
import pytest
from pydantic import ValidationError

from email_builder import (
    BLOCK_PALETTE, BLOCK_REGISTRY, ButtonBlock, ColumnsBlock, DocumentAdapter,
    HeaderBlock, ImageBlock, SocialPlatform, TextBlock, create_default_block,
)


# ── Défauts ──────────────────────────────────────────────────────────────────

def test_content_and_styles_always_present():
    for cls in BLOCK_REGISTRY.values():
        block = cls()
        assert block.content is not None
        assert block.styles is not None


def test_ids_are_unique_per_instance():
    ids = {TextBlock().id for _ in range(50)}
    assert len(ids) == 50


def test_blocks_are_immutable():
    block = TextBlock()
    with pytest.raises(ValidationError):
        block.id = "other"


def test_default_columns_has_two_empty_columns():
    block = ColumnsBlock()
    assert block.content.column_count == 2
    assert [c.blocks for c in block.content.children] == [[], []]


# ── Factory ──────────────────────────────────────────────────────────────────

def test_palette_covers_every_block_type():
    assert [t for t, _ in BLOCK_PALETTE] == list(BLOCK_REGISTRY)


@pytest.mark.parametrize("block_type", list(BLOCK_REGISTRY))
def test_factory_returns_matching_variant(block_type):
    block = create_default_block(block_type)
    assert block.type == block_type
    assert isinstance(block, BLOCK_REGISTRY[block_type])


def test_factory_header_defaults():
    block = create_default_block("header")
    assert isinstance(block, HeaderBlock)
    assert block.content.text == "Your Company Name"
    assert block.styles.background_color == "#0071e3"
    assert block.styles.font_weight == "bold"


def test_factory_unknown_type_falls_back_to_text():
    block = create_default_block("carousel")
    assert isinstance(block, TextBlock)
    assert block.content.text == "New block"
    assert block.styles.padding == "16px"


def test_factory_social_enabled_platforms():
    block = create_default_block("social")
    enabled = [p.name for p in block.content.platforms if p.enabled]
    assert enabled == ["Facebook", "Twitter", "Instagram"]


# ── JSON ─────────────────────────────────────────────────────────────────────

def test_union_discriminates_on_type():
    blocks = DocumentAdapter.validate_python([
        {"id": "1", "type": "button", "content": {"text": "Go", "backgroundColor": "#000000"}, "styles": {}},
        {"id": "2", "type": "image", "content": {"src": "/a.png"}, "styles": {"textAlign": "center"}},
    ])
    assert isinstance(blocks[0], ButtonBlock)
    assert blocks[0].content.background_color == "#000000"
    assert isinstance(blocks[1], ImageBlock)
    assert blocks[1].styles.text_align == "center"


def test_union_rejects_unknown_type():
    with pytest.raises(ValidationError):
        DocumentAdapter.validate_python([{"id": "1", "type": "video", "content": {}, "styles": {}}])


def test_dump_uses_camel_case():
    data = ButtonBlock(id="b").model_dump(by_alias=True)
    assert data["content"]["textColor"] == "#ffffff"
    assert data["content"]["borderRadius"] == "4px"
    assert "text_color" not in data["content"]


def test_columns_accepts_legacy_count_key():
    block = ColumnsBlock.model_validate({
        "id": "c", "type": "columns", "styles": {},
        "content": {"columns": 3, "children": [{"blocks": []}] * 3},
    })
    assert block.content.column_count == 3
    assert block.model_dump(by_alias=True)["content"]["columnCount"] == 3


def test_nested_blocks_in_columns_are_typed():
    block = ColumnsBlock.model_validate({
        "id": "c", "type": "columns", "styles": {},
        "content": {"columnCount": 2, "children": [
            {"blocks": [{"id": "t", "type": "text", "content": {"text": "hi"}, "styles": {}}]},
            {"blocks": []},
        ]},
    })
    assert isinstance(block.content.children[0].blocks[0], TextBlock)


def test_numeric_style_values_are_coerced_to_str():
    block = TextBlock.model_validate({"type": "text", "content": {"text": "x"}, "styles": {"lineHeight": 1.8}})
    assert block.styles.line_height == "1.8"


def test_social_platform_href():
    # url stockée rendue telle quelle, même si le slug diffère
    assert SocialPlatform(name="X", url="https://x.com/acme", slug="acme").href == "https://x.com/acme"
    assert SocialPlatform(name="X", url="https://x.com/acme", slug="autre").href == "https://x.com/acme"
    assert SocialPlatform(name="Facebook", url="https://facebook.com/").href == "https://facebook.com/"
    # url vide : URL de base de la plateforme + slug
    assert SocialPlatform(name="TikTok", slug="acme").href == "https://tiktok.com/@acme"
    assert SocialPlatform(name="Mastodon", slug="acme").href == "acme"
    assert SocialPlatform(name="Mastodon").href == ""
