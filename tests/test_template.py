"""Tests template — chargement JSON, validation, dump, nom d'export."""
import json

import pytest
from pydantic import ValidationError

from email_builder import (
    ColumnsBlock, TextBlock, collect_ids, compile_document, dump_document,
    dump_template, export_filename, load_document, parse_template,
)

TEMPLATE = {
    "id": "tpl-1",
    "name": "Newsletter mars",
    "subject": "Nos nouveautés",
    "blocks": [
        {"id": "h", "type": "header", "content": {"text": "ACME"}, "styles": {"padding": "24px"}},
        {"id": "c", "type": "columns", "styles": {}, "content": {"columns": 2, "children": [
            {"blocks": [{"id": "b", "type": "button", "content": {"text": "Go", "url": "#", "backgroundColor": "#000", "textColor": "#fff", "borderRadius": "4px"}, "styles": {}}]},
            {"blocks": [{"id": "i", "type": "image", "content": {"src": "/x.png", "alt": "X", "width": "100%"}, "styles": {}}]},
        ]}},
    ],
    "createdAt": 1735689600000,
}


# ── parse_template ───────────────────────────────────────────────────────────

def test_parse_template_from_dict():
    template = parse_template(TEMPLATE)
    assert template.name == "Newsletter mars"
    assert template.created_at == 1735689600000
    assert isinstance(template.blocks[1], ColumnsBlock)
    assert collect_ids(template.blocks) == ["h", "c", "b", "i"]


def test_parse_template_from_json_string():
    template = parse_template(json.dumps(TEMPLATE))
    assert template.subject == "Nos nouveautés"


def test_parse_template_unknown_nested_type():
    data = json.loads(json.dumps(TEMPLATE))
    data["blocks"][1]["content"]["children"][0]["blocks"][0]["type"] = "video"
    with pytest.raises(ValueError, match="video"):
        parse_template(data)


def test_parse_template_duplicate_ids():
    data = json.loads(json.dumps(TEMPLATE))
    data["blocks"][1]["content"]["children"][1]["blocks"][0]["id"] = "h"
    with pytest.raises(ValueError, match="dupliqués"):
        parse_template(data)


def test_parse_template_bad_shape():
    with pytest.raises(ValidationError):
        parse_template({"name": "x", "blocks": [{"id": "t", "type": "text", "content": "oops", "styles": {}}]})


def test_parse_template_invalid_json():
    with pytest.raises(ValueError):
        parse_template("{not json")


# ── load_document / dump ─────────────────────────────────────────────────────

def test_load_document_roundtrip_is_stable():
    blocks = load_document(TEMPLATE["blocks"])
    dumped = dump_document(blocks)
    assert dumped[1]["content"]["columnCount"] == 2
    assert "columns" not in dumped[1]["content"]
    assert load_document(json.dumps(dumped)) == blocks


def test_dump_document_is_json_serializable_and_keeps_content_styles():
    dumped = dump_document([TextBlock(id="t")])
    json.dumps(dumped)
    assert dumped[0]["content"] == {"text": ""}
    assert dumped[0]["styles"] == {}


def test_dump_template_camel_case():
    data = dump_template(parse_template(TEMPLATE))
    assert data["createdAt"] == 1735689600000
    assert "updatedAt" not in data


def test_loaded_template_compiles():
    template = parse_template(TEMPLATE)
    html = compile_document(template.blocks, title=template.subject)
    assert "<title>Nos nouveautés</title>" in html
    assert 'src="/x.png"' in html


# ── export_filename ──────────────────────────────────────────────────────────

@pytest.mark.parametrize("name, expected", [
    ("Newsletter mars", "Newsletter_mars.html"),
    ("  Promo \t été  ", "Promo_été.html"),
    ("", "email.html"),
])
def test_export_filename(name, expected):
    assert export_filename(name) == expected
