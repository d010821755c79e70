"""Tests helpers d'arbre — parcours, localisation, clonage."""
from email_builder import (
    BlockLocation, Column, ColumnsBlock, ColumnsContent, SpacerBlock, TextBlock,
    collect_ids, count_blocks, find_block, has_unique_ids, is_descendant,
    iter_blocks, locate_block, refresh_ids,
)


def _nested_tree():
    leaf = TextBlock(id="leaf")
    inner = ColumnsBlock(id="inner", content=ColumnsContent(children=[Column(), Column(blocks=[leaf])]))
    outer = ColumnsBlock(id="outer", content=ColumnsContent(children=[Column(blocks=[inner]), Column()]))
    return [SpacerBlock(id="top"), outer]


def test_iter_blocks_depth_first_display_order():
    assert [b.id for b in iter_blocks(_nested_tree())] == ["top", "outer", "inner", "leaf"]


def test_count_and_collect():
    tree = _nested_tree()
    assert count_blocks(tree) == 4
    assert collect_ids(tree) == ["top", "outer", "inner", "leaf"]
    assert count_blocks([]) == 0


def test_find_block_any_depth():
    tree = _nested_tree()
    assert find_block(tree, "leaf").id == "leaf"
    assert find_block(tree, "missing") is None


def test_locate_block():
    tree = _nested_tree()
    assert locate_block(tree, "top") == BlockLocation(None, None, 0)
    assert locate_block(tree, "outer") == BlockLocation(None, None, 1)
    assert locate_block(tree, "inner") == BlockLocation("outer", 0, 0)
    assert locate_block(tree, "leaf") == BlockLocation("inner", 1, 0)
    assert locate_block(tree, "missing") is None


def test_is_descendant():
    tree = _nested_tree()
    assert is_descendant(tree, "outer", "leaf")
    assert is_descendant(tree, "inner", "leaf")
    assert not is_descendant(tree, "leaf", "outer")
    assert not is_descendant(tree, "outer", "outer")
    assert not is_descendant(tree, "top", "leaf")


def test_has_unique_ids():
    assert has_unique_ids(_nested_tree())
    assert not has_unique_ids([TextBlock(id="x"), TextBlock(id="x")])


def test_refresh_ids_is_deep_and_leaves_source_untouched():
    tree = _nested_tree()
    clone = refresh_ids(tree[1])
    original_ids = set(collect_ids(tree))
    assert not original_ids & set(collect_ids([clone]))
    assert count_blocks([clone]) == 3
    assert collect_ids(tree) == ["top", "outer", "inner", "leaf"]
