#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Test suite for tree_utils module.
"""

from types import SimpleNamespace

import pytest

from cjk_linebreak.tree_utils import get_node_value, iter_text_nodes, paragraph, root, set_node_value, text_node


class TestBuilders:
    """Test the mdast builders."""

    def test_shapes(self):
        tree = root(paragraph(text_node("a"), text_node("b")))
        assert tree == {
            "type": "root",
            "children": [
                {"type": "paragraph", "children": [{"type": "text", "value": "a"}, {"type": "text", "value": "b"}]},
            ],
        }


class TestIterTextNodes:
    """Test the iter_text_nodes generator."""

    def test_document_order(self, mixed_tree):
        values = [node["value"] for node in iter_text_nodes(mixed_tree)]
        assert values == ["見出し\nです", "上午好。\n这是", "强调\n文本"]

    def test_other_node_type(self, mixed_tree):
        nodes = list(iter_text_nodes(mixed_tree, node_type="code"))
        assert [node["value"] for node in nodes] == ["中文\n代码块"]

    def test_root_itself_can_be_text(self):
        node = text_node("単独")
        assert list(iter_text_nodes(node)) == [node]

    def test_skips_text_without_string_value(self):
        tree = root({"type": "text", "value": None}, {"type": "text"})
        assert list(iter_text_nodes(tree)) == []

    def test_empty_and_none(self):
        assert list(iter_text_nodes(None)) == []
        assert list(iter_text_nodes(root())) == []

    def test_deep_tree(self):
        """Test nesting far beyond the recursion limit."""
        node = text_node("深")
        for _ in range(5000):
            node = {"type": "emphasis", "children": [node]}
        assert [n["value"] for n in iter_text_nodes(node)] == ["深"]

    def test_attribute_nodes(self):
        leaf = SimpleNamespace(type="text", value="文")
        tree = SimpleNamespace(type="root", children=[leaf, {"type": "text", "value": "字"}])
        assert [get_node_value(n) for n in iter_text_nodes(tree)] == ["文", "字"]


class TestNodeValue:
    """Test get_node_value and set_node_value."""

    def test_dict_node(self):
        node = text_node("前")
        set_node_value(node, "後")
        assert get_node_value(node) == "後"
        assert node == {"type": "text", "value": "後"}

    def test_attribute_node(self):
        node = SimpleNamespace(type="text", value="前")
        set_node_value(node, "後")
        assert node.value == "後"

    def test_non_string_value(self):
        with pytest.raises(TypeError, match="must be a string"):
            get_node_value({"type": "text", "value": 3})
