#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pytest configuration and shared fixtures for all tests
"""

import os
import sys

import pytest

# Add src directory to path so the package imports without installation
src_dir = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src")
sys.path.insert(0, src_dir)

from cjk_linebreak.tree_utils import paragraph, root, text_node  # noqa: E402


@pytest.fixture
def make_tree():
    """Build a root > paragraph > text tree around a single value"""

    def _make(value):
        return root(paragraph(text_node(value)))

    return _make


@pytest.fixture
def text_of():
    """Return the value of the only text node in a tree built by make_tree"""

    def _text_of(tree):
        return tree["children"][0]["children"][0]["value"]

    return _text_of


@pytest.fixture
def mixed_tree():
    """mdast tree with text nodes next to code, inlineCode and html nodes"""
    return root(
        {"type": "heading", "depth": 1, "children": [text_node("見出し\nです")]},
        paragraph(
            text_node("上午好。\n这是"),
            {"type": "inlineCode", "value": "代码\n代码"},
            {"type": "emphasis", "children": [text_node("强调\n文本")]},
        ),
        {"type": "code", "lang": None, "value": "中文\n代码块"},
        {"type": "html", "value": "<p>中文\n段落</p>"},
    )


@pytest.fixture
def sample_wrapped_chinese():
    """Hand-wrapped Chinese prose"""
    return "第一章　开始\n\n这是一段被手动换行的\n中文文本，读起来\n很方便。\n"


@pytest.fixture
def sample_english_text():
    """Hard-wrapped English prose"""
    return "Good morning.\nHave a nice day.\nSee you\nlater."


def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line("markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')")
