#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright 2025 Emasoft
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
tree_utils.py - Visiting text nodes of unist/mdast shaped document trees

Trees are either nested mappings (the JSON form of an mdast tree, with
``type``, ``value`` and ``children`` keys) or objects exposing the same
names as attributes. Both can be mixed inside one tree.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any, Iterator


def _get(node: Any, name: str, default: Any = None) -> Any:
    if isinstance(node, Mapping):
        return node.get(name, default)
    return getattr(node, name, default)


def get_node_value(node: Any) -> str:
    """Return the string value of a text node."""
    value = _get(node, "value")
    if not isinstance(value, str):
        raise TypeError(f"Node value must be a string, got {type(value).__name__}")
    return value


def set_node_value(node: Any, value: str) -> None:
    """Replace the string value of a text node in place."""
    if isinstance(node, MutableMapping):
        node["value"] = value
    else:
        setattr(node, "value", value)


def iter_text_nodes(tree: Any, node_type: str = "text") -> Iterator[Any]:
    """
    Yield every node of ``node_type`` holding a string value, in document order.

    The walk is iterative so deeply nested trees do not hit the recursion
    limit. Nodes of other types are only descended into, never yielded.

    Args:
        tree: Root node of the tree
        node_type: Node type to collect (default: "text")

    Yields:
        Matching nodes, depth-first
    """
    stack = [tree]
    while stack:
        node = stack.pop()
        if node is None:
            continue

        if _get(node, "type") == node_type and isinstance(_get(node, "value"), str):
            yield node

        children = _get(node, "children")
        if children:
            stack.extend(reversed(list(children)))


# mdast builders, mostly for tests and the CLI


def text_node(value: str) -> dict[str, Any]:
    return {"type": "text", "value": value}


def paragraph(*children: dict[str, Any]) -> dict[str, Any]:
    return {"type": "paragraph", "children": list(children)}


def root(*children: dict[str, Any]) -> dict[str, Any]:
    return {"type": "root", "children": list(children)}
