#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# HERE IS THE CHANGELOG FOR THIS VERSION OF THE CODE:
# - Initial creation of the break rewriter
# - Rules are compiled up front so a bad fragment fails before any node changes
# - Each rule is applied as a fold step over the node value
# - The after side is a lookahead, so chained breaks go in a single pass
#

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
break_rewriter.py - Removal of line breaks between CJK-like characters
======================================================================

Hand-wrapped CJK text contains line breaks that are not paragraph breaks.
Rendered as-is they turn into spurious spaces, so every break that sits
between two CJK-like units is deleted:

    >>> remove_line_breaks_from_text("上午好。\\n这是个美丽的日子。")
    '上午好。这是个美丽的日子。'

A break is one of ``\\r\\n``, ``\\r`` or ``\\n``. Rule fragments are embedded
as given; a fragment that matches a line break character (such as ``\\s``)
can make that character the unit next to another break.
"""

from __future__ import annotations

import functools
import logging
from typing import Any, Mapping

import regex

from .char_classifier import build_patterns
from .models import BreakRule, InvalidBreakPatternError, LineBreakOptions
from .tree_utils import get_node_value, iter_text_nodes, set_node_value

logger = logging.getLogger(__name__)

# Atomic, so a CRLF is never split into a CR break and an LF unit
LINE_BREAK = r"(?>\r\n|\r|\n)"


def _side_pattern(full_pattern: str, fragment: str | None) -> str:
    if fragment:
        return f"(?:{full_pattern}|(?:{fragment}))"
    return f"(?:{full_pattern})"


def compile_rule(rule: BreakRule, full_pattern: str) -> regex.Pattern:
    """
    Compile one break rule.

    The pattern captures the unit before the break, consumes the break and
    checks the unit after it with a lookahead. Replacing each match with the
    captured unit deletes exactly the break.

    Args:
        rule: Break rule with optional before/after fragments
        full_pattern: Composed CJK-like unit pattern

    Returns:
        Compiled pattern

    Raises:
        InvalidBreakPatternError: If a fragment is not valid regex syntax
    """
    before = _side_pattern(full_pattern, rule.before_break)
    after = _side_pattern(full_pattern, rule.after_break)
    try:
        return regex.compile(f"({before}){LINE_BREAK}(?={after})")
    except regex.error as e:
        raise InvalidBreakPatternError(f"Invalid break rule {rule}: {e}", rule) from e


def compile_rules(options: LineBreakOptions) -> list[regex.Pattern]:
    """
    Compile every rule of ``options`` in order.

    Args:
        options: Line break options

    Returns:
        Compiled patterns, one per rule

    Raises:
        InvalidBreakPatternError: If any rule fails to compile
    """
    patterns = build_patterns(
        include_hangul=options.include_hangul,
        include_squared_latin_abbrs=options.include_squared_latin_abbrs,
        include_emoji=options.include_emoji,
    )
    return [compile_rule(rule, patterns.full_pattern) for rule in options.rules]


def _apply_rule(value: str, pattern: regex.Pattern) -> str:
    return pattern.sub(r"\g<1>", value)


def rewrite_text(value: str, compiled_rules: list[regex.Pattern]) -> str:
    """Apply the compiled rules in order, each to the previous rule's output."""
    return functools.reduce(_apply_rule, compiled_rules, value)


def _coerce_options(options: LineBreakOptions | Mapping[str, Any] | None) -> LineBreakOptions:
    if isinstance(options, LineBreakOptions):
        return options
    return LineBreakOptions.from_dict(options)


def remove_line_breaks_from_text(text: str, options: LineBreakOptions | Mapping[str, Any] | None = None) -> str:
    """
    Remove line breaks between CJK-like characters from a plain string.

    Args:
        text: Input text
        options: LineBreakOptions, an options mapping, or None for defaults

    Returns:
        Text with qualifying line breaks removed
    """
    if not isinstance(text, str):
        raise TypeError("Input must be a string")
    return rewrite_text(text, compile_rules(_coerce_options(options)))


def remove_line_breaks(tree: Any, options: LineBreakOptions | Mapping[str, Any] | None = None) -> Any:
    """
    Remove line breaks between CJK-like characters from every text node.

    All rules are compiled before the first node is touched, so an invalid
    fragment leaves the tree unchanged. Text node values are replaced in
    place; no nodes are added or removed.

    Args:
        tree: mdast shaped tree (mappings or attribute objects)
        options: LineBreakOptions, an options mapping, or None for defaults

    Returns:
        The same tree object

    Raises:
        InvalidOptionsError: If the options mapping is malformed
        InvalidBreakPatternError: If a rule fragment is not valid regex syntax
    """
    compiled_rules = compile_rules(_coerce_options(options))

    visited = 0
    changed = 0
    for node in iter_text_nodes(tree):
        visited += 1
        value = get_node_value(node)
        new_value = rewrite_text(value, compiled_rules)
        if new_value != value:
            changed += 1
            set_node_value(node, new_value)

    logger.debug(f"Removed CJK line breaks: {changed} of {visited} text nodes changed ({len(compiled_rules)} rules)")
    return tree
