#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# Copyright (c) 2025 Emasoft
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
#
# CHANGELOG:
# - Builds the composed "CJK-like unit" pattern from char_constants tables
# - Added optional Hangul, squared Latin abbreviation and emoji extensions
# - Added is_cjk_unit helper
#

"""Composition of the character tables into regex patterns."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import regex

from .char_constants import (
    CJK_PROPERTIES,
    CJK_RANGES,
    EMOJI_PATTERN,
    HANGUL_PROPERTIES,
    SQUARED_LATIN_ABBR_RANGES,
)


@dataclass(frozen=True)
class ClassifierPatterns:
    """Patterns matching exactly one qualifying unit."""

    base_pattern: str
    """Bracket class of the CJK-like table and any enabled extensions."""
    full_pattern: str
    """``base_pattern``, OR-ed with the emoji pattern when emoji are enabled."""


def _escape_code_point(code_point: int) -> str:
    if code_point > 0xFFFF:
        return f"\\U{code_point:08X}"
    return f"\\u{code_point:04X}"


def build_char_class(properties: Iterable[str], ranges: Iterable[tuple[int, int]]) -> str:
    """
    Render property references and code point ranges as one character class.

    Args:
        properties: Property references such as ``scx=Han`` or ``Radical``
        ranges: Inclusive ``(low, high)`` code point pairs

    Returns:
        A bracket expression usable by the ``regex`` module
    """
    parts = [f"\\p{{{prop}}}" for prop in properties]
    for low, high in ranges:
        if low > high:
            raise ValueError(f"Invalid code point range: U+{low:04X} > U+{high:04X}")
        if low == high:
            parts.append(_escape_code_point(low))
        else:
            parts.append(f"{_escape_code_point(low)}-{_escape_code_point(high)}")
    return "[" + "".join(parts) + "]"


def build_patterns(
    include_hangul: bool = False,
    include_squared_latin_abbrs: bool = False,
    include_emoji: bool = False,
) -> ClassifierPatterns:
    """
    Build the composed unit patterns for the given extension flags.

    The tables in char_constants are never modified; every call starts from
    the base table.

    Args:
        include_hangul: Add the Hangul script
        include_squared_latin_abbrs: Add squared Latin abbreviation blocks
        include_emoji: OR the emoji sequence pattern onto the result

    Returns:
        ClassifierPatterns with the base and full patterns
    """
    properties = list(CJK_PROPERTIES)
    ranges = list(CJK_RANGES)

    if include_squared_latin_abbrs:
        ranges.extend(SQUARED_LATIN_ABBR_RANGES)
    if include_hangul:
        properties.extend(HANGUL_PROPERTIES)

    base_pattern = build_char_class(properties, ranges)
    full_pattern = f"{base_pattern}|{EMOJI_PATTERN}" if include_emoji else base_pattern

    return ClassifierPatterns(base_pattern=base_pattern, full_pattern=full_pattern)


def is_cjk_unit(
    text: str,
    include_hangul: bool = False,
    include_squared_latin_abbrs: bool = False,
    include_emoji: bool = False,
) -> bool:
    """Return True if ``text`` is exactly one CJK-like (or emoji) unit."""
    patterns = build_patterns(include_hangul, include_squared_latin_abbrs, include_emoji)
    return regex.fullmatch(f"(?:{patterns.full_pattern})", text) is not None
