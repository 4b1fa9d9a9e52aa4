#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# HERE IS THE CHANGELOG FOR THIS VERSION OF THE CODE:
# - Initial creation of the code point tables used by char_classifier
# - Base CJK-like table, squared Latin abbreviations, Hangul
# - Emoji sequence fragments following UTS #51
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
char_constants.py - Character tables for CJK line break removal
===============================================================

This module contains the hand-curated tables that decide which characters
count as "CJK-like". Each table is either a tuple of Unicode property
references (rendered as ``\\p{...}`` by the classifier) or a tuple of
inclusive ``(low, high)`` code point ranges.

Code points in the same Unicode block that are not listed here are excluded
on purpose.

References:
    https://unicode.org/charts/
    https://unicode.org/Public/UCD/latest/ucd/Scripts.txt
    https://unicode.org/Public/UNIDATA/ScriptExtensions.txt
    https://unicode.org/reports/tr51/#Definitions
"""

# Scripts matched through Script_Extensions, plus the Radical property
CJK_PROPERTIES: tuple[str, ...] = (
    "scx=Han",
    "scx=Bopomofo",
    "scx=Yi",
    "scx=Hiragana",
    "scx=Katakana",
    "Radical",
)

# fmt: off
# CJK code points that the properties above do not cover
CJK_RANGES: tuple[tuple[int, int], ...] = (
    # CJK Symbols and Punctuation
    (0x3004, 0x3004),    # Japanese Industrial Standard Symbol
    (0x3012, 0x3012),    # Postal Mark
    (0x3020, 0x3020),    # Postal Mark Face
    (0x3036, 0x3036),    # Circled Postal Mark

    # Enclosed CJK Letters and Months
    (0x3248, 0x324F),    # Circled numbers on black squares from ARIB STD B24
    (0x3248, 0x325F),    # Circled numbers
    (0x327F, 0x327F),    # Korean Standard Symbol
    (0x32B1, 0x32BF),    # Circled numbers

    # Enclosed Ideographic Supplement
    (0x1F201, 0x1F202),  # Squared katakana
    (0x1F210, 0x1F23B),  # Squared ideographs and kana from ARIB STD B24, squared ideographs
    (0x1F240, 0x1F248),  # Ideographs with tortoise shell brackets from ARIB STD B24
    (0x1F260, 0x1F265),  # Symbols for Chinese folk religion

    # CJK Compatibility Forms
    (0xFE30, 0xFE44),    # Glyphs for vertical variants
    (0xFE47, 0xFE4F),    # Glyphs for vertical variants, overscores and underscores

    # Halfwidth and Fullwidth Forms
    (0xFF01, 0xFF60),    # Fullwidth ASCII variants
    (0xFFE0, 0xFFE6),    # Fullwidth symbol variants
    # (0xFFE8, 0xFFEE) halfwidth symbol variants are not CJK-like

    # Small Form Variants
    (0xFE50, 0xFE52),
    (0xFE54, 0xFE66),
    (0xFE68, 0xFE6B),

    # Vertical Forms
    (0xFE10, 0xFE12),    # Glyphs for vertical variants
    # (0xFE13, 0xFE16) Latin symbols of vertical form are not CJK-like
    (0xFE17, 0xFE18),    # Glyphs for vertical variants
    # (0xFE19, 0xFE19) vertical horizontal ellipsis is not CJK-like
)

SQUARED_LATIN_ABBR_RANGES: tuple[tuple[int, int], ...] = (
    # Enclosed CJK Letters and Months
    (0x3250, 0x3250),    # Partnership Sign
    (0x32CC, 0x32CF),

    # CJK Compatibility
    (0x3371, 0x337A),
    (0x3380, 0x33DF),    # Includes abbreviations involving iteration symbols
    (0x33FF, 0x33FF),    # Square Gal
)
# fmt: on

HANGUL_PROPERTIES: tuple[str, ...] = ("scx=Hangul",)

# Emoji sequences, written as regex fragments
EMOJI_FLAG_SEQUENCE = r"\p{Regional_Indicator}\p{Regional_Indicator}"
EMOJI_PRESENTATION_SEQUENCE = r"\p{Emoji}\uFE0F"
EMOJI_KEYCAP_SEQUENCE = r"[0-9#*]\uFE0F\u20E3"
EMOJI_MODIFIER_SEQUENCE = r"\p{Emoji_Modifier_Base}\p{Emoji_Modifier}"

_EMOJI_ZWJ_ELEMENT = rf"(?:\p{{Emoji}}|{EMOJI_PRESENTATION_SEQUENCE}|{EMOJI_MODIFIER_SEQUENCE})"

# Tag characters U+E0020..U+E007E terminated by CANCEL TAG U+E007F
EMOJI_TAG_SEQUENCE = rf"(?:\p{{Emoji}}|{EMOJI_MODIFIER_SEQUENCE}|{EMOJI_PRESENTATION_SEQUENCE})[\U000E0020-\U000E007E]+\U000E007F"

EMOJI_CORE_SEQUENCE = "|".join(
    [
        r"\p{Emoji}",
        EMOJI_PRESENTATION_SEQUENCE,
        EMOJI_KEYCAP_SEQUENCE,
        EMOJI_MODIFIER_SEQUENCE,
        EMOJI_FLAG_SEQUENCE,
    ]
)

EMOJI_ZWJ_SEQUENCE = rf"{_EMOJI_ZWJ_ELEMENT}(?:\u200D{_EMOJI_ZWJ_ELEMENT})+"

# Default emoji presentation character first, then the sequences
EMOJI_PATTERN = "|".join(
    [
        r"\p{Emoji_Presentation}",
        EMOJI_CORE_SEQUENCE,
        EMOJI_ZWJ_SEQUENCE,
        EMOJI_TAG_SEQUENCE,
    ]
)
