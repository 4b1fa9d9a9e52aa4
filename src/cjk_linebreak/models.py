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
# - Added BreakRule and LineBreakOptions
# - Added option normalization from camelCase and snake_case mappings
# - Added InvalidOptionsError and InvalidBreakPatternError
#

"""Data models for line break removal options."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

logger = logging.getLogger(__name__)


class InvalidOptionsError(ValueError):
    """Raised when an options mapping has the wrong shape or types."""

    pass


class InvalidBreakPatternError(ValueError):
    """Raised when a break rule cannot be compiled into a regex."""

    def __init__(self, message: str, rule: BreakRule | None = None) -> None:
        super().__init__(message)
        self.rule = rule


@dataclass(frozen=True)
class BreakRule:
    """
    One break adjacency rule.

    Each side is an optional raw regex fragment. A missing side matches the
    composed CJK-like pattern alone; a present side matches the composed
    pattern OR the fragment.
    """

    before_break: str | None = None
    after_break: str | None = None


# Option names as accepted in mappings, camelCase first
_FLAG_KEYS = {
    "includeHangul": "include_hangul",
    "include_hangul": "include_hangul",
    "includeEmoji": "include_emoji",
    "include_emoji": "include_emoji",
    "includeSquaredLatinAbbrs": "include_squared_latin_abbrs",
    "include_squared_latin_abbrs": "include_squared_latin_abbrs",
}
_PAIRS_KEYS = ("additionalRegexpPairs", "additional_regexp_pairs")
_RULE_KEYS = {
    "beforeBreak": "before_break",
    "before_break": "before_break",
    "afterBreak": "after_break",
    "after_break": "after_break",
}


@dataclass(frozen=True)
class LineBreakOptions:
    """Options controlling which line breaks are removed."""

    include_hangul: bool = False
    include_emoji: bool = False
    include_squared_latin_abbrs: bool = False
    additional_regexp_pairs: tuple[BreakRule, ...] = field(default_factory=tuple)

    @property
    def rules(self) -> list[BreakRule]:
        """
        Normalized rule list.

        With no additional pairs this is a single implicit rule with both
        sides absent, i.e. plain CJK adjacency removal.
        """
        if not self.additional_regexp_pairs:
            return [BreakRule()]
        return list(self.additional_regexp_pairs)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> LineBreakOptions:
        """
        Build options from a mapping.

        Both the camelCase names (``includeHangul``, ``additionalRegexpPairs``
        with ``beforeBreak``/``afterBreak``) and their snake_case equivalents
        are accepted. Unknown keys are ignored with a warning.

        Args:
            data: Options mapping, or None for defaults

        Returns:
            LineBreakOptions instance

        Raises:
            InvalidOptionsError: If a value has the wrong type
        """
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise InvalidOptionsError(f"Options must be a mapping, got {type(data).__name__}")

        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            if key in _FLAG_KEYS:
                if value is None:
                    continue
                if not isinstance(value, bool):
                    raise InvalidOptionsError(f"Option '{key}' must be a boolean, got {type(value).__name__}")
                kwargs[_FLAG_KEYS[key]] = value
            elif key in _PAIRS_KEYS:
                kwargs["additional_regexp_pairs"] = _parse_pairs(key, value)
            else:
                logger.warning(f"Unknown or malformed option '{key}' found. Ignoring.")

        return cls(**kwargs)


def _parse_pairs(key: str, value: Any) -> tuple[BreakRule, ...]:
    if value is None:
        return ()
    if isinstance(value, (str, bytes)) or not isinstance(value, (list, tuple)):
        raise InvalidOptionsError(f"Option '{key}' must be a list of rule mappings, got {type(value).__name__}")

    rules = []
    for index, item in enumerate(value):
        if isinstance(item, BreakRule):
            rules.append(item)
            continue
        if not isinstance(item, Mapping):
            raise InvalidOptionsError(f"{key}[{index}] must be a mapping, got {type(item).__name__}")

        sides: dict[str, str | None] = {}
        for rule_key, fragment in item.items():
            if rule_key not in _RULE_KEYS:
                logger.warning(f"Unknown or malformed key '{rule_key}' in {key}[{index}]. Ignoring.")
                continue
            if fragment is not None and not isinstance(fragment, str):
                raise InvalidOptionsError(f"{key}[{index}].{rule_key} must be a string, got {type(fragment).__name__}")
            # Empty fragments behave like absent ones
            sides[_RULE_KEYS[rule_key]] = fragment or None
        rules.append(BreakRule(**sides))

    return tuple(rules)
