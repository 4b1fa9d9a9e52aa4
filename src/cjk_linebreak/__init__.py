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
cjk-linebreak - Remove line breaks between CJK characters

Hand-wrapped Chinese, Japanese and Korean text keeps its line breaks inside
sentences. This package deletes those breaks from the text nodes of a parsed
document tree so renderers do not turn them into spaces.
"""

__version__ = "1.0.0"
__author__ = "Emasoft"
__email__ = "713559+Emasoft@users.noreply.github.com"
__license__ = "Apache-2.0"

from .break_rewriter import (
    compile_rule,
    compile_rules,
    remove_line_breaks,
    remove_line_breaks_from_text,
    rewrite_text,
)
from .char_classifier import ClassifierPatterns, build_patterns, is_cjk_unit
from .models import BreakRule, InvalidBreakPatternError, InvalidOptionsError, LineBreakOptions

__all__ = [
    "remove_line_breaks",
    "remove_line_breaks_from_text",
    "rewrite_text",
    "compile_rule",
    "compile_rules",
    "build_patterns",
    "is_cjk_unit",
    "ClassifierPatterns",
    "BreakRule",
    "LineBreakOptions",
    "InvalidOptionsError",
    "InvalidBreakPatternError",
]
