#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# HERE IS THE CHANGELOG FOR THIS VERSION OF THE CODE:
# - Created module holding the default configuration template
# - Added the expected type of every known configuration key
#

"""
config_schema.py - Configuration schema and default template for cjk-linebreak
"""

DEFAULT_CONFIG_FILENAME = "cjk_linebreak.yml"

# Default configuration template with comments
DEFAULT_CONFIG_TEMPLATE = """# cjk-linebreak Configuration File
# ===============================
# Command-line arguments override these settings.

# Line break removal
# ------------------
line_breaks:
  # Treat Hangul as CJK-like (default: false)
  include_hangul: false
  # Treat emoji and emoji sequences as CJK-like (default: false)
  include_emoji: false
  # Treat squared Latin abbreviations such as U+3385 as CJK-like (default: false)
  include_squared_latin_abbrs: false
  # Extra rules, applied in order. Each rule may set before_break and/or
  # after_break to a regex fragment that is accepted next to the break in
  # addition to CJK-like characters. Example:
  #   additional_regexp_pairs:
  #     - before_break: "[)]"
  #     - after_break: "[(]"
  additional_regexp_pairs: []

# Input handling
# --------------
input:
  # Encoding used when detection is disabled or fails (default: utf-8)
  default_encoding: "utf-8"
  # Detect the encoding of input files with chardet (default: true)
  detect_encoding: true
  # Minimum detection confidence before falling back (default: 0.7)
  confidence_threshold: 0.7
  # Input format: "text" or "mdast" (mdast JSON tree) (default: text)
  tree_format: "text"

# Logging
# -------
logging:
  # Log level: DEBUG, INFO, WARNING, ERROR (default: INFO)
  level: "INFO"
  # Log format
  format: "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
  # Also write logs to a file (default: false)
  file_enabled: false
  file_path: "cjk_linebreak.log"
"""

# Expected types of known keys, by dotted path
CONFIG_KEY_TYPES: dict[str, type | tuple[type, ...]] = {
    "line_breaks": dict,
    "line_breaks.include_hangul": bool,
    "line_breaks.include_emoji": bool,
    "line_breaks.include_squared_latin_abbrs": bool,
    "line_breaks.additional_regexp_pairs": (list, type(None)),
    "input": dict,
    "input.default_encoding": str,
    "input.detect_encoding": bool,
    "input.confidence_threshold": (int, float),
    "input.tree_format": str,
    "logging": dict,
    "logging.level": str,
    "logging.format": str,
    "logging.file_enabled": bool,
    "logging.file_path": str,
}

VALID_TREE_FORMATS = ("text", "mdast")
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
