#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# HERE IS THE CHANGELOG FOR THIS VERSION OF THE CODE:
# - Created module to load, validate and merge the YAML configuration
# - Validation reports the first error only, with its line number
# - get_options() turns the line_breaks section into LineBreakOptions
#

"""
config_loader.py - Configuration loading and validation for cjk-linebreak
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from .common_yaml_utils import load_safe_yaml, merge_yaml_configs
from .config_schema import CONFIG_KEY_TYPES, DEFAULT_CONFIG_TEMPLATE, VALID_LOG_LEVELS, VALID_TREE_FORMATS
from .models import LineBreakOptions


def find_line_number(key_path: str, config_lines: list[str]) -> int | None:
    """
    Find the 1-based line of a dotted key in YAML text.

    Nesting is tracked by indentation, so ``logging.level`` does not match a
    ``level`` key under another section.

    Args:
        key_path: Dot-separated path to key
        config_lines: Configuration file lines

    Returns:
        Line number or None if not found
    """
    keys = key_path.split(".")
    # (indent, key) of the mappings enclosing the current line
    parents: list[tuple[int, str]] = []

    for i, line in enumerate(config_lines, 1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#") or stripped.startswith("-"):
            continue

        indent = len(line) - len(line.lstrip())
        while parents and parents[-1][0] >= indent:
            parents.pop()

        key = stripped.split(":", 1)[0].strip().strip("'\"")
        path = [k for _, k in parents] + [key]
        if path == keys:
            return i
        if stripped.endswith(":"):
            parents.append((indent, key))

    return None


class ConfigLoader:
    """Loads the YAML configuration and validates it against the schema."""

    def __init__(self, config_path: Path | None, logger: logging.Logger | None = None):
        """
        Initialize configuration loader.

        Args:
            config_path: Path to configuration file, or None for defaults only
            logger: Logger instance
        """
        self.config_path = config_path
        self.logger = logger or logging.getLogger(__name__)
        self._config_lines: list[str] = []

    def get_default_config(self) -> dict[str, Any]:
        """Parse the default template into a dictionary."""
        result = yaml.safe_load(DEFAULT_CONFIG_TEMPLATE)
        return result if isinstance(result, dict) else {}

    def load_config(self) -> dict[str, Any]:
        """
        Load, validate and merge the configuration.

        A missing file yields the defaults.

        Returns:
            Configuration dictionary with every known key present

        Raises:
            ValueError: If the file cannot be parsed or fails validation
        """
        if self.config_path is None or not self.config_path.exists():
            if self.config_path is not None:
                self.logger.info(f"Configuration file not found: {self.config_path}. Using defaults.")
            return self.get_default_config()

        with open(self.config_path, "r", encoding="utf-8") as f:
            self._config_lines = f.read().split("\n")

        config = load_safe_yaml(self.config_path)
        if not config:
            self.logger.warning("Configuration file is empty. Using defaults.")
            return self.get_default_config()

        first_error = self.validate_config_first_error(config)
        if first_error:
            line = first_error.get("line") or "unknown"
            raise ValueError(f"{self.config_path}, line {line}: {first_error['message']}")

        return merge_yaml_configs(self.get_default_config(), config)

    def validate_config_first_error(self, config: dict[str, Any]) -> dict[str, Any] | None:
        """
        Validate configuration and return only the FIRST error found.

        Unknown keys are logged and skipped. Wrong types and out of range
        values are errors.

        Args:
            config: Configuration to validate

        Returns:
            Error dictionary or None if valid
        """
        for key_path, value in _walk(config):
            if key_path not in CONFIG_KEY_TYPES:
                line_num = find_line_number(key_path, self._config_lines)
                self.logger.warning(f"line {line_num or 'unknown'}: unknown or malformed key '{key_path}' found. Ignoring.")
                continue

            expected = CONFIG_KEY_TYPES[key_path]
            # bool is an int subclass, so numbers must not accept it
            if not isinstance(value, expected) or (isinstance(value, bool) and expected is not bool):
                return {
                    "type": "invalid_type",
                    "path": key_path,
                    "value": value,
                    "line": find_line_number(key_path, self._config_lines),
                    "message": f"Invalid type for {key_path}: got {type(value).__name__}",
                }

        checks = [
            ("input.tree_format", VALID_TREE_FORMATS),
            ("logging.level", VALID_LOG_LEVELS),
        ]
        for key_path, valid_values in checks:
            section, key = key_path.split(".")
            value = config.get(section, {}).get(key)
            if value is not None and value not in valid_values:
                return {
                    "type": "invalid_value",
                    "path": key_path,
                    "value": value,
                    "valid_values": list(valid_values),
                    "line": find_line_number(key_path, self._config_lines),
                    "message": f"Invalid value '{value}' for {key_path}. Must be one of: {', '.join(valid_values)}",
                }

        return None

    def get_options(self, config: dict[str, Any]) -> LineBreakOptions:
        """
        Build LineBreakOptions from the ``line_breaks`` section.

        Raises:
            InvalidOptionsError: If the rule list is malformed
        """
        return LineBreakOptions.from_dict(config.get("line_breaks") or {})

    def get_config_lines(self) -> list[str]:
        return self._config_lines


def _walk(config: dict[str, Any], prefix: str = "") -> list[tuple[str, Any]]:
    """Flatten nested sections into (dotted path, value) pairs, sections included."""
    items: list[tuple[str, Any]] = []
    for key, value in config.items():
        key_path = f"{prefix}{key}"
        items.append((key_path, value))
        # Only recurse into known sections
        if isinstance(value, dict) and CONFIG_KEY_TYPES.get(key_path) is dict:
            items.extend(_walk(value, f"{key_path}."))
    return items
