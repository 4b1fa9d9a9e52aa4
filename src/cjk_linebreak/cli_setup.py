#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
cli_setup.py - Configuration and logging setup for the cjk-linebreak CLI
"""

from __future__ import annotations

import argparse
import copy
import dataclasses
import logging
from pathlib import Path
from typing import Any

from .common_yaml_utils import save_safe_yaml
from .config_loader import ConfigLoader
from .models import LineBreakOptions


def setup_configuration(args: argparse.Namespace) -> tuple[dict[str, Any], LineBreakOptions]:
    """
    Load the configuration file and apply command-line overrides.

    Returns:
        Tuple of (configuration dictionary, effective LineBreakOptions)

    Raises:
        ValueError: If the configuration or the options are invalid
    """
    loader = ConfigLoader(Path(args.config) if args.config else None)
    config = loader.load_config()
    options = loader.get_options(config)

    overrides: dict[str, Any] = {}
    for name in ("include_hangul", "include_emoji", "include_squared_latin_abbrs"):
        value = getattr(args, name, None)
        if value is not None:
            overrides[name] = value
    if getattr(args, "rules", None):
        overrides["additional_regexp_pairs"] = tuple(args.rules)

    if getattr(args, "log_level", None):
        config["logging"]["level"] = args.log_level
    if getattr(args, "tree_format", None):
        config["input"]["tree_format"] = args.tree_format

    return config, dataclasses.replace(options, **overrides)


def write_config(config: dict[str, Any], options: LineBreakOptions, path: Path) -> None:
    """
    Save the effective settings as a configuration file.

    The ``line_breaks`` section is rebuilt from ``options`` so command-line
    flags and rules end up in the file. Other sections are written as loaded.

    Raises:
        ValueError: If the file cannot be written
    """
    effective = copy.deepcopy(config)
    effective["line_breaks"] = {
        "include_hangul": options.include_hangul,
        "include_emoji": options.include_emoji,
        "include_squared_latin_abbrs": options.include_squared_latin_abbrs,
        "additional_regexp_pairs": [
            {key: value for key, value in dataclasses.asdict(rule).items() if value is not None}
            for rule in options.additional_regexp_pairs
        ],
    }
    save_safe_yaml(effective, path)


def setup_logging(config: dict[str, Any]) -> logging.Logger:
    """Set up logging based on the ``logging`` configuration section.

    Args:
        config: Configuration dictionary

    Returns:
        Configured package logger
    """
    log_level = getattr(logging, config["logging"]["level"], logging.INFO)
    log_format = config["logging"]["format"]

    logging.basicConfig(level=log_level, format=log_format)
    logger = logging.getLogger("cjk_linebreak")
    logger.setLevel(log_level)

    if config["logging"]["file_enabled"]:
        try:
            file_handler = logging.FileHandler(config["logging"]["file_path"], encoding="utf-8")
            file_handler.setLevel(log_level)
            file_handler.setFormatter(logging.Formatter(log_format))
            logger.addHandler(file_handler)
        except OSError as e:
            logger.error(f"Failed to set up file logging to {config['logging']['file_path']}: {e}")
            # Continue without file logging

    return logger
