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
YAML helpers for the cjk-linebreak configuration file.
"""

import yaml
from pathlib import Path
from typing import Any
import logging

logger = logging.getLogger(__name__)


def load_safe_yaml(yaml_path: str | Path) -> dict[str, Any]:
    """
    Load a YAML mapping from disk.

    Args:
        yaml_path: Path to the YAML file

    Returns:
        The loaded mapping (empty for an empty file)

    Raises:
        ValueError: If the file is missing, unparsable, or not a mapping
    """
    yaml_path = Path(yaml_path)

    if not yaml_path.exists():
        raise ValueError(f"YAML file not found: {yaml_path}")

    try:
        with open(yaml_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing YAML file {yaml_path}: {e}") from e
    except OSError as e:
        raise ValueError(f"Error loading YAML file {yaml_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"YAML file must contain a dictionary at the root level, got {type(data).__name__}")
    return data


def save_safe_yaml(data: dict[str, Any], yaml_path: str | Path, create_dirs: bool = True) -> None:
    """
    Write a mapping to a YAML file, keeping CJK text unescaped.

    Raises:
        ValueError: If the data cannot be serialized or written
    """
    yaml_path = Path(yaml_path)

    # A failed dump leaves any existing file untouched
    try:
        text = yaml.safe_dump(data, default_flow_style=False, allow_unicode=True, sort_keys=False)
    except yaml.YAMLError as e:
        raise ValueError(f"Error serializing data to YAML: {e}") from e

    try:
        if create_dirs:
            yaml_path.parent.mkdir(parents=True, exist_ok=True)
        yaml_path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise ValueError(f"Error saving YAML file {yaml_path}: {e}") from e


def merge_yaml_configs(base_config: dict[str, Any], override_config: dict[str, Any]) -> dict[str, Any]:
    """
    Deep merge two configurations, with ``override_config`` taking precedence.

    Lists are replaced, not concatenated.
    """
    result = base_config.copy()

    for key, value in override_config.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_yaml_configs(result[key], value)
        else:
            result[key] = value

    return result
