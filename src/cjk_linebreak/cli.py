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

# HERE IS THE CHANGELOG FOR THIS VERSION OF THE CODE:
# - Initial creation of the cjk-linebreak entry point
# - Plain text input is wrapped in a single text node
# - mdast JSON input is transformed and written back as JSON
#

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, Sequence

from rich.console import Console
from rich.markup import escape

from .break_rewriter import remove_line_breaks
from .cli_parser import create_parser, validate_args
from .cli_setup import setup_configuration, setup_logging, write_config
from .common_file_utils import decode_bytes
from .models import LineBreakOptions
from .tree_utils import get_node_value, iter_text_nodes, paragraph, root, text_node

# Messages go to stderr so stdout carries only the result
console = Console(stderr=True)


def _read_input(filepath: str, config: dict[str, Any], encoding: str | None) -> str:
    if filepath == "-":
        raw_data = sys.stdin.buffer.read()
    else:
        raw_data = Path(filepath).read_bytes()

    input_config = config["input"]
    return decode_bytes(
        raw_data,
        default_encoding=encoding or input_config["default_encoding"],
        detect=encoding is None and input_config["detect_encoding"],
        confidence_threshold=input_config["confidence_threshold"],
    )


def process_text(text: str, options: LineBreakOptions) -> str:
    """Run plain text through the transform as a single text node."""
    tree = remove_line_breaks(root(paragraph(text_node(text))), options)
    return "".join(get_node_value(node) for node in iter_text_nodes(tree))


def process_mdast(source: str, options: LineBreakOptions) -> str:
    """Transform an mdast JSON document and serialize it back."""
    tree = json.loads(source)
    if not isinstance(tree, dict):
        raise ValueError(f"mdast JSON root must be an object, got {type(tree).__name__}")
    return json.dumps(remove_line_breaks(tree, options), ensure_ascii=False, indent=2) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the cjk-linebreak CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)
    validate_args(args, parser)

    try:
        config, options = setup_configuration(args)
    except ValueError as e:
        console.print(f"[bold red]Configuration error: {escape(str(e))}[/bold red]")
        return 1

    tolog = setup_logging(config)
    tolog.debug(f"Effective options: {options}")

    if args.write_config:
        try:
            write_config(config, options, Path(args.write_config))
        except ValueError as e:
            tolog.error(f"Failed to save configuration: {e}")
            console.print(f"[bold red]Failed to save configuration: {escape(str(e))}[/bold red]")
            return 1
        console.print(f"[bold green]Saved configuration to {escape(args.write_config)}[/bold green]")
        if args.filepath is None:
            return 0

    try:
        source = _read_input(args.filepath, config, args.encoding)
        if config["input"]["tree_format"] == "mdast":
            result = process_mdast(source, options)
        else:
            result = process_text(source, options)
    except (OSError, UnicodeDecodeError) as e:
        tolog.error(f"Failed to read {args.filepath}: {e}")
        console.print(f"[bold red]Failed to read {escape(args.filepath)}: {escape(str(e))}[/bold red]")
        return 1
    except ValueError as e:
        tolog.exception("Invalid input or break rule")
        console.print(f"[bold red]Error: {escape(str(e))}[/bold red]")
        return 1

    if args.output:
        try:
            Path(args.output).write_text(result, encoding="utf-8")
        except OSError as e:
            tolog.error(f"Failed to write {args.output}: {e}")
            console.print(f"[bold red]Failed to write {escape(args.output)}: {escape(str(e))}[/bold red]")
            return 1
        console.print(f"[bold green]Wrote {escape(args.output)}[/bold green]")
    else:
        sys.stdout.write(result)

    return 0


if __name__ == "__main__":
    sys.exit(main())
