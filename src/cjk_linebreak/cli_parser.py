#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# HERE IS THE CHANGELOG FOR THIS VERSION OF THE CODE:
# - Initial creation of the command-line parser
# - Rule flags share one destination so their order is preserved
#

"""
cli_parser.py - Command-line argument parsing for cjk-linebreak
===============================================================
"""

from __future__ import annotations

import argparse
from typing import Any, Sequence

from .config_schema import DEFAULT_CONFIG_FILENAME, VALID_LOG_LEVELS, VALID_TREE_FORMATS
from .models import BreakRule

APP_DESCRIPTION = "cjk-linebreak - remove line breaks between CJK characters"

EPILOG = """
USAGE EXAMPLES:
  cjk-linebreak novel.txt                      # print the unwrapped text
  cjk-linebreak novel.txt -o novel.clean.txt   # write to a file
  cjk-linebreak --hangul --emoji notes.txt     # also join Hangul and emoji
  cjk-linebreak --before '[)]' --after '[(]' doc.txt
  cjk-linebreak --format mdast tree.json       # transform an mdast JSON tree
  cat wrapped.txt | cjk-linebreak -            # read from stdin
  cjk-linebreak --hangul --write-config cjk_linebreak.yml   # save settings
"""


class _AppendRuleAction(argparse.Action):
    """Append a BreakRule built from the flag's value(s) to ``namespace.rules``."""

    def __init__(self, option_strings: Sequence[str], dest: str, side: str, **kwargs: Any) -> None:
        self.side = side
        super().__init__(option_strings, dest, **kwargs)

    def __call__(self, parser: argparse.ArgumentParser, namespace: argparse.Namespace, values: Any, option_string: str | None = None) -> None:
        if self.side == "before":
            rule = BreakRule(before_break=values)
        elif self.side == "after":
            rule = BreakRule(after_break=values)
        else:
            before, after = values
            rule = BreakRule(before_break=before or None, after_break=after or None)

        rules = getattr(namespace, self.dest, None)
        if rules is None:
            rules = []
        setattr(namespace, self.dest, rules + [rule])


def _add_input_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "filepath",
        type=str,
        nargs="?",
        default=None,
        help="Input file (plain text or mdast JSON). Use '-' to read from stdin",
    )
    parser.add_argument("-o", "--output", type=str, help="Write the result to this file instead of stdout")
    parser.add_argument(
        "--format",
        dest="tree_format",
        choices=VALID_TREE_FORMATS,
        default=None,
        help="Input format: plain text or an mdast JSON tree (default: from config, else text)",
    )
    parser.add_argument("--encoding", type=str, default=None, help="Input encoding. Disables detection when given")


def _add_option_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--hangul", dest="include_hangul", action="store_true", default=None, help="Treat Hangul as CJK-like")
    parser.add_argument("--emoji", dest="include_emoji", action="store_true", default=None, help="Treat emoji sequences as CJK-like")
    parser.add_argument(
        "--squared-latin-abbrs",
        dest="include_squared_latin_abbrs",
        action="store_true",
        default=None,
        help="Treat squared Latin abbreviations (e.g. ㎅) as CJK-like",
    )

    # Rule flags replace the config file's additional_regexp_pairs
    parser.add_argument("--before", dest="rules", action=_AppendRuleAction, side="before", metavar="PATTERN", help="Add a rule accepting PATTERN before the break")
    parser.add_argument("--after", dest="rules", action=_AppendRuleAction, side="after", metavar="PATTERN", help="Add a rule accepting PATTERN after the break")
    parser.add_argument(
        "--pair",
        dest="rules",
        action=_AppendRuleAction,
        side="pair",
        nargs=2,
        metavar=("BEFORE", "AFTER"),
        help="Add a rule with both sides; pass '' to leave a side empty",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="cjk-linebreak",
        description=APP_DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--config",
        type=str,
        default=DEFAULT_CONFIG_FILENAME,
        help=f"Path to configuration file (default: {DEFAULT_CONFIG_FILENAME})",
    )
    parser.add_argument("--log-level", type=str.upper, choices=VALID_LOG_LEVELS, default=None, help="Override the configured log level")
    parser.add_argument(
        "--write-config",
        type=str,
        default=None,
        metavar="PATH",
        help="Save the effective settings, command-line overrides included, as YAML to PATH",
    )

    _add_input_args(parser)
    _add_option_args(parser)
    return parser


def validate_args(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    """
    Validate parsed arguments.

    An input file is required unless the run only saves the configuration.

    Args:
        args: Parsed arguments
        parser: Argument parser, used to report errors

    Raises:
        SystemExit: If validation fails
    """
    if args.filepath is None and not args.write_config:
        parser.error("the following arguments are required: filepath")
    if args.output and args.filepath is None:
        parser.error("--output requires an input file")
