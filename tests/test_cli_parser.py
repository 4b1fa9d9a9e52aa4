#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Test suite for cli_parser module.
"""

import pytest

from cjk_linebreak.cli_parser import create_parser, validate_args
from cjk_linebreak.models import BreakRule


class TestCreateParser:
    """Test the argument parser."""

    def test_defaults(self):
        args = create_parser().parse_args(["input.txt"])

        assert args.filepath == "input.txt"
        assert args.config == "cjk_linebreak.yml"
        assert args.output is None
        assert args.tree_format is None
        assert args.encoding is None
        assert args.log_level is None
        assert args.write_config is None
        # Unset flags must not override the config file
        assert args.include_hangul is None
        assert args.include_emoji is None
        assert args.include_squared_latin_abbrs is None
        assert args.rules is None

    def test_flags(self):
        args = create_parser().parse_args(["--hangul", "--emoji", "--squared-latin-abbrs", "-o", "out.txt", "--format", "mdast", "-"])

        assert args.include_hangul is True
        assert args.include_emoji is True
        assert args.include_squared_latin_abbrs is True
        assert args.output == "out.txt"
        assert args.tree_format == "mdast"
        assert args.filepath == "-"

    def test_rules_keep_command_line_order(self):
        args = create_parser().parse_args(["--after", "[(]", "--pair", "a", "", "--before", "[)]", "in.txt"])

        assert args.rules == [
            BreakRule(after_break="[(]"),
            BreakRule(before_break="a"),
            BreakRule(before_break="[)]"),
        ]

    def test_log_level_is_case_insensitive(self):
        assert create_parser().parse_args(["--log-level", "debug", "in.txt"]).log_level == "DEBUG"

    def test_invalid_format(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args(["--format", "html", "in.txt"])

    def test_write_config(self):
        args = create_parser().parse_args(["--write-config", "saved.yml"])
        assert args.write_config == "saved.yml"
        assert args.filepath is None


class TestValidateArgs:
    """Test the validate_args function."""

    def test_missing_filepath(self):
        parser = create_parser()
        with pytest.raises(SystemExit):
            validate_args(parser.parse_args([]), parser)

    def test_output_without_input(self):
        parser = create_parser()
        with pytest.raises(SystemExit):
            validate_args(parser.parse_args(["--write-config", "saved.yml", "-o", "out.txt"]), parser)

    def test_write_config_alone_is_valid(self):
        parser = create_parser()
        validate_args(parser.parse_args(["--write-config", "saved.yml"]), parser)

    def test_filepath_is_valid(self):
        parser = create_parser()
        validate_args(parser.parse_args(["in.txt"]), parser)
