"""Command parser module."""

from parse_test_runner.parsers.command.config import CommandParserConfig
from parse_test_runner.parsers.command.manifest import command_parser_manifest
from parse_test_runner.parsers.command.parser import CommandParser

__all__ = ["CommandParser", "CommandParserConfig", "command_parser_manifest"]
