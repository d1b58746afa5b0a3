"""Command parser manifest."""

from parse_test_runner.parsers.command.config import CommandParserConfig
from parse_test_runner.parsers.command.parser import CommandParser
from parse_test_runner.parsers.manifest import ParserManifest

command_parser_manifest = ParserManifest(
    config_cls=CommandParserConfig,
    parser_factory=CommandParser.from_config,
)
