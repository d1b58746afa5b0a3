"""HTTP parser manifest."""

from parse_test_runner.parsers.http.config import HttpParserConfig
from parse_test_runner.parsers.http.parser import HttpParser
from parse_test_runner.parsers.manifest import ParserManifest

http_parser_manifest = ParserManifest(
    config_cls=HttpParserConfig,
    parser_factory=HttpParser.from_config,
)
