"""HTTP parser module."""

from parse_test_runner.parsers.http.config import HttpParserConfig
from parse_test_runner.parsers.http.manifest import http_parser_manifest
from parse_test_runner.parsers.http.parser import HttpParser

__all__ = ["HttpParser", "HttpParserConfig", "http_parser_manifest"]
