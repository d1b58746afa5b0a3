"""Fixtures for integration tests."""

import sys
import textwrap
from collections.abc import Generator
from pathlib import Path

import pytest
from aioresponses import aioresponses as aioresponses_cls

from parse_test_runner.parsers.command import CommandParserConfig

# Stand-in parser: reports an error for sources containing "@@".
FAKE_PARSER_SCRIPT = textwrap.dedent(
    """
    import json
    import sys

    request = json.load(sys.stdin)
    source = request["source"]
    if "CRASH" in source:
        print("parser crashed", file=sys.stderr)
        sys.exit(3)
    errors = [{"message": "Unexpected token"}] if "@@" in source else []
    json.dump(
        {
            "type": "Program",
            "sourceType": request["options"]["sourceType"],
            "lang": request["options"]["lang"],
            "length": len(source),
            "errors": errors,
        },
        sys.stdout,
    )
    """
)


@pytest.fixture
def aioresponses() -> Generator[aioresponses_cls, None, None]:
    """Mock outgoing aiohttp requests."""
    with aioresponses_cls() as mocked:
        yield mocked


@pytest.fixture
def fake_parser_config(tmp_path: Path) -> CommandParserConfig:
    """Command parser config running the stand-in parser script."""
    script = tmp_path / "fake_parser.py"
    script.write_text(FAKE_PARSER_SCRIPT)
    return CommandParserConfig(command=[sys.executable, str(script)])
