"""Resolve the parser under test from its registered plugin key."""

from importlib.metadata import entry_points
from typing import Any

from parse_test_runner.parsers.manifest import ParserManifest

ENTRY_POINT_GROUP = "parse_test_runner.parsers"


class ParserNotFoundError(Exception):
    """Raised when ``--parser`` names no installed parser plugin."""


def load_parser_manifest(key: str) -> ParserManifest[Any]:
    """Look up the manifest of the parser plugin registered under ``key``.

    Plugins are advertised in the ``parse_test_runner.parsers`` entry point
    group; the built-in ones are ``command`` and ``http``.

    Raises:
        ParserNotFoundError: With the installed keys, so a typo in the CLI
            flag is easy to spot

    """
    plugins = entry_points(group=ENTRY_POINT_GROUP)

    for plugin in plugins:
        if plugin.name == key:
            manifest: ParserManifest[Any] = plugin.load()
            return manifest

    installed = sorted(plugin.name for plugin in plugins)
    raise ParserNotFoundError(
        f"Parser '{key}' not found. Available parsers: {installed}"
    )
