"""Classify fixture paths by language, framing and inclusion rules."""

from collections.abc import Collection
from pathlib import PurePath

from parse_test_runner.models.category import Language
from parse_test_runner.models.result import SourceType

EXPECTED_SUFFIX = ".expected.json"
SNAPSHOT_SUFFIX = ".snapshot.json"
SNAPSHOT_MARKER = ".snap"
MODULE_MARKER = ".module."

# Compound suffixes must precede the plain ones they end with.
LANGUAGE_SUFFIXES: tuple[tuple[str, Language], ...] = (
    (".tsx", Language.TSX),
    (".jsx", Language.JSX),
    (".d.ts", Language.DTS),
    (".ts", Language.TS),
)


def language_of(path: PurePath) -> Language:
    """Return the language tag for a fixture, defaulting to plain JS."""
    name = path.as_posix()
    for suffix, language in LANGUAGE_SUFFIXES:
        if name.endswith(suffix):
            return language
    return Language.JS


def source_type_of(path: PurePath) -> SourceType:
    """Return module framing for ``.module.`` fixtures, script otherwise."""
    return "module" if MODULE_MARKER in path.as_posix() else "script"


def base_name(path: PurePath) -> str:
    """Return the file name up to its first dot.

    ``foo.module.js`` and ``foo.js`` both share the base name ``foo``, which
    is how expected and snapshot artifacts are paired with fixtures.
    """
    name = path.name
    head, _, _ = name.partition(".")
    return head


def is_artifact(path: PurePath) -> bool:
    """Check if a path is a generated expectation rather than a fixture."""
    name = path.as_posix()
    return (
        name.endswith(EXPECTED_SUFFIX)
        or name.endswith(SNAPSHOT_SUFFIX)
        or SNAPSHOT_MARKER in name
    )


def is_excluded(path: PurePath, patterns: Collection[str] = ()) -> bool:
    """Check if a path matches an exclusion pattern.

    A pattern matches when it occurs anywhere in the path or equals the
    file name exactly.
    """
    name = path.as_posix()
    return any(pattern in name or path.name == pattern for pattern in patterns)


def should_include(
    path: PurePath,
    languages: Collection[Language],
    exclude: Collection[str] = (),
) -> bool:
    """Decide whether a discovered file is a fixture for a category."""
    if is_artifact(path):
        return False
    if is_excluded(path, exclude):
        return False
    return language_of(path) in languages
