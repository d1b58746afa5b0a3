"""Expand a category root into its fixture files."""

import logging
from collections.abc import Sequence
from pathlib import Path

from parse_test_runner.classifier import language_of, should_include, source_type_of
from parse_test_runner.models.category import Category
from parse_test_runner.models.result import FixtureFile

log = logging.getLogger(__name__)


def discover_fixtures(
    category: Category, base_dir: Path = Path(".")
) -> Sequence[FixtureFile]:
    """Find every fixture under a category root.

    Args:
        category: Category whose root, languages and exclusions apply
            (matched against paths relative to base_dir)
        base_dir: Directory the category path is relative to

    Returns:
        Fixtures sorted by path; empty when the root does not exist

    """
    root = base_dir / category.path
    if not root.is_dir():
        log.debug("Category root %s does not exist", root)
        return []

    paths = sorted(
        (
            path
            for path in root.rglob("*")
            if path.is_file()
            and should_include(
                path.relative_to(base_dir), category.languages, category.exclude
            )
        ),
        key=Path.as_posix,
    )
    log.debug("Discovered %d fixture(s) under %s", len(paths), root)

    return [
        FixtureFile(
            path=path,
            language=language_of(path),
            source_type=source_type_of(path),
        )
        for path in paths
    ]
