"""Tests for fixture discovery."""

from pathlib import Path

from parse_test_runner.discovery import discover_fixtures
from parse_test_runner.models.category import Language
from parse_test_runner.testing.factories import CategoryFactory


def write(path: Path, content: str = "") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return path


def test_returns_empty_for_missing_root(tmp_path: Path) -> None:
    """A missing category root yields no fixtures instead of an error."""
    category = CategoryFactory.build(path="does/not/exist")

    assert discover_fixtures(category, tmp_path) == []


def test_discovers_nested_fixtures_in_path_order(tmp_path: Path) -> None:
    """Walks the tree recursively and returns fixtures sorted by path."""
    write(tmp_path / "cases" / "b.js")
    write(tmp_path / "cases" / "a.js")
    write(tmp_path / "cases" / "nested" / "c.module.js")
    category = CategoryFactory.build(path="cases", languages=[Language.JS])

    fixtures = discover_fixtures(category, tmp_path)

    assert [f.path.relative_to(tmp_path).as_posix() for f in fixtures] == [
        "cases/a.js",
        "cases/b.js",
        "cases/nested/c.module.js",
    ]
    assert [f.source_type for f in fixtures] == ["script", "script", "module"]
    assert {f.language for f in fixtures} == {Language.JS}


def test_skips_artifacts_exclusions_and_languages(tmp_path: Path) -> None:
    """Only files passing every inclusion rule are fixtures."""
    write(tmp_path / "cases" / "x.js")
    write(tmp_path / "cases" / "x.expected.json")
    write(tmp_path / "cases" / "y.snapshot.json")
    write(tmp_path / "cases" / "skip.js")
    write(tmp_path / "cases" / "z.ts")
    (tmp_path / "cases" / "empty_dir").mkdir()
    category = CategoryFactory.build(
        path="cases", languages=[Language.JS], exclude=["skip.js"]
    )

    fixtures = discover_fixtures(category, tmp_path)

    assert [f.path.name for f in fixtures] == ["x.js"]


def test_exclusion_ignores_base_dir(tmp_path: Path) -> None:
    """Exclusion patterns match paths relative to the base directory."""
    base_dir = tmp_path / "skipme"
    write(base_dir / "cases" / "x.js")
    category = CategoryFactory.build(path="cases", exclude=["skipme"])

    fixtures = discover_fixtures(category, base_dir)

    assert len(fixtures) == 1


def test_accepts_multiple_languages(tmp_path: Path) -> None:
    """Derives each fixture's language from its own suffix."""
    write(tmp_path / "cases" / "a.tsx")
    write(tmp_path / "cases" / "b.d.ts")
    write(tmp_path / "cases" / "c.ts")
    category = CategoryFactory.build(
        path="cases", languages=[Language.TS, Language.TSX, Language.DTS]
    )

    fixtures = discover_fixtures(category, tmp_path)

    assert [f.language for f in fixtures] == [
        Language.TSX,
        Language.DTS,
        Language.TS,
    ]
