"""Tests for fixture path classification."""

from pathlib import PurePosixPath

import pytest

from parse_test_runner.classifier import (
    base_name,
    is_artifact,
    is_excluded,
    language_of,
    should_include,
    source_type_of,
)
from parse_test_runner.models.category import Language


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("test/a.js", Language.JS),
        ("test/a.module.js", Language.JS),
        ("test/a.jsx", Language.JSX),
        ("test/a.ts", Language.TS),
        ("test/a.tsx", Language.TSX),
        ("test/types.d.ts", Language.DTS),
        ("test/README", Language.JS),
        ("test/data.json", Language.JS),
    ],
)
def test_language_of(path: str, expected: Language) -> None:
    """Maps suffixes to languages, declaration files before plain TS."""
    assert language_of(PurePosixPath(path)) == expected


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("pass/modules.module.js", "module"),
        ("pass/modules.js", "script"),
        ("pass/module.js", "script"),
    ],
)
def test_source_type_of(path: str, expected: str) -> None:
    """Uses module framing only for the .module. infix."""
    assert source_type_of(PurePosixPath(path)) == expected


def test_base_name_stops_at_first_dot() -> None:
    """Base name is everything before the first dot of the file name."""
    assert base_name(PurePosixPath("dir.v2/foo.module.js")) == "foo"
    assert base_name(PurePosixPath("dir/Makefile")) == "Makefile"


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("pass/x.expected.json", True),
        ("snapshot/y.snapshot.json", True),
        ("snapshot/__snapshots__/y.snap", True),
        ("pass/x.snapshots/z.js", True),
        ("pass/x.js", False),
        ("pass/x.json", False),
    ],
)
def test_is_artifact(path: str, expected: bool) -> None:
    """Recognizes expected and snapshot files as artifacts."""
    assert is_artifact(PurePosixPath(path)) is expected


def test_is_excluded_matches_exact_file_name() -> None:
    """Exact file names are excluded."""
    assert is_excluded(PurePosixPath("fail/bad.js"), ["bad.js"])


def test_is_excluded_matches_path_substring() -> None:
    """Path fragments are excluded wherever they occur."""
    assert is_excluded(PurePosixPath("fail/semantic/x.js"), ["semantic/"])


def test_is_excluded_without_patterns() -> None:
    """Nothing is excluded when no patterns are given."""
    assert not is_excluded(PurePosixPath("fail/bad.js"), [])


def test_is_excluded_requires_match() -> None:
    """Unrelated patterns do not exclude."""
    assert not is_excluded(PurePosixPath("fail/good.js"), ["bad.js", "other/"])


class TestShouldInclude:
    """Tests for should_include."""

    def test_includes_accepted_language(self) -> None:
        """Includes fixtures of an accepted language."""
        assert should_include(PurePosixPath("pass/x.js"), [Language.JS])

    def test_rejects_other_language(self) -> None:
        """Rejects fixtures of other languages."""
        assert not should_include(PurePosixPath("pass/x.ts"), [Language.JS])

    def test_rejects_artifacts_even_when_language_matches(self) -> None:
        """Artifacts are never fixtures, whatever their language tag."""
        assert not should_include(
            PurePosixPath("pass/x.expected.json"), [Language.JS]
        )
        assert not should_include(
            PurePosixPath("snapshot/y.snapshot.json"), list(Language)
        )

    def test_rejects_excluded(self) -> None:
        """Excluded fixtures are dropped before the language check."""
        assert not should_include(
            PurePosixPath("fail/bad.js"), [Language.JS], ["bad.js"]
        )

    def test_declaration_files_need_dts(self) -> None:
        """Declaration files are only accepted under the dts tag."""
        path = PurePosixPath("types/index.d.ts")
        assert not should_include(path, [Language.TS])
        assert should_include(path, [Language.DTS])
