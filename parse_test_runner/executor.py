"""Run a single fixture through the parser and judge the outcome."""

import asyncio
import difflib
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, assert_never

from parse_test_runner.classifier import EXPECTED_SUFFIX, SNAPSHOT_SUFFIX, base_name
from parse_test_runner.models.category import TestPolicy
from parse_test_runner.models.result import FailureReason, FixtureFile, Verdict
from parse_test_runner.parsers.base import ParseOptions, Parser, ParseResult

log = logging.getLogger(__name__)


def sibling_artifact(fixture_path: Path, suffix: str) -> Path:
    """Return the artifact paired with a fixture, e.g. ``x.expected.json``."""
    return fixture_path.with_name(f"{base_name(fixture_path)}{suffix}")


def render_snapshot(tree: Any) -> str:
    """Serialize a parse result the way snapshots are stored on disk."""
    return json.dumps(tree, indent=2, ensure_ascii=False)


def render_diff(expected: Any, actual: Any, context_lines: int = 2) -> str:
    """Render a unified diff between two JSON values for diagnostics."""
    expected_lines = json.dumps(expected, indent=2, sort_keys=True).splitlines()
    actual_lines = json.dumps(actual, indent=2, sort_keys=True).splitlines()
    return "\n".join(
        difflib.unified_diff(
            expected_lines,
            actual_lines,
            fromfile="expected",
            tofile="received",
            n=context_lines,
            lineterm="",
        )
    )


def json_equal(left: Any, right: Any) -> bool:
    """Compare decoded JSON values without conflating booleans and numbers.

    ``True == 1`` holds in Python, but ``true`` and ``1`` are different
    literals in a parse tree.
    """
    if isinstance(left, bool) or isinstance(right, bool):
        return type(left) is type(right) and left == right
    if isinstance(left, dict) and isinstance(right, dict):
        return left.keys() == right.keys() and all(
            json_equal(value, right[key]) for key, value in left.items()
        )
    if isinstance(left, list) and isinstance(right, list):
        return len(left) == len(right) and all(
            json_equal(a, b) for a, b in zip(left, right)
        )
    if isinstance(left, (dict, list)) or isinstance(right, (dict, list)):
        return False
    return left == right


async def read_source(path: Path) -> str:
    """Read fixture text exactly as stored.

    Line terminators are kept as-is and undecodable bytes become U+FFFD so
    the parser, not the harness, judges malformed input.
    """
    data = await asyncio.to_thread(path.read_bytes)
    return data.decode("utf-8", errors="replace")


async def read_json(path: Path) -> Any:
    text = await asyncio.to_thread(path.read_text, encoding="utf-8")
    return json.loads(text)


@dataclass(frozen=True, kw_only=True)
class FixtureExecutor:
    """Evaluates fixtures against a category policy using one parser."""

    parser: Parser

    async def run(self, fixture: FixtureFile, policy: TestPolicy) -> Verdict:
        """Parse a fixture and return its verdict.

        Never raises: any exception while reading, parsing or comparing is
        reported as a failed verdict carrying the error text.
        """
        try:
            return await self._run(fixture, policy)
        except Exception as e:
            log.debug("Fixture %s raised: %s", fixture.path, e, exc_info=e)
            return Verdict.failed(FailureReason.EXCEPTION, str(e))

    async def _run(self, fixture: FixtureFile, policy: TestPolicy) -> Verdict:
        source = await read_source(fixture.path)
        options = ParseOptions(source_type=fixture.source_type, lang=fixture.language)

        result = await self.parser.parse(source, options)
        has_errors = len(result.errors) > 0

        match policy:
            case TestPolicy.SHOULD_PASS:
                if has_errors:
                    return Verdict.failed(FailureReason.UNEXPECTED_ERRORS)
                return Verdict.passed()
            case TestPolicy.SHOULD_FAIL:
                if not has_errors:
                    return Verdict.failed(FailureReason.MISSING_ERRORS)
                return Verdict.passed()
            case TestPolicy.AST:
                return await self._compare_expected(fixture, result, has_errors)
            case TestPolicy.SNAPSHOT:
                return await self._compare_snapshot(fixture, result)
            case _:
                assert_never(policy)

    async def _compare_expected(
        self, fixture: FixtureFile, result: ParseResult, has_errors: bool
    ) -> Verdict:
        expected_file = sibling_artifact(fixture.path, EXPECTED_SUFFIX)
        if not expected_file.exists():
            return Verdict.failed(FailureReason.MISSING_EXPECTED)

        expected = await read_json(expected_file)

        # Erroring parses are accepted without comparison until semantic
        # errors are reported by the parser.
        if not has_errors and not json_equal(result.tree, expected):
            self._log_mismatch(fixture, expected, result)
            return Verdict.failed(FailureReason.MISMATCH)

        return Verdict.passed()

    async def _compare_snapshot(
        self, fixture: FixtureFile, result: ParseResult
    ) -> Verdict:
        snapshot_file = sibling_artifact(fixture.path, SNAPSHOT_SUFFIX)
        if not snapshot_file.exists():
            await asyncio.to_thread(
                snapshot_file.write_text,
                render_snapshot(result.tree),
                encoding="utf-8",
                newline="\n",
            )
            log.info("Created snapshot %s", snapshot_file)
            return Verdict.passed()

        snapshot = await read_json(snapshot_file)

        if not json_equal(result.tree, snapshot):
            self._log_mismatch(fixture, snapshot, result)
            return Verdict.failed(FailureReason.MISMATCH)

        return Verdict.passed()

    @staticmethod
    def _log_mismatch(fixture: FixtureFile, expected: Any, result: ParseResult) -> None:
        log.warning("x %s\n%s", fixture.path, render_diff(expected, result.tree))
