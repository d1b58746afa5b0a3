"""Models for fixture verdicts and aggregated results."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Literal, Self, TypeAlias

from parse_test_runner.models.category import Language

SourceType: TypeAlias = Literal["module", "script"]


class FailureReason(StrEnum):
    """Why a fixture failed."""

    MISSING_EXPECTED = "missing_expected"
    MISMATCH = "mismatch"
    UNEXPECTED_ERRORS = "unexpected_errors"
    MISSING_ERRORS = "missing_errors"
    EXCEPTION = "exception"


@dataclass(frozen=True, kw_only=True)
class FixtureFile:
    """A discovered fixture with its derived parser framing."""

    path: Path
    language: Language
    source_type: SourceType


@dataclass(frozen=True, kw_only=True)
class Verdict:
    """Outcome of a single fixture.

    Contains only the outcome - the caller knows which fixture it belongs to.
    """

    status: Literal["pass", "fail"]
    reason: FailureReason | None = None
    detail: str | None = None

    @classmethod
    def passed(cls) -> Self:
        return cls(status="pass")

    @classmethod
    def failed(cls, reason: FailureReason, detail: str | None = None) -> Self:
        return cls(status="fail", reason=reason, detail=detail)

    @property
    def ok(self) -> bool:
        return self.status == "pass"

    def describe(self, fixture_path: Path) -> str:
        """Render the failure line listed under a failing category."""
        path = fixture_path.as_posix()
        match self.reason:
            case FailureReason.MISSING_EXPECTED:
                return f"{path} (missing expected.json)"
            case FailureReason.EXCEPTION:
                return f"{path} (error: {self.detail})"
            case _:
                return path


@dataclass(frozen=True, kw_only=True)
class CategoryResult:
    """Finalized counters for one category."""

    path: str
    passed: int = 0
    failed: int = 0
    total: int = 0
    failures: Sequence[str] = ()


@dataclass(frozen=True, kw_only=True)
class RunSummary:
    """Results of every configured category, in declaration order."""

    results: Mapping[str, CategoryResult]

    @property
    def reported(self) -> Sequence[CategoryResult]:
        """Categories that discovered at least one fixture."""
        return [result for result in self.results.values() if result.total > 0]

    @property
    def passed(self) -> int:
        return sum(result.passed for result in self.reported)

    @property
    def failed(self) -> int:
        return sum(result.failed for result in self.reported)

    @property
    def total(self) -> int:
        return sum(result.total for result in self.reported)

    @property
    def exit_code(self) -> int:
        return 1 if self.failed > 0 else 0
