"""Console output for conformance runs."""

import sys
from dataclasses import dataclass, field
from typing import Any, TextIO

from parse_test_runner.models.result import CategoryResult, RunSummary

STATUS_SYMBOLS = {
    "success": "✓",
    "failure": "x",
}


@dataclass(frozen=True, kw_only=True)
class ConsoleReporter:
    """Writes progress, category status and the final summary to a stream."""

    stream: TextIO = field(default_factory=lambda: sys.stdout)

    def run_started(self) -> None:
        self._write("Running tests...\n\n")

    def category_started(self, path: str) -> None:
        self._write(f"{path} ")

    def progress(self, path: str, passed: int, total: int) -> None:
        """Rewrite the current category line with the running pass count."""
        self._write(f"\r{path} {passed}/{total}")

    def category_finished(self, result: CategoryResult) -> None:
        status = "success" if result.failed == 0 else "failure"
        self._write(
            f"\r{STATUS_SYMBOLS[status]} {result.path} {result.passed}/{result.total}\n"
        )
        for failure in result.failures:
            self._write(f"  x {failure}\n")

    def summary(self, summary: RunSummary) -> None:
        self._write("\nSummary:\n")
        for result in summary.reported:
            self._write(f"  {result.path}: {result.passed}/{result.total}\n")
        self._write(f"\nTotal: {summary.passed}/{summary.total}\n")

    def _write(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()


def format_output(summary: RunSummary) -> dict[str, Any]:
    """Format a run summary for JSON output."""
    return {
        "total": summary.total,
        "passed": summary.passed,
        "failed": summary.failed,
        "categories": [
            {
                "path": result.path,
                "passed": result.passed,
                "failed": result.failed,
                "total": result.total,
                "failures": list(result.failures),
            }
            for result in summary.reported
        ],
    }
