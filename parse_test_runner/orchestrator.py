"""Run all configured categories and aggregate their results."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from parse_test_runner.models.category import Category
from parse_test_runner.models.result import CategoryResult, RunSummary
from parse_test_runner.runner import CategoryRunner

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class ConformanceOrchestrator:
    """Runs categories one after another and builds the run summary."""

    runner: CategoryRunner

    async def run(self, categories: Sequence[Category]) -> RunSummary:
        """Run every category in declaration order.

        Args:
            categories: Categories to run

        Returns:
            Summary keyed by category path, in the order categories ran

        """
        results: dict[str, CategoryResult] = {}

        for category in categories:
            results[category.path] = await self.runner.run_category(category)

        summary = RunSummary(results=results)
        log.info(
            "Conformance run completed: %d/%d passed, %d failed",
            summary.passed,
            summary.total,
            summary.failed,
        )
        return summary
