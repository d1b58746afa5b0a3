"""Run every fixture of one category."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from parse_test_runner.discovery import discover_fixtures
from parse_test_runner.executor import FixtureExecutor
from parse_test_runner.models.category import Category
from parse_test_runner.models.result import CategoryResult
from parse_test_runner.reporting import ConsoleReporter

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class CategoryRunner:
    """Discovers a category's fixtures and executes them in order."""

    executor: FixtureExecutor
    reporter: ConsoleReporter = field(default_factory=ConsoleReporter)
    base_dir: Path = Path(".")

    async def run_category(self, category: Category) -> CategoryResult:
        """Run all fixtures of a category.

        Categories without fixtures produce an empty result and no output.
        """
        fixtures = discover_fixtures(category, self.base_dir)
        total = len(fixtures)

        if total == 0:
            log.debug("No fixtures found for %s, skipping", category.path)
            return CategoryResult(path=category.path)

        log.debug("Running %d fixture(s) for %s", total, category.path)
        self.reporter.category_started(category.path)

        passed = 0
        failures: list[str] = []
        for fixture in fixtures:
            verdict = await self.executor.run(fixture, category.type)
            if verdict.ok:
                passed += 1
            else:
                failures.append(verdict.describe(fixture.path))
            self.reporter.progress(category.path, passed, total)

        result = CategoryResult(
            path=category.path,
            passed=passed,
            failed=len(failures),
            total=total,
            failures=tuple(failures),
        )
        self.reporter.category_finished(result)

        return result
