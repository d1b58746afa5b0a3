"""CLI entry point for the parser conformance runner."""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Literal

from parse_test_runner.config_loader import default_run_config, load_run_config
from parse_test_runner.executor import FixtureExecutor
from parse_test_runner.orchestrator import ConformanceOrchestrator
from parse_test_runner.parsers.loading import ParserNotFoundError, load_parser_manifest
from parse_test_runner.reporting import ConsoleReporter, format_output
from parse_test_runner.runner import CategoryRunner

CONFIG_ERROR_EXIT_CODE = 2


async def run(
    parser_key: str,
    parser_config_json: str,
    config_path: Path | None = None,
    base_dir: Path = Path("."),
    output_format: Literal["text", "json"] = "text",
) -> int:
    """Run the conformance suite and return exit code."""
    log = logging.getLogger("parse_test_runner")

    try:
        log.info("Loading parser: %s", parser_key)
        manifest = load_parser_manifest(parser_key)
        config = manifest.config_cls.model_validate_json(parser_config_json)

        if config_path is None:
            run_config = default_run_config()
        else:
            log.info("Loading categories from %s", config_path)
            run_config = await load_run_config(config_path)
    except (ParserNotFoundError, FileNotFoundError, ValueError) as e:
        log.error("Configuration error: %s", e)
        return CONFIG_ERROR_EXIT_CODE

    # Keep stdout clean for the JSON document.
    reporter = ConsoleReporter(
        stream=sys.stderr if output_format == "json" else sys.stdout
    )
    reporter.run_started()

    async with manifest.parser_factory(config) as parser:
        orchestrator = ConformanceOrchestrator(
            runner=CategoryRunner(
                executor=FixtureExecutor(parser=parser),
                reporter=reporter,
                base_dir=base_dir,
            )
        )
        summary = await orchestrator.run(run_config.categories)

    if output_format == "json":
        print(json.dumps(format_output(summary), indent=2))
    else:
        reporter.summary(summary)

    return summary.exit_code


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Run parser conformance fixtures and report results"
    )
    parser.add_argument(
        "--parser",
        default="command",
        help="Parser key (command, http)",
    )
    parser.add_argument(
        "--parser-config",
        default="{}",
        help="JSON configuration for the parser",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML file listing test categories (default: built-in categories)",
    )
    parser.add_argument(
        "--base-dir",
        type=Path,
        default=Path("."),
        help="Directory category paths are relative to",
    )
    parser.add_argument(
        "--format",
        choices=("text", "json"),
        default="text",
        help="Output format for the final summary",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    exit_code = asyncio.run(
        run(
            parser_key=args.parser,
            parser_config_json=args.parser_config,
            config_path=args.config,
            base_dir=args.base_dir,
            output_format=args.format,
        )
    )
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
