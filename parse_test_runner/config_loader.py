"""Load the category configuration for a run."""

import asyncio
import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from parse_test_runner.models.category import Category, Language, RunConfig, TestPolicy

log = logging.getLogger(__name__)

# Fixtures that only fail on semantic checks the parser does not perform yet.
SEMANTIC_FAIL_FIXTURES = (
    "67c714796e7f40a4.js",
    "e6559958e6954318.js",
    "4e2cce832b4449f1.js",
    "317c81f05510f4ad.js",
    "76465e2c7af91e73.js",
    "fb130c395c6aafe7.js",
    "c7ad2478fd72bffe.js",
    "5e6f67a0e748cc42.js",
    "efcb54b62e8f0e06.js",
    "8b72c44bd531621a.js",
    "d17d3aebb6a3cf43.js",
    "2b050de45ab44c8c.js",
    "3078b4fed5626e2a.js",
    "04bc213db9cd1130.js",
    "4a887c2761eb95fb.js",
    "16947dc1d11e5e70.js",
    "8d5ef4dee9c7c622.js",
    "e808e347646c2670.js",
    "f2db53245b89c72f.js",
    "73d061b5d635a807.js",
    "b88ab70205263170.module.js",
    "6cd36f7e68bdfb7a.js",
    "a4bfa8e3b523c466.module.js",
    "858b72be7f8f19d7.js",
    "2226edabbd2261a7.module.js",
    "d54b2db4548f1d82.module.js",
    "5059efc702f08060.js",
    "f063969b23239390.module.js",
)


def default_run_config() -> RunConfig:
    """Return the built-in categories of the parser's test tree."""
    return RunConfig(
        categories=[
            Category(path="test/js/pass", type=TestPolicy.AST, languages=[Language.JS]),
            Category(path="test/js/fuzz", type=TestPolicy.AST, languages=[Language.JS]),
            Category(
                path="test/js/fail",
                type=TestPolicy.SHOULD_FAIL,
                languages=[Language.JS],
                exclude=SEMANTIC_FAIL_FIXTURES,
            ),
            Category(
                path="test/js/snapshot",
                type=TestPolicy.SNAPSHOT,
                languages=[Language.JS],
            ),
        ]
    )


async def load_run_config(path: Path) -> RunConfig:
    """Load and validate a run configuration file.

    Args:
        path: Path to the YAML configuration

    Returns:
        Parsed and validated RunConfig

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is empty, invalid YAML, or fails validation

    """
    if not path.is_file():
        raise FileNotFoundError(f"Config file not found: {path}")

    content = await asyncio.to_thread(path.read_text, encoding="utf-8")

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        raise ValueError(f"Empty config file: {path}")

    try:
        config = RunConfig.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid run config schema in {path}: {e}") from e

    log.debug("Loaded %d category(ies) from %s", len(config.categories), path)
    return config
