"""Models for test categories loaded from the run configuration."""

from collections.abc import Sequence
from enum import StrEnum

from pydantic import Field

from parse_test_runner.models.base import Model


class TestPolicy(StrEnum):
    """Rule applied to a fixture's parse outcome."""

    __test__ = False

    AST = "ast"
    SHOULD_PASS = "should_pass"
    SHOULD_FAIL = "should_fail"
    SNAPSHOT = "snapshot"


class Language(StrEnum):
    """Language tag passed to the parser."""

    JS = "js"
    TS = "ts"
    JSX = "jsx"
    TSX = "tsx"
    DTS = "dts"


class Category(Model):
    """A directory of fixtures evaluated under a single policy."""

    path: str = Field(..., description="Root directory, also the category identifier")
    type: TestPolicy = Field(..., description="Policy applied to every fixture")
    languages: Sequence[Language] = Field(
        ..., min_length=1, description="Languages accepted as fixtures"
    )
    exclude: Sequence[str] = Field(
        default_factory=tuple,
        description="Path substrings or exact file names to skip",
    )


class RunConfig(Model):
    """Complete run configuration loaded from YAML."""

    categories: Sequence[Category] = Field(
        default_factory=tuple, description="Categories in execution order"
    )
