"""Abstract base class for parsers under test."""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from pydantic import ConfigDict, Field

from parse_test_runner.models.base import Model
from parse_test_runner.models.category import Language
from parse_test_runner.models.result import SourceType


class ParserError(Exception):
    """Raised when a parser cannot be invoked or returns a malformed result."""


class ParseOptions(Model):
    """Options handed to the parser alongside the source text."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    source_type: SourceType = Field(..., alias="sourceType")
    lang: Language

    def to_payload(self) -> dict[str, Any]:
        """Serialize with the parser's camelCase field names."""
        return self.model_dump(mode="json", by_alias=True)


@dataclass(frozen=True, kw_only=True)
class ParseResult:
    """Structured parse result returned by the parser.

    Only ``errors`` is interpreted; the rest of the tree is compared as a
    whole against recorded expectations.
    """

    tree: Mapping[str, Any]

    @property
    def errors(self) -> Sequence[Any]:
        return self.tree.get("errors") or []

    @classmethod
    def from_payload(cls, payload: Any) -> "ParseResult":
        """Validate a decoded JSON payload into a parse result."""
        if not isinstance(payload, dict):
            raise ParserError(
                f"Parser returned {type(payload).__name__}, expected a JSON object"
            )
        return cls(tree=payload)


@dataclass(frozen=True, kw_only=True)
class Parser(ABC):
    """Abstract base for parsers under test."""

    @abstractmethod
    async def parse(self, source: str, options: ParseOptions) -> ParseResult:
        """Parse source text.

        Args:
            source: Fixture contents
            options: Module/script framing and language tag

        Returns:
            The parser's result, including its error list

        Raises:
            ParserError: If the parser could not produce a result

        """


def build_request(source: str, options: ParseOptions) -> dict[str, Any]:
    """Build the JSON request body shared by out-of-process parsers."""
    return {"source": source, "options": options.to_payload()}
