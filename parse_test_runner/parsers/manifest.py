"""Description of a parser plugin: its config schema and how to open it."""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from dataclasses import dataclass
from typing import Generic, TypeVar

from pydantic import BaseModel

from parse_test_runner.parsers.base import Parser

ConfigT = TypeVar("ConfigT", bound=BaseModel)


@dataclass(frozen=True, kw_only=True)
class ParserManifest(Generic[ConfigT]):
    """What the CLI needs to turn ``--parser-config`` JSON into a parser.

    ``config_cls`` validates the JSON; ``parser_factory`` opens the parser
    for the whole run and releases its resources (processes, HTTP sessions)
    once every category has finished.
    """

    config_cls: type[ConfigT]
    parser_factory: Callable[[ConfigT], AbstractAsyncContextManager[Parser]]
