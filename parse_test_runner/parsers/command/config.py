"""Configuration for the command parser."""

from collections.abc import Mapping, Sequence
from pathlib import Path

from pydantic import BaseModel, Field


class CommandParserConfig(BaseModel):
    """Configuration for a parser run as a subprocess per fixture.

    The command receives ``{"source": ..., "options": {...}}`` as JSON on
    stdin and must print the parse result as a JSON object on stdout.
    """

    command: Sequence[str] = Field(..., min_length=1)
    cwd: Path | None = None
    # Merged over the inherited environment
    env: Mapping[str, str] = Field(default_factory=dict)
