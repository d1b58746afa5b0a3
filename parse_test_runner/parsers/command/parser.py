"""Command parser implementation."""

import asyncio
import json
import logging
import os
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from dataclasses import dataclass

from parse_test_runner.parsers.base import (
    ParseOptions,
    Parser,
    ParseResult,
    ParserError,
    build_request,
)
from parse_test_runner.parsers.command.config import CommandParserConfig

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class CommandParser(Parser):
    """Parser invoked as an external command, one process per fixture."""

    config: CommandParserConfig

    @classmethod
    @asynccontextmanager
    async def from_config(
        cls, config: CommandParserConfig
    ) -> AsyncGenerator["CommandParser", None]:
        """Create parser from configuration."""
        log.debug("Using parser command: %s", " ".join(config.command))
        yield cls(config=config)

    async def parse(self, source: str, options: ParseOptions) -> ParseResult:
        """Run the parser command and decode its JSON output."""
        request = json.dumps(build_request(source, options)).encode()

        process = await asyncio.create_subprocess_exec(
            *self.config.command,
            cwd=self.config.cwd,
            env=self._environment(),
            stdin=asyncio.subprocess.PIPE,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
        stdout, stderr = await process.communicate(request)

        if process.returncode != 0:
            raise ParserError(
                f"Parser command exited with {process.returncode}: "
                f"{stderr.decode(errors='replace').strip()}"
            )

        try:
            payload = json.loads(stdout)
        except json.JSONDecodeError as e:
            raise ParserError(f"Parser command produced invalid JSON: {e}") from e

        return ParseResult.from_payload(payload)

    def _environment(self) -> dict[str, str] | None:
        if not self.config.env:
            return None
        return {**os.environ, **self.config.env}
