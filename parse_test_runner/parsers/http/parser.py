"""HTTP parser implementation."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from dataclasses import dataclass, field

import aiohttp

from parse_test_runner.parsers.base import (
    ParseOptions,
    Parser,
    ParseResult,
    ParserError,
    build_request,
)
from parse_test_runner.parsers.http.config import HttpParserConfig

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class HttpParser(Parser):
    """Parser reached over HTTP.

    Each fixture is posted as ``{"source": ..., "options": {...}}``; the
    response body is the parse result.
    """

    config: HttpParserConfig
    session: aiohttp.ClientSession = field(repr=False)

    @classmethod
    @asynccontextmanager
    async def from_config(
        cls, config: HttpParserConfig
    ) -> AsyncGenerator["HttpParser", None]:
        """Create parser with managed session lifecycle."""
        headers = {}
        if config.token is not None:
            headers["Authorization"] = f"Bearer {config.token.get_secret_value()}"

        async with aiohttp.ClientSession(
            base_url=config.api_base_url,
            headers=headers,
        ) as session:
            yield cls(config=config, session=session)

    async def parse(self, source: str, options: ParseOptions) -> ParseResult:
        """Post the source to the parse endpoint."""
        payload = build_request(source, options)

        async with self.session.post(self.config.parse_path, json=payload) as response:
            if response.status != 200:
                text = await response.text()
                raise ParserError(f"Parse request failed: {response.status} {text}")
            data = await response.json()

        return ParseResult.from_payload(data)
