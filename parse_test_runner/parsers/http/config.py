"""Configuration for the HTTP parser."""

from pydantic import BaseModel, SecretStr


class HttpParserConfig(BaseModel):
    """Configuration for a parser exposed as an HTTP service."""

    api_base_url: str = "http://127.0.0.1:3000/"
    parse_path: str = "parse"
    token: SecretStr | None = None
