"""Configuration management for keymapfmt."""

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()


def _parse_cors_origins() -> list[str]:
    """Parse CORS origins from environment variable."""
    cors_env = os.getenv("CORS_ALLOW_ORIGINS")
    if cors_env:
        return cors_env.split(",")
    return ["*"]


class Settings(BaseModel):
    """Application settings."""

    # Template recognition - the comment that introduces the layout grid
    template_marker: str = os.getenv("TEMPLATE_MARKER", "Keymap Template")
    comment_marker: str = os.getenv("COMMENT_MARKER", "//")

    # Binding grammar - every binding starts with this character
    binding_sigil: str = os.getenv("BINDING_SIGIL", "&")

    # Spaces added to the opening line's indentation for block content
    content_indent: int = int(os.getenv("CONTENT_INDENT", "4"))

    # Server settings
    host: str = os.getenv("HOST", "127.0.0.1")
    port: int = int(os.getenv("PORT", "8000"))
    debug: bool = os.getenv("DEBUG", "false").lower() == "true"

    # CORS settings (comma-separated list of allowed origins, or * for all)
    cors_allow_origins: list[str] = _parse_cors_origins()

    # Hard cap on documents accepted over HTTP
    max_document_chars: int = int(os.getenv("MAX_DOCUMENT_CHARS", "1000000"))

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "WARNING")

    def indent_unit(self) -> str:
        """Return the indentation added below a block's opening line."""
        return " " * max(self.content_indent, 0)


settings = Settings()


def resolve_settings(override: Optional[Settings] = None) -> Settings:
    """Return the given settings, or the module-level instance."""
    return override if override is not None else settings
