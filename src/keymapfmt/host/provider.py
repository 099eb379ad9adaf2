"""Whole-document formatting provider."""

import logging
from pathlib import Path
from typing import Optional

from ..config import Settings, resolve_settings
from ..layout import format_document
from .models import FormatResult, Position, Range, TextEdit

logger = logging.getLogger(__name__)


def position_at(text: str, offset: int) -> Position:
    """Convert a character offset into a line/character position."""
    offset = max(0, min(offset, len(text)))
    before = text[:offset]
    line = before.count("\n")
    character = offset - (before.rfind("\n") + 1)
    return Position(line=line, character=character)


class FormattingProvider:
    """Format whole documents and describe the result as edits."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = resolve_settings(settings)

    def format_text(self, text: str) -> str:
        return format_document(text, self.settings)

    def provide_document_formatting_edits(self, text: str) -> list[TextEdit]:
        """
        Compute the edits that format a document.

        Args:
            text: Full document text

        Returns:
            A single edit replacing the whole document, or an empty list when
            formatting changes nothing
        """
        formatted = self.format_text(text)
        if formatted == text:
            return []

        edit = TextEdit(
            range=Range(start=position_at(text, 0), end=position_at(text, len(text))),
            new_text=formatted,
        )
        return [edit]

    def format_file(self, path: Path, write: bool = False) -> FormatResult:
        """
        Format a keymap file.

        Args:
            path: File to format
            write: Write the result back when it differs

        Returns:
            FormatResult with the formatted text
        """
        path = Path(path)
        # newline="" keeps CRLF line endings intact
        with path.open("r", encoding="utf-8", newline="") as handle:
            original = handle.read()

        formatted = self.format_text(original)
        changed = formatted != original

        if write and changed:
            with path.open("w", encoding="utf-8", newline="") as handle:
                handle.write(formatted)
            logger.info(f"Formatted {path}")

        return FormatResult(path=path, changed=changed, formatted=formatted)
