"""Data models exchanged with editor and HTTP hosts."""

from pathlib import Path
from pydantic import BaseModel


class Position(BaseModel):
    """Zero-based line and character position in a document."""

    line: int
    character: int


class Range(BaseModel):
    """A span of a document between two positions."""

    start: Position
    end: Position


class TextEdit(BaseModel):
    """Replacement of a document range with new text."""

    range: Range
    new_text: str


class FormatResult(BaseModel):
    """Outcome of formatting one file."""

    path: Path
    changed: bool
    formatted: str
