"""Host adapters feeding documents into the layout engine."""

from .models import Position, Range, TextEdit, FormatResult
from .provider import FormattingProvider, position_at

__all__ = [
    "Position",
    "Range",
    "TextEdit",
    "FormatResult",
    "FormattingProvider",
    "position_at",
]
