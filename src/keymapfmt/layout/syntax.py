"""Keymap syntax definitions and patterns."""

import re
from typing import Optional, Pattern

# bindings = < ... > - Opening of a binding list
BLOCK_OPEN_PATTERN: Pattern = re.compile(r"\bbindings\s*=\s*<")

# Closing delimiter of a binding list
BLOCK_CLOSE = ">"

# | * | * | - One template row, at least one pair of delimiters
TEMPLATE_ROW_PATTERN: Pattern = re.compile(r"^\|(?:[^|]*\|)+$")

# Comments are not tokens; a block body containing one is left alone
COMMENT_PATTERN: Pattern = re.compile(r"//|/\*|\*/")

WHITESPACE_PATTERN: Pattern = re.compile(r"\s+")

# \n or \r\n, kept by split_lines
LINE_BREAK_PATTERN: Pattern = re.compile(r"(\r?\n)")

TEMPLATE_DELIMITER = "|"


def leading_whitespace(line: str) -> str:
    """Return the indentation of a line."""
    return line[: len(line) - len(line.lstrip())]


def comment_body(line: str, comment_marker: str) -> Optional[str]:
    """
    Return the text following a line comment marker.

    Args:
        line: A document line
        comment_marker: The line-comment marker, e.g. "//"

    Returns:
        Everything after the marker (untrimmed), or None when the line is not
        a line comment
    """
    stripped = line.lstrip()
    if not stripped.startswith(comment_marker):
        return None
    return stripped[len(comment_marker):]


def normalize_whitespace(text: str) -> str:
    """Collapse whitespace runs to single spaces and trim."""
    return WHITESPACE_PATTERN.sub(" ", text).strip()


def has_comment(text: str) -> bool:
    return bool(COMMENT_PATTERN.search(text))


def split_lines(text: str) -> tuple[list[str], list[str]]:
    """
    Split text into lines and their terminators.

    Returns:
        The lines without terminators, and one terminator per line (empty for
        a final line that has none)
    """
    parts = LINE_BREAK_PATTERN.split(text)
    return parts[0::2], parts[1::2] + [""]
