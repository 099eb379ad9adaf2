"""Parser for the ASCII layout template found in keymap comments."""

import logging
from typing import Optional

from ..config import Settings, resolve_settings
from .models import Template, TemplateCell, TemplateRow
from .syntax import TEMPLATE_DELIMITER, TEMPLATE_ROW_PATTERN, comment_body

logger = logging.getLogger(__name__)


class TemplateParser:
    """Parse a placeholder grid such as ``// | * | * |`` into a Template."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = resolve_settings(settings)

    def is_marker(self, line: str) -> bool:
        """Check whether a line is the comment that introduces a template."""
        body = comment_body(line, self.settings.comment_marker)
        if body is None:
            return False
        text = body.strip().rstrip(":").strip()
        return text.lower() == self.settings.template_marker.strip().lower()

    def is_template_line(self, line: str) -> bool:
        """Check whether a line is a comment holding one row of the grid."""
        body = comment_body(line, self.settings.comment_marker)
        if body is None:
            return False
        return bool(TEMPLATE_ROW_PATTERN.match(body.strip()))

    def row_offsets(self, line: str) -> list[int]:
        """
        Locate the placeholders of one template line.

        Every non-blank segment between two consecutive delimiters is a
        placeholder; blank segments are gaps in the drawing.

        Args:
            line: A template comment line

        Returns:
            Offsets of each placeholder's opening delimiter, relative to the
            first character after the comment marker
        """
        body = comment_body(line, self.settings.comment_marker) or ""
        delimiters = [i for i, char in enumerate(body) if char == TEMPLATE_DELIMITER]

        offsets = []
        for start, end in zip(delimiters, delimiters[1:]):
            if body[start + 1 : end].strip():
                offsets.append(start)
        return offsets

    def parse(self, lines: list[str]) -> Template:
        """
        Build a Template from the lines following the marker comment.

        Parsing stops at the first line that is not a template row.

        Args:
            lines: Document lines starting right after the marker

        Returns:
            The parsed Template (possibly without rows)
        """
        raw_rows: list[list[int]] = []
        for line in lines:
            if not self.is_template_line(line):
                break
            raw_rows.append(self.row_offsets(line))

        template = self.build(raw_rows)
        logger.debug(
            f"Parsed template: {len(template.rows)} rows, "
            f"{template.capacity} cells, {template.max_cells} max per row"
        )
        return template

    def build(self, raw_rows: list[list[int]]) -> Template:
        """Create a Template from per-row placeholder offsets."""
        distinct_offsets = sorted({offset for offsets in raw_rows for offset in offsets})
        grid_columns = {offset: rank for rank, offset in enumerate(distinct_offsets)}

        rows = []
        for row_index, offsets in enumerate(raw_rows):
            cells = [
                TemplateCell(
                    row=row_index,
                    col=col,
                    original_column_offset=offset,
                    grid_column=grid_columns[offset],
                )
                for col, offset in enumerate(offsets)
            ]
            rows.append(TemplateRow(index=row_index, cells=cells))

        return Template(rows=rows)
