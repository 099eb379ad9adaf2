"""Rendering of a mapped grid back into aligned text lines."""

from .models import MappedGrid


class Renderer:
    """Lay out mapped cells line by line following the template geometry."""

    def column_starts(self, grid: MappedGrid) -> dict[int, int]:
        """
        Compute where each template column starts, relative to the indentation.

        Columns are laid out left to right, one space apart. A column with no
        binding takes no room.
        """
        starts = {}
        position = 0
        for column in range(grid.column_count):
            starts[column] = position
            widths = grid.column_widths.get(column)
            if widths is not None and widths.column_width > 0:
                position += widths.column_width + 1
        return starts

    def render(self, grid: MappedGrid, indent: str) -> list[str]:
        """
        Render the grid as lines of block content.

        Args:
            grid: Output of GridMapper
            indent: Base indentation of the block content

        Returns:
            Lines without line terminators, excluding the block delimiters
        """
        starts = self.column_starts(grid)
        lines = []

        for row in grid.rows:
            occupied = [formatted for formatted in row if not formatted.is_empty]
            if not occupied:
                continue

            line = indent
            for formatted in occupied:
                desired = len(indent) + starts[formatted.cell.grid_column]
                minimum = 1 if line != indent else 0
                line += " " * max(desired - len(line), minimum)
                line += formatted.rendered_text
            lines.append(line)

        for binding in grid.overflow:
            lines.append(indent + binding.text)

        return lines
