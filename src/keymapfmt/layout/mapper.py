"""Placement of bindings onto template cells and column width statistics."""

import logging
from collections import defaultdict
from typing import Optional

from .models import Binding, ColumnWidths, FormattedCell, MappedGrid, Template, TemplateCell

logger = logging.getLogger(__name__)


class GridMapper:
    """Assign bindings to template cells and compute aligned cell text."""

    def map(self, template: Template, bindings: list[Binding]) -> MappedGrid:
        """
        Map bindings onto the template, one per cell, row-major.

        Args:
            template: The parsed layout grid
            bindings: Bindings in source order

        Returns:
            MappedGrid with one FormattedCell per template cell, column width
            statistics, and the bindings that did not fit
        """
        assignments = self._assign(template, bindings)
        overflow = list(bindings[template.capacity :])
        if overflow:
            logger.debug(
                f"{len(overflow)} bindings exceed template capacity {template.capacity}"
            )

        column_widths = self.compute_column_widths(assignments)

        rows: list[list[FormattedCell]] = [[] for _ in template.rows]
        for cell, binding in assignments:
            widths = column_widths.get(cell.grid_column)
            rows[cell.row].append(self.format_cell(cell, binding, widths))

        return MappedGrid(
            rows=rows,
            column_count=template.column_count,
            column_widths=column_widths,
            overflow=overflow,
        )

    def _assign(
        self, template: Template, bindings: list[Binding]
    ) -> list[tuple[TemplateCell, Optional[Binding]]]:
        """Pair every template cell with the next binding, if any is left."""
        remaining = iter(bindings)
        return [(cell, next(remaining, None)) for cell in template.cells()]

    def compute_column_widths(
        self, assignments: list[tuple[TemplateCell, Optional[Binding]]]
    ) -> dict[int, ColumnWidths]:
        """
        Compute width statistics for every column holding a binding.

        A column mixing bindings with and without arguments is not aligned
        internally; only its total width is shared.

        Args:
            assignments: (cell, binding) pairs from the row-major walk

        Returns:
            Dict mapping grid column to its ColumnWidths
        """
        columns: dict[int, list[Binding]] = defaultdict(list)
        for cell, binding in assignments:
            if binding is not None:
                columns[cell.grid_column].append(binding)

        widths = {}
        for column, column_bindings in columns.items():
            with_args = [b for b in column_bindings if b.args]
            aligned = not (with_args and len(with_args) < len(column_bindings))

            macro_width = max(len(b.macro) for b in column_bindings)
            args_width = max((len(b.args_text) for b in with_args), default=0)

            stats = ColumnWidths(
                column_macro_width=macro_width,
                column_args_width=args_width,
                aligned=aligned,
            )
            stats.column_width = max(
                len(self.render_binding(b, stats)) for b in column_bindings
            )
            widths[column] = stats

        return widths

    def render_binding(self, binding: Binding, widths: ColumnWidths) -> str:
        """Render a binding without padding it to the column width."""
        if not binding.args:
            return binding.macro
        if not widths.aligned:
            return binding.text
        return (
            f"{binding.macro.ljust(widths.column_macro_width)} "
            f"{binding.args_text.ljust(widths.column_args_width)}"
        )

    def format_cell(
        self,
        cell: TemplateCell,
        binding: Optional[Binding],
        widths: Optional[ColumnWidths],
    ) -> FormattedCell:
        """Build the FormattedCell for one template cell."""
        if binding is None or widths is None:
            return FormattedCell(cell=cell)

        rendered = self.render_binding(binding, widths).ljust(widths.column_width)
        return FormattedCell(
            cell=cell,
            binding=binding,
            rendered_text=rendered,
            macro_width=len(binding.macro),
            args_width=len(binding.args_text),
        )
