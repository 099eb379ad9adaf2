"""Data models for the layout engine."""

from typing import Iterator, Optional
from pydantic import BaseModel, ConfigDict, Field


class Binding(BaseModel):
    """A sigil-prefixed macro followed by its argument tokens."""

    model_config = ConfigDict(frozen=True)

    macro: str  # e.g. "&kp", "&bhm"
    args: tuple[str, ...] = ()  # e.g. ("LCTRL", "A")

    @property
    def args_text(self) -> str:
        return " ".join(self.args)

    @property
    def text(self) -> str:
        """The binding written with single spaces between tokens."""
        if not self.args:
            return self.macro
        return f"{self.macro} {self.args_text}"


class TemplateCell(BaseModel):
    """One placeholder position in the template grid."""

    model_config = ConfigDict(frozen=True)

    row: int  # Zero-based template row
    col: int  # Ordinal position within its own row
    original_column_offset: int  # Offset of the opening '|' after the comment marker
    grid_column: int = 0  # Rank of the offset among all distinct template offsets


class TemplateRow(BaseModel):
    """An ordered row of template cells."""

    index: int
    cells: list[TemplateCell] = Field(default_factory=list)


class Template(BaseModel):
    """The parsed ASCII layout grid."""

    rows: list[TemplateRow] = Field(default_factory=list)

    @property
    def max_cells(self) -> int:
        """Largest number of cells found in a single row."""
        return max((len(row.cells) for row in self.rows), default=0)

    @property
    def capacity(self) -> int:
        """Total number of cells the template can hold."""
        return sum(len(row.cells) for row in self.rows)

    @property
    def column_count(self) -> int:
        """Number of distinct cell offsets across all rows."""
        return max((cell.grid_column + 1 for cell in self.cells()), default=0)

    def cells(self) -> Iterator[TemplateCell]:
        """Iterate cells row-major, left to right, top to bottom."""
        for row in self.rows:
            yield from row.cells


class ColumnWidths(BaseModel):
    """Width statistics for one template column."""

    column_width: int = 0
    column_macro_width: int = 0
    column_args_width: int = 0
    aligned: bool = True  # False when bare and parameterized bindings share the column


class FormattedCell(BaseModel):
    """A template cell together with the binding placed in it."""

    cell: TemplateCell
    binding: Optional[Binding] = None
    rendered_text: str = ""
    macro_width: int = 0
    args_width: int = 0

    @property
    def is_empty(self) -> bool:
        return self.binding is None


class MappedGrid(BaseModel):
    """Result of mapping bindings onto a template."""

    rows: list[list[FormattedCell]] = Field(default_factory=list)
    column_count: int = 0  # Distinct grid columns in the template
    column_widths: dict[int, ColumnWidths] = Field(default_factory=dict)
    overflow: list[Binding] = Field(default_factory=list)  # Bindings beyond template capacity

    @property
    def bindings(self) -> list[Binding]:
        """All bindings in placement order, overflow last."""
        placed = [
            formatted.binding
            for row in self.rows
            for formatted in row
            if formatted.binding is not None
        ]
        return placed + list(self.overflow)
