"""Tests for the layout template parser."""

from keymapfmt.config import Settings
from keymapfmt.layout import TemplateParser


class TestTemplateLines:
    """Test recognition of marker and row lines."""

    def test_is_marker(self):
        """Test marker comment recognition."""
        parser = TemplateParser()

        assert parser.is_marker("// Keymap Template") is True
        assert parser.is_marker("    //   keymap template  ") is True
        assert parser.is_marker("// Keymap Template:") is True

        assert parser.is_marker("Keymap Template") is False
        assert parser.is_marker("// Keymap Templates") is False
        assert parser.is_marker("// | * | * |") is False

    def test_custom_marker(self):
        """Test marker text comes from settings."""
        parser = TemplateParser(Settings(template_marker="Layout"))

        assert parser.is_marker("// Layout") is True
        assert parser.is_marker("// Keymap Template") is False

    def test_is_template_line(self):
        """Test template row recognition."""
        parser = TemplateParser()

        assert parser.is_template_line("// | * | * |") is True
        assert parser.is_template_line("            //     | * |") is True
        assert parser.is_template_line("// | * | ") is True
        assert parser.is_template_line("// |   |") is True

        assert parser.is_template_line("") is False
        assert parser.is_template_line("| * | * |") is False
        assert parser.is_template_line("// |") is False
        assert parser.is_template_line("// | * | x") is False
        assert parser.is_template_line("// some comment") is False


class TestTemplateParser:
    """Test building templates from comment lines."""

    def test_row_offsets(self):
        """Test offsets are measured from just after the comment marker."""
        parser = TemplateParser()

        assert parser.row_offsets("// | * | * |") == [1, 5]
        assert parser.row_offsets("            //     | * |") == [5]
        assert parser.row_offsets("//| * |") == [0]

    def test_blank_segments_are_gaps(self):
        """Test blank segments between delimiters are not cells."""
        parser = TemplateParser()

        assert parser.row_offsets("// | * |     | * |") == [1, 11]
        assert parser.row_offsets("// |   |") == []

    def test_parse_two_by_two(self):
        """Test parsing a 2x2 template."""
        parser = TemplateParser()

        template = parser.parse(["// | * | * |", "// | * | * |"])

        assert len(template.rows) == 2
        assert template.capacity == 4
        assert template.max_cells == 2
        assert template.column_count == 2

        first = template.rows[0].cells[0]
        assert first.row == 0
        assert first.col == 0
        assert first.original_column_offset == 1
        assert first.grid_column == 0

        last = template.rows[1].cells[1]
        assert last.row == 1
        assert last.col == 1
        assert last.original_column_offset == 5
        assert last.grid_column == 1

    def test_parse_stops_at_first_non_row(self):
        """Test the template ends at the first line that is not a row."""
        parser = TemplateParser()

        template = parser.parse(["// | * | * |", "", "// | * | * |"])

        assert len(template.rows) == 1
        assert template.capacity == 2

    def test_offset_rows_share_columns(self):
        """Test a shifted row maps onto the template columns it sits under."""
        parser = TemplateParser()

        template = parser.parse(["// | * | * | * |", "//     | * |"])

        thumb = template.rows[1].cells[0]
        assert thumb.col == 0
        assert thumb.original_column_offset == 5
        assert thumb.grid_column == 1
        assert template.max_cells == 3
        assert template.column_count == 3

    def test_rows_without_cells(self):
        """Test rows with no placeholders are kept but hold no cells."""
        parser = TemplateParser()

        template = parser.parse(["// | * |", "// |   |", "// | * |"])

        assert len(template.rows) == 3
        assert template.rows[1].cells == []
        assert template.capacity == 2

    def test_cells_iterate_row_major(self):
        """Test cell iteration order."""
        parser = TemplateParser()

        template = parser.parse(["// | * | * |", "//     | * |"])

        assert [(c.row, c.col) for c in template.cells()] == [(0, 0), (0, 1), (1, 0)]
