"""Tests for the command-line interface."""

import io
from unittest.mock import patch

import pytest

from keymapfmt.cli import main

TEMPLATE = "// Keymap Template\n// | * | * |\n"
UNFORMATTED = TEMPLATE + "bindings = <\n    &kp A    &kp B\n>;\n"
FORMATTED = TEMPLATE + "bindings = <\n    &kp A &kp B\n>;\n"


@pytest.fixture
def keymap_file(tmp_path):
    """Create an unformatted keymap file."""
    path = tmp_path / "board.keymap"
    path.write_text(UNFORMATTED)
    return path


class TestFormatCommand:
    """Test the format subcommand."""

    def test_prints_formatted_text(self, keymap_file, capsys):
        """Test formatted text goes to stdout and the file is untouched."""
        assert main(["format", str(keymap_file)]) == 0

        assert capsys.readouterr().out == FORMATTED
        assert keymap_file.read_text() == UNFORMATTED

    def test_in_place(self, keymap_file, capsys):
        """Test rewriting a file in place."""
        assert main(["format", "--in-place", str(keymap_file)]) == 0

        assert keymap_file.read_text() == FORMATTED
        assert capsys.readouterr().out == ""

    def test_check_reports_changes(self, keymap_file, capsys):
        """Test --check exits 1 when a file would change."""
        assert main(["format", "--check", str(keymap_file)]) == 1

        assert f"would reformat {keymap_file}" in capsys.readouterr().out
        assert keymap_file.read_text() == UNFORMATTED

    def test_check_clean_file(self, tmp_path):
        """Test --check exits 0 for formatted files."""
        path = tmp_path / "clean.keymap"
        path.write_text(FORMATTED)

        assert main(["format", "--check", str(path)]) == 0

    def test_stdin(self, monkeypatch, capsys):
        """Test '-' reads the document from stdin."""
        monkeypatch.setattr("sys.stdin", io.StringIO(UNFORMATTED))

        assert main(["format", "-"]) == 0

        assert capsys.readouterr().out == FORMATTED

    def test_several_files_to_stdout_rejected(self, keymap_file, tmp_path, capsys):
        """Test several documents are not concatenated on stdout."""
        other = tmp_path / "other.keymap"
        other.write_text(UNFORMATTED)

        assert main(["format", str(keymap_file), str(other)]) == 2

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "only one document" in captured.err
        assert keymap_file.read_text() == UNFORMATTED

    def test_several_files_in_place(self, keymap_file, tmp_path, capsys):
        """Test several files can be rewritten in place."""
        other = tmp_path / "other.keymap"
        other.write_text(UNFORMATTED)

        assert main(["format", "-i", str(keymap_file), str(other)]) == 0

        assert keymap_file.read_text() == FORMATTED
        assert other.read_text() == FORMATTED
        assert capsys.readouterr().out == ""

    def test_several_files_check(self, keymap_file, tmp_path, capsys):
        """Test --check accepts several files."""
        other = tmp_path / "other.keymap"
        other.write_text(FORMATTED)

        assert main(["format", "--check", str(keymap_file), str(other)]) == 1

        out = capsys.readouterr().out
        assert f"would reformat {keymap_file}" in out
        assert str(other) not in out

    def test_missing_file(self, tmp_path, capsys):
        """Test a missing file is reported with a non-zero exit code."""
        assert main(["format", str(tmp_path / "missing.keymap")]) == 2

        assert "cannot format" in capsys.readouterr().err


class TestOtherCommands:
    """Test serve and the default behavior."""

    @patch("keymapfmt.cli.uvicorn.run")
    def test_serve(self, mock_run):
        """Test serve starts uvicorn with the app factory."""
        assert main(["serve", "--host", "0.0.0.0", "--port", "9000"]) == 0

        mock_run.assert_called_once_with(
            "keymapfmt.api:create_app",
            host="0.0.0.0",
            port=9000,
            reload=False,
            factory=True,
        )

    def test_no_command_prints_help(self, capsys):
        """Test running without a command prints usage."""
        assert main([]) == 1

        assert "usage" in capsys.readouterr().out.lower()
