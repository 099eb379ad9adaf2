"""keymapfmt - align keymap binding lists to an ASCII layout template."""

from .layout import format_document

__version__ = "0.1.0"

__all__ = ["format_document", "__version__"]
