"""Template-driven column alignment of keymap binding lists.

This module parses the ASCII layout template drawn in keymap comments
(like ``// | * | * |``), maps binding lists onto its cells and renders
them aligned to the template's columns.
"""

from .models import (
    Binding,
    TemplateCell,
    TemplateRow,
    Template,
    FormattedCell,
    ColumnWidths,
    MappedGrid,
)
from .template import TemplateParser
from .tokenizer import BindingTokenizer
from .mapper import GridMapper
from .renderer import Renderer
from .rewriter import DocumentRewriter, LineKind, format_document

__all__ = [
    "Binding",
    "TemplateCell",
    "TemplateRow",
    "Template",
    "FormattedCell",
    "ColumnWidths",
    "MappedGrid",
    "TemplateParser",
    "BindingTokenizer",
    "GridMapper",
    "Renderer",
    "DocumentRewriter",
    "LineKind",
    "format_document",
]
