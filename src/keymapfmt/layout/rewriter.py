"""Whole-document rewriting of binding lists against the layout template."""

import logging
from enum import Enum
from typing import Optional

from pydantic import BaseModel

from ..config import Settings, resolve_settings
from .mapper import GridMapper
from .models import Template
from .renderer import Renderer
from .syntax import (
    BLOCK_CLOSE,
    BLOCK_OPEN_PATTERN,
    has_comment,
    leading_whitespace,
    split_lines,
)
from .template import TemplateParser
from .tokenizer import BindingTokenizer

logger = logging.getLogger(__name__)


class LineKind(str, Enum):
    """Classification of a document line."""

    TEMPLATE_MARKER = "template_marker"
    TEMPLATE_ROW = "template_row"
    BLOCK_OPEN = "block_open"
    BLOCK_BODY = "block_body"
    BLOCK_CLOSE = "block_close"
    OTHER = "other"


class BindingBlock(BaseModel):
    """Location of one binding list in the document."""

    open_line: int
    close_line: int
    open_column: int  # Index just past '<' on the opening line
    close_column: int  # Index of '>' on the closing line
    indent: str  # Indentation of the opening line

    @property
    def is_inline(self) -> bool:
        return self.open_line == self.close_line


class ClassifiedDocument(BaseModel):
    """Result of the single classification pass over a document."""

    kinds: list[LineKind]
    template_start: Optional[int] = None  # First row line after the marker
    template_end: Optional[int] = None  # One past the last row line
    blocks: list[BindingBlock]


class DocumentRewriter:
    """Locate the template and binding lists and reformat every list."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = resolve_settings(settings)
        self.template_parser = TemplateParser(self.settings)
        self.tokenizer = BindingTokenizer(self.settings)
        self.mapper = GridMapper()
        self.renderer = Renderer()

    def classify(self, lines: list[str]) -> ClassifiedDocument:
        """
        Classify every line in one pass.

        The first marker comment followed by rows holding at least one cell
        is the template. A binding block runs from the line holding
        ``bindings = <`` to the first line holding ``>``; a block that never
        closes is left as ordinary text.
        """
        kinds = [LineKind.OTHER] * len(lines)
        blocks: list[BindingBlock] = []
        template_start: Optional[int] = None
        template_end: Optional[int] = None
        template_has_cells = False
        in_template = False
        pending: Optional[tuple[int, int]] = None  # (open line, open column)

        for index, line in enumerate(lines):
            if in_template:
                if self.template_parser.is_template_line(line):
                    kinds[index] = LineKind.TEMPLATE_ROW
                    template_end = index + 1
                    if self.template_parser.row_offsets(line):
                        template_has_cells = True
                    continue
                in_template = False
                if not template_has_cells:
                    self._release_template(kinds, template_start, template_end)
                    template_start = template_end = None

            opening = BLOCK_OPEN_PATTERN.search(line)

            if pending is not None:
                if opening is not None:
                    logger.debug(f"Binding list opened on line {pending[0] + 1} is not closed")
                    self._reset(kinds, pending[0], index)
                    pending = None
                else:
                    close_column = line.find(BLOCK_CLOSE)
                    if close_column < 0:
                        kinds[index] = LineKind.BLOCK_BODY
                        continue
                    kinds[index] = LineKind.BLOCK_CLOSE
                    blocks.append(
                        self._block(lines, pending[0], pending[1], index, close_column)
                    )
                    pending = None
                    continue

            if opening is not None:
                kinds[index] = LineKind.BLOCK_OPEN
                close_column = line.find(BLOCK_CLOSE, opening.end())
                if close_column >= 0:
                    blocks.append(
                        self._block(lines, index, opening.end(), index, close_column)
                    )
                else:
                    pending = (index, opening.end())
                continue

            if template_start is None and self.template_parser.is_marker(line):
                kinds[index] = LineKind.TEMPLATE_MARKER
                template_start = template_end = index + 1
                template_has_cells = False
                in_template = True

        if in_template and not template_has_cells:
            self._release_template(kinds, template_start, template_end)
            template_start = template_end = None

        if pending is not None:
            logger.debug(f"Binding list opened on line {pending[0] + 1} is not closed")
            self._reset(kinds, pending[0], len(lines))

        return ClassifiedDocument(
            kinds=kinds,
            template_start=template_start,
            template_end=template_end,
            blocks=blocks,
        )

    def _release_template(self, kinds: list[LineKind], start: int, end: int) -> None:
        # A marker whose rows hold no cell is not a template
        logger.debug(f"Template marker on line {start} has no cells, ignoring it")
        self._reset(kinds, start - 1, end)

    def _reset(self, kinds: list[LineKind], start: int, end: int) -> None:
        for index in range(start, end):
            kinds[index] = LineKind.OTHER

    def _block(
        self, lines: list[str], open_line: int, open_column: int, close_line: int, close_column: int
    ) -> BindingBlock:
        return BindingBlock(
            open_line=open_line,
            close_line=close_line,
            open_column=open_column,
            close_column=close_column,
            indent=leading_whitespace(lines[open_line]),
        )

    def inner_text(self, lines: list[str], block: BindingBlock) -> str:
        """Return the raw text between a block's delimiters."""
        if block.is_inline:
            return lines[block.open_line][block.open_column : block.close_column]
        parts = [lines[block.open_line][block.open_column :]]
        parts.extend(lines[block.open_line + 1 : block.close_line])
        parts.append(lines[block.close_line][: block.close_column])
        return "\n".join(parts)

    def format_block(
        self, lines: list[str], block: BindingBlock, template: Template
    ) -> Optional[list[str]]:
        """
        Produce the replacement lines for one binding block.

        Args:
            lines: Document lines
            block: The block to format
            template: The shared layout template

        Returns:
            Lines replacing the block, from opening to closing line, or None
            to leave the block unchanged
        """
        raw = self.inner_text(lines, block)
        if has_comment(raw):
            logger.debug(f"Skipping binding list on line {block.open_line + 1}: contains comments")
            return None

        bindings = self.tokenizer.tokenize(raw)
        if not bindings:
            logger.debug(f"Skipping binding list on line {block.open_line + 1}: no bindings")
            return None

        grid = self.mapper.map(template, bindings)
        content_indent = block.indent + self.settings.indent_unit()
        body = self.renderer.render(grid, content_indent)

        open_text = lines[block.open_line]
        close_text = lines[block.close_line]

        if open_text[block.open_column :].strip() or block.is_inline:
            opening = open_text[: block.open_column]
        else:
            opening = open_text

        if close_text[: block.close_column].strip() or block.is_inline:
            closing = block.indent + close_text[block.close_column :]
        else:
            closing = close_text

        return [opening, *body, closing]

    def rewrite(self, text: str) -> str:
        """
        Reformat every binding list that follows the template.

        Args:
            text: Full document text

        Returns:
            The document with binding lists aligned; all other lines are
            untouched
        """
        lines, endings = split_lines(text)
        document = self.classify(lines)

        if document.template_start is None:
            logger.debug("No template found, leaving document unchanged")
            return text

        template = self.template_parser.parse(
            lines[document.template_start : document.template_end]
        )

        blocks = [b for b in document.blocks if b.open_line >= document.template_end]
        for block in reversed(blocks):
            try:
                replacement = self.format_block(lines, block, template)
            except Exception as e:
                logger.warning(
                    f"Failed to format binding list on line {block.open_line + 1}: {e}",
                    exc_info=True,
                )
                continue
            if replacement is not None:
                # Generated lines end like the opening line; the closing line keeps its own
                opening_ending = endings[block.open_line]
                closing_ending = endings[block.close_line]
                lines[block.open_line : block.close_line + 1] = replacement
                endings[block.open_line : block.close_line + 1] = (
                    [opening_ending] * (len(replacement) - 1) + [closing_ending]
                )

        return "".join(line + ending for line, ending in zip(lines, endings))


def format_document(text: str, settings: Optional[Settings] = None) -> str:
    """
    Format a keymap document against its layout template.

    Never raises: a document that cannot be formatted is returned unchanged.

    Args:
        text: Full document text
        settings: Optional formatting settings

    Returns:
        The formatted document text
    """
    try:
        return DocumentRewriter(settings).rewrite(text)
    except Exception as e:
        logger.warning(f"Failed to format document: {e}", exc_info=True)
        return text
