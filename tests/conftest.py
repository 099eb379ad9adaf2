"""Pytest configuration and shared fixtures."""

from typing import Callable

import pytest

from keymapfmt.config import Settings


# Indentation of the ``bindings = <`` line produced by make_keymap
BLOCK_INDENT = " " * 12


@pytest.fixture
def test_settings() -> Settings:
    """Create settings with the default formatting values."""
    return Settings(
        template_marker="Keymap Template",
        comment_marker="//",
        binding_sigil="&",
        content_indent=4,
        host="127.0.0.1",
        port=8000,
        debug=False,
        cors_allow_origins=["*"],
        max_document_chars=1000000,
        log_level="WARNING",
    )


def build_keymap(template_rows: list[str], body: list[str], *layers: list[str]) -> str:
    """Build a keymap document with a template and one block per layer."""
    lines = ["#include <dt-bindings/zmk/keys.h>", ""]
    if template_rows:
        lines.append("// Keymap Template")
        lines.extend(f"// {row}" for row in template_rows)
        lines.append("")

    lines.extend(["/ {", "    keymap {", '        compatible = "zmk,keymap";'])
    for index, layer in enumerate((body, *layers)):
        lines.append(f"        layer_{index} {{")
        lines.append(BLOCK_INDENT + "bindings = <")
        lines.extend(layer)
        lines.append(BLOCK_INDENT + ">;")
        lines.append("        };")
    lines.extend(["    };", "};", ""])
    return "\n".join(lines)


@pytest.fixture
def make_keymap() -> Callable[..., str]:
    """Factory building keymap documents from template rows and block bodies."""
    return build_keymap


@pytest.fixture
def block_lines() -> Callable[[str], list[str]]:
    """Extract the lines between the first block's delimiters."""

    def _extract(document: str) -> list[str]:
        lines = document.split("\n")
        start = next(i for i, line in enumerate(lines) if "bindings = <" in line)
        end = next(i for i in range(start + 1, len(lines)) if ">" in lines[i])
        return lines[start + 1 : end]

    return _extract
