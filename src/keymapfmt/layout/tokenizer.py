"""Tokenizer for the contents of a binding list."""

import logging
from typing import Optional

from ..config import Settings, resolve_settings
from .models import Binding
from .syntax import normalize_whitespace

logger = logging.getLogger(__name__)


class BindingTokenizer:
    """Split raw binding-list text into Binding records."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = resolve_settings(settings)

    def tokenize(self, text: str) -> list[Binding]:
        """
        Tokenize a binding list.

        A sigil-prefixed token starts a new binding and the tokens after it
        become its arguments. Tokens seen before the first sigil are dropped.

        Args:
            text: Raw text between the block delimiters, possibly multi-line

        Returns:
            Bindings in source order
        """
        sigil = self.settings.binding_sigil
        bindings: list[Binding] = []
        macro: Optional[str] = None
        args: list[str] = []
        dropped: list[str] = []

        cleaned = normalize_whitespace(text)
        for token in cleaned.split(" ") if cleaned else []:
            if token.startswith(sigil):
                if macro is not None:
                    bindings.append(Binding(macro=macro, args=tuple(args)))
                macro = token
                args = []
            elif macro is None:
                dropped.append(token)
            else:
                args.append(token)

        if macro is not None:
            bindings.append(Binding(macro=macro, args=tuple(args)))

        if dropped:
            logger.debug(f"Dropped {len(dropped)} tokens before the first binding: {dropped}")

        return bindings
