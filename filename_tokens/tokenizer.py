#!/usr/bin/env python3
"""
Tokenizer module for splitting filenames into typed tokens.

Runs the tokenization stages in order:
1. Bracket segmentation (brackets become their own tokens)
2. Delimiter segmentation of the text between brackets
3. Validation, which merges fragments the delimiter split got wrong

The filename is expected to have its extension and any ignored strings
removed already.
"""

import logging
from typing import List, Optional

from .bracket_segmenter import tokenize_by_brackets
from .options import TokenizerOptions
from .token import Token, TokenizationResult
from .validator import TokenValidator


logger = logging.getLogger(__name__)


class Tokenizer:
    """Tokenizer for extracting typed tokens from filenames."""

    def __init__(self, options: Optional[TokenizerOptions] = None):
        """
        Initialize tokenizer.

        Args:
            options: Tokenizer options; loaded from the bundled dictionary if omitted
        """
        self.options = options if options is not None else TokenizerOptions.from_dictionary()
        self.validator = TokenValidator()

    def split(self, filename: str) -> List[Token]:
        """Split a filename into tokens without validating them."""
        tokens: List[Token] = []
        tokenize_by_brackets(filename, self.options.allowed_delimiters, tokens)
        return tokens

    def tokenize(self, filename: str) -> TokenizationResult:
        """
        Tokenize a filename.

        Args:
            filename: Filename without extension

        Returns:
            TokenizationResult with the validated tokens
        """
        tokens = self.split(filename)
        split_count = len(tokens)

        self.validator.validate(tokens)

        logger.debug("Tokenized %r into %s tokens (%s before validation)",
                     filename, len(tokens), split_count)
        return TokenizationResult(original=filename, tokens=tokens)


def tokenize(filename: str, options: Optional[TokenizerOptions] = None) -> List[Token]:
    """Tokenize a filename with the given options (defaults if omitted)."""
    tokenizer = Tokenizer(options if options is not None else TokenizerOptions())
    return tokenizer.tokenize(filename).tokens
