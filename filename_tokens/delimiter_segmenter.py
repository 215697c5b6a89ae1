#!/usr/bin/env python3
"""
Delimiter segmenter.
Splits a run of text into alternating text and delimiter tokens.
"""

from typing import List

from .token import Token, TokenType


def tokenize_by_delimiters(text: str, delimiters: str, enclosed: bool,
                           tokens: List[Token]) -> None:
    """
    Split a text run on any of the given delimiter characters.

    Every delimiter becomes its own single-character token, even when two
    delimiters are adjacent; coalescing them is left to the validator.

    Args:
        text: Text run to split
        delimiters: Characters treated as separators
        enclosed: Whether the run lies inside a bracket pair
        tokens: Token list to append to
    """
    last_idx = 0

    for pos, char in enumerate(text):
        if char not in delimiters:
            continue
        if pos > last_idx:
            tokens.append(Token(TokenType.UNKNOWN, text[last_idx:pos], enclosed))
        tokens.append(Token(TokenType.DELIMITER, char, enclosed))
        last_idx = pos + 1

    # Trailing text after the last delimiter (or the whole run)
    if last_idx < len(text):
        tokens.append(Token(TokenType.UNKNOWN, text[last_idx:], enclosed))
