#!/usr/bin/env python3
"""
Bracket segmenter.

Walks a filename looking for bracket pairs. Text between brackets is handed
to the delimiter segmenter tagged with whether it is enclosed.

Only one level of nesting is tracked: once an opening bracket is seen the
scan looks exclusively for its matching closer, so an inner opener such as
the "(" in "[Group (A)]" is ordinary text. An opener that is never closed
leaves the rest of the filename enclosed.
"""

from typing import Dict, List

from .delimiter_segmenter import tokenize_by_delimiters
from .token import Token, TokenType


BRACKET_PAIRS: Dict[str, str] = {
    '(': ')',            # Parenthesis
    '[': ']',            # Square bracket
    '{': '}',            # Curly bracket
    '\u300c': '\u300d',  # Corner bracket
    '\u300e': '\u300f',  # White corner bracket
    '\u3010': '\u3011',  # Black lenticular bracket
    '\uff08': '\uff09',  # Fullwidth parenthesis
}


def _find_opening_bracket(text: str, start: int) -> int:
    for pos in range(start, len(text)):
        if text[pos] in BRACKET_PAIRS:
            return pos
    return -1


def tokenize_by_brackets(filename: str, delimiters: str, tokens: List[Token]) -> None:
    """
    Split a filename into bracket tokens and delimited text runs.

    Args:
        filename: Filename to tokenize
        delimiters: Characters passed on to the delimiter segmenter
        tokens: Token list to append to
    """
    is_bracket_open = False
    matching_bracket = ''
    last_idx = 0

    while last_idx < len(filename):
        if is_bracket_open:
            pos = filename.find(matching_bracket, last_idx)
        else:
            pos = _find_opening_bracket(filename, last_idx)

        # Text up to the bracket, or the remainder when there is none
        end = pos if pos != -1 else len(filename)
        if end > last_idx:
            tokenize_by_delimiters(filename[last_idx:end], delimiters, is_bracket_open, tokens)
        if pos == -1:
            return

        if not is_bracket_open:
            matching_bracket = BRACKET_PAIRS[filename[pos]]
        is_bracket_open = not is_bracket_open

        tokens.append(Token(TokenType.BRACKET, filename[pos], True))
        last_idx = pos + 1
