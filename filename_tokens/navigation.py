#!/usr/bin/env python3
"""
Navigation helpers for scanning a token list.

The validator and downstream classifiers look for "the nearest token
matching some requirements" constantly. Requirements are expressed as a
``TokenFlag`` set, e.g. ``TokenFlag.DELIMITER | TokenFlag.VALID`` or
``TokenFlag.UNKNOWN | TokenFlag.ENCLOSED``, and evaluated by ``TokenMatcher``.

Every function here is read-only and returns an index into the list, or
``None`` when no token matches.
"""

from dataclasses import dataclass
from enum import Flag, auto
from typing import List, Optional, Sequence, Union

from .token import Token, TokenType


class TokenFlag(Flag):
    """Requirements a token must satisfy to be returned by a search."""
    NONE = 0
    # Categories
    BRACKET = auto()
    NOT_BRACKET = auto()
    DELIMITER = auto()
    NOT_DELIMITER = auto()
    IDENTIFIER = auto()
    NOT_IDENTIFIER = auto()
    UNKNOWN = auto()
    NOT_UNKNOWN = auto()
    VALID = auto()
    NOT_VALID = auto()
    # Enclosure
    ENCLOSED = auto()
    NOT_ENCLOSED = auto()


# (required flag, excluding flag, token type)
_CATEGORY_FLAGS = (
    (TokenFlag.BRACKET, TokenFlag.NOT_BRACKET, TokenType.BRACKET),
    (TokenFlag.DELIMITER, TokenFlag.NOT_DELIMITER, TokenType.DELIMITER),
    (TokenFlag.IDENTIFIER, TokenFlag.NOT_IDENTIFIER, TokenType.IDENTIFIER),
    (TokenFlag.UNKNOWN, TokenFlag.NOT_UNKNOWN, TokenType.UNKNOWN),
    (TokenFlag.NOT_VALID, TokenFlag.VALID, TokenType.INVALID),
)


@dataclass(frozen=True)
class TokenMatcher:
    """
    Predicate built from a set of token flags.

    A token matches when it satisfies every requirement in the set. An empty
    set matches any token; contradictory flags (e.g. BRACKET | DELIMITER)
    match nothing.
    """
    flags: TokenFlag = TokenFlag.NONE

    def matches(self, token: Token) -> bool:
        flags = self.flags

        if TokenFlag.ENCLOSED in flags and not token.enclosed:
            return False
        if TokenFlag.NOT_ENCLOSED in flags and token.enclosed:
            return False

        for required, excluded, token_type in _CATEGORY_FLAGS:
            if required in flags and token.type is not token_type:
                return False
            if excluded in flags and token.type is token_type:
                return False

        return True


TokenQuery = Union[TokenFlag, TokenMatcher]


def _as_matcher(query: TokenQuery) -> TokenMatcher:
    if isinstance(query, TokenMatcher):
        return query
    return TokenMatcher(query)


def find_token(tokens: Sequence[Token], flags: TokenQuery,
               start: int = 0, end: Optional[int] = None) -> Optional[int]:
    """
    Find the first matching token in ``tokens[start:end]``.

    Args:
        tokens: Token list to scan
        flags: Requirements the token must satisfy
        start: First index to inspect
        end: Index to stop before (defaults to the end of the list)

    Returns:
        Index of the matching token, or None
    """
    matcher = _as_matcher(flags)
    if end is None:
        end = len(tokens)
    for index in range(max(start, 0), min(end, len(tokens))):
        if matcher.matches(tokens[index]):
            return index
    return None


def find_token_reversed(tokens: Sequence[Token], flags: TokenQuery,
                        start: Optional[int] = None, end: int = -1) -> Optional[int]:
    """
    Find the last matching token scanning backwards.

    Args:
        tokens: Token list to scan
        flags: Requirements the token must satisfy
        start: First index to inspect (defaults to the last token)
        end: Index to stop at, exclusive (defaults to before the first token)

    Returns:
        Index of the matching token, or None
    """
    matcher = _as_matcher(flags)
    if start is None or start >= len(tokens):
        start = len(tokens) - 1
    for index in range(start, max(end, -1), -1):
        if matcher.matches(tokens[index]):
            return index
    return None


def find_previous_token(tokens: Sequence[Token], index: int,
                        flags: TokenQuery = TokenFlag.VALID) -> Optional[int]:
    """Nearest matching token strictly before ``index``."""
    if index <= 0:
        return None
    return find_token_reversed(tokens, flags, index - 1)


def find_next_token(tokens: Sequence[Token], index: int,
                    flags: TokenQuery = TokenFlag.VALID) -> Optional[int]:
    """Nearest matching token strictly after ``index``."""
    return find_token(tokens, flags, index + 1)


def find_first_token(tokens: Sequence[Token], flags: TokenQuery) -> Optional[Token]:
    index = find_token(tokens, flags)
    return tokens[index] if index is not None else None


def find_last_token(tokens: Sequence[Token], flags: TokenQuery) -> Optional[Token]:
    index = find_token_reversed(tokens, flags)
    return tokens[index] if index is not None else None


def is_token_isolated(tokens: List[Token], index: int) -> bool:
    """
    Check whether a token sits alone inside a bracket pair.

    Delimiters between the token and the brackets are ignored, so both
    "[720p]" and "[ 720p ]" count as isolated.
    """
    previous = find_previous_token(tokens, index, TokenFlag.NOT_DELIMITER)
    if previous is None or tokens[previous].type is not TokenType.BRACKET:
        return False

    following = find_next_token(tokens, index, TokenFlag.NOT_DELIMITER)
    if following is None or tokens[following].type is not TokenType.BRACKET:
        return False

    return True
