#!/usr/bin/env python3
"""
Token validator module for repairing over-eager delimiter splits.

Naive delimiter splitting breaks apart things that belong together:
single letters in group names ("A.B.C"), episode ranges ("01+02"), stray
punctuation glued to a word ("Show, Title"). The validator walks every
delimiter token once, merges such fragments back into the preceding token
and marks the absorbed tokens invalid. Invalid tokens are pruned at the end
of the pass, so the surviving values still concatenate to the original
filename.
"""

from typing import List, Optional

from .navigation import find_next_token, find_previous_token
from .token import Token, TokenType


# Delimiters that always separate words; the single-character guard never
# merges across them.
STRONG_DELIMITERS = ' _'

# Delimiters that join two numbers into a range ("01+02", "01&02")
RANGE_DELIMITERS = '&+'


def is_numeric_string(value: str) -> bool:
    """Check whether a string consists only of ASCII digits."""
    return bool(value) and all('0' <= char <= '9' for char in value)


class TokenValidator:
    """Merges erroneously split tokens back together."""

    def validate(self, tokens: List[Token]) -> List[Token]:
        """
        Repair the token list in place and prune invalidated tokens.

        Args:
            tokens: Tokens produced by the bracket and delimiter segmenters

        Returns:
            The same list, with absorbed tokens removed
        """
        for index, token in enumerate(tokens):
            if token.type is TokenType.DELIMITER:
                self._validate_delimiter(tokens, index)

        tokens[:] = [token for token in tokens if token.is_valid]
        return tokens

    def _validate_delimiter(self, tokens: List[Token], index: int) -> None:
        token = tokens[index]
        delimiter = token.value[0]
        prev_idx = find_previous_token(tokens, index)
        next_idx = find_next_token(tokens, index)

        # Single-character tokens are usually parts of group names, keywords
        # or episode numbers that should not be split
        if delimiter not in STRONG_DELIMITERS:
            if self._is_single_character(tokens, prev_idx):
                self._absorb_run(tokens, prev_idx, index, next_idx)
                return
            if prev_idx is not None and self._is_single_character(tokens, next_idx):
                tokens[prev_idx].absorb(token)
                tokens[prev_idx].absorb(tokens[next_idx])
                return

        # Adjacent delimiters
        if self._is_unknown(tokens, prev_idx) and self._is_delimiter(tokens, next_idx):
            next_delimiter = tokens[next_idx].value[0]
            if delimiter != next_delimiter and delimiter != ',':
                if next_delimiter in STRONG_DELIMITERS:
                    tokens[prev_idx].absorb(token)
        elif self._is_delimiter(tokens, prev_idx) and self._is_delimiter(tokens, next_idx):
            prev_delimiter = tokens[prev_idx].value[0]
            next_delimiter = tokens[next_idx].value[0]
            if prev_delimiter == next_delimiter and prev_delimiter != delimiter:
                token.type = TokenType.UNKNOWN  # e.g. "&" in "_&_"

        # Number ranges
        if delimiter in RANGE_DELIMITERS:
            if self._is_unknown(tokens, prev_idx) and self._is_unknown(tokens, next_idx):
                if (is_numeric_string(tokens[prev_idx].value) and
                        is_numeric_string(tokens[next_idx].value)):
                    tokens[prev_idx].absorb(token)
                    tokens[prev_idx].absorb(tokens[next_idx])  # e.g. "01+02"

    def _absorb_run(self, tokens: List[Token], target_idx: int, delimiter_idx: int,
                    next_idx: Optional[int]) -> None:
        """
        Absorb a delimiter and the run that follows it into a target token.

        Following text tokens are absorbed greedily, together with any
        repetition of the same delimiter between them ("A.B.C").
        """
        target = tokens[target_idx]
        delimiter = tokens[delimiter_idx].value[0]
        target.absorb(tokens[delimiter_idx])

        while self._is_unknown(tokens, next_idx):
            target.absorb(tokens[next_idx])
            next_idx = find_next_token(tokens, next_idx)
            if self._is_delimiter(tokens, next_idx) and tokens[next_idx].value[0] == delimiter:
                target.absorb(tokens[next_idx])
                next_idx = find_next_token(tokens, next_idx)

    @staticmethod
    def _is_unknown(tokens: List[Token], index: Optional[int]) -> bool:
        return index is not None and tokens[index].type is TokenType.UNKNOWN

    @staticmethod
    def _is_delimiter(tokens: List[Token], index: Optional[int]) -> bool:
        return index is not None and tokens[index].type is TokenType.DELIMITER

    def _is_single_character(self, tokens: List[Token], index: Optional[int]) -> bool:
        return (self._is_unknown(tokens, index) and
                len(tokens[index].value) == 1 and
                tokens[index].value != '-')
