#!/usr/bin/env python3
"""
Token model shared by every tokenization stage.

Tokens are created by the segmenters, mutated only by the validator and
handed to downstream classifiers as a plain list.
"""

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import List


class TokenType(Enum):
    """Kind of fragment a token represents."""
    UNKNOWN = "unknown"
    BRACKET = "bracket"
    DELIMITER = "delimiter"
    IDENTIFIER = "identifier"  # Assigned by classifiers, never by the tokenizer
    INVALID = "invalid"  # Absorbed into a neighbour, pruned after validation


@dataclass
class Token:
    """Represents a single fragment of a filename."""
    type: TokenType
    value: str
    enclosed: bool = False

    @property
    def is_valid(self) -> bool:
        return self.type is not TokenType.INVALID

    def absorb(self, other: "Token") -> None:
        """
        Append another token's value to this one and invalidate it.

        Args:
            other: Token to merge into this token
        """
        self.value += other.value
        other.type = TokenType.INVALID

    def to_dict(self) -> dict:
        return {
            "type": self.type.value,
            "value": self.value,
            "enclosed": self.enclosed,
        }


@dataclass
class TokenizationResult:
    """Result of tokenizing a filename."""
    original: str
    tokens: List[Token] = field(default_factory=list)

    @property
    def values(self) -> List[str]:
        return [token.value for token in self.tokens]

    def to_json(self) -> str:
        """Convert result to JSON format."""
        json_data = {
            "original": self.original,
            "tokens": [token.to_dict() for token in self.tokens],
        }
        return json.dumps(json_data, ensure_ascii=False)
