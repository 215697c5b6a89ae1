#!/usr/bin/env python3
"""
Tokenizer options.
The delimiter set varies between release-naming conventions, so it is
supplied by the caller or read from the bundled tokenizer dictionary.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .bracket_segmenter import BRACKET_PAIRS
from .dictionary_loader import DEFAULT_DICTIONARY, DictionaryLoader


logger = logging.getLogger(__name__)

DEFAULT_DELIMITERS = " _.&+,|"


@dataclass(frozen=True)
class TokenizerOptions:
    """Settings that control how filenames are split."""
    allowed_delimiters: str = DEFAULT_DELIMITERS

    def __post_init__(self):
        if not isinstance(self.allowed_delimiters, str):
            raise TypeError(
                f"allowed_delimiters must be a string, got {type(self.allowed_delimiters).__name__}"
            )
        brackets = set(BRACKET_PAIRS) | set(BRACKET_PAIRS.values())
        overlap = sorted(brackets.intersection(self.allowed_delimiters))
        if overlap:
            raise ValueError(f"Bracket characters cannot be delimiters: {''.join(overlap)}")

    @classmethod
    def from_dictionary(cls, dictionary: Union[str, Path] = DEFAULT_DICTIONARY) -> "TokenizerOptions":
        """
        Build options from a JSON dictionary.

        Missing files or sections fall back to the built-in defaults.

        Args:
            dictionary: Bundled dictionary name or path to a JSON file

        Returns:
            TokenizerOptions instance
        """
        delimiters: Optional[str] = DictionaryLoader.get_section('allowed_delimiters', dictionary)
        if delimiters is None:
            logger.warning("No allowed_delimiters in %s, using defaults", dictionary)
            return cls()
        return cls(allowed_delimiters=delimiters)
