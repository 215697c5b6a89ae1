"""
Filename tokenizer package.

This package contains the tokenization stages:
- token: Token model and tokenization result
- bracket_segmenter: Bracket pair detection
- delimiter_segmenter: Splitting text runs on delimiter characters
- validator: Repair pass that merges erroneously split tokens
- navigation: Token search helpers shared with downstream classifiers
- options: Tokenizer options and their dictionary-backed defaults
- dictionary_loader: JSON dictionary loading and caching
- tokenizer: Tokenizer running all stages
- excel_writer: Excel report helpers
"""

# Explicit imports make the public API clear and prevent namespace pollution
from .token import Token, TokenType, TokenizationResult
from .bracket_segmenter import BRACKET_PAIRS, tokenize_by_brackets
from .delimiter_segmenter import tokenize_by_delimiters
from .validator import TokenValidator, is_numeric_string
from .navigation import (
    TokenFlag,
    TokenMatcher,
    find_token,
    find_token_reversed,
    find_previous_token,
    find_next_token,
    find_first_token,
    find_last_token,
    is_token_isolated,
)
from .options import TokenizerOptions, DEFAULT_DELIMITERS
from .dictionary_loader import DictionaryLoader
from .tokenizer import Tokenizer, tokenize

__all__ = [
    'Token',
    'TokenType',
    'TokenizationResult',
    'BRACKET_PAIRS',
    'tokenize_by_brackets',
    'tokenize_by_delimiters',
    'TokenValidator',
    'is_numeric_string',
    'TokenFlag',
    'TokenMatcher',
    'find_token',
    'find_token_reversed',
    'find_previous_token',
    'find_next_token',
    'find_first_token',
    'find_last_token',
    'is_token_isolated',
    'TokenizerOptions',
    'DEFAULT_DELIMITERS',
    'DictionaryLoader',
    'Tokenizer',
    'tokenize',
]
