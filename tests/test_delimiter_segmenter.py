#!/usr/bin/env python3
"""
Tests for delimiter segmentation of text runs.
"""

from filename_tokens import TokenType, tokenize_by_delimiters

D = TokenType.DELIMITER
U = TokenType.UNKNOWN


def split(text, delimiters="._ ", enclosed=False):
    tokens = []
    tokenize_by_delimiters(text, delimiters, enclosed, tokens)
    return [(token.type, token.value) for token in tokens]


def test_alternating_text_and_delimiters():
    assert split("a.b_c") == [(U, "a"), (D, "."), (U, "b"), (D, "_"), (U, "c")]


def test_adjacent_delimiters_are_not_coalesced():
    assert split("a..b") == [(U, "a"), (D, "."), (D, "."), (U, "b")]


def test_only_delimiters():
    assert split("._") == [(D, "."), (D, "_")]


def test_leading_and_trailing_delimiters():
    assert split(".a.") == [(D, "."), (U, "a"), (D, ".")]


def test_no_delimiters_gives_single_token():
    assert split("Title") == [(U, "Title")]


def test_empty_delimiter_set():
    assert split("a b.c", delimiters="") == [(U, "a b.c")]


def test_empty_text():
    assert split("") == []


def test_enclosed_flag_is_stamped_on_every_token():
    tokens = []
    tokenize_by_delimiters("a b", " ", True, tokens)
    assert len(tokens) == 3
    assert all(token.enclosed for token in tokens)


def test_delimiters_are_configurable():
    assert split("a-b c", delimiters="-") == [(U, "a"), (D, "-"), (U, "b c")]
