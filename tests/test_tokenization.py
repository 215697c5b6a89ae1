#!/usr/bin/env python3
"""
Pytest tests for tokenization functionality.
These tests run the whole tokenizer: bracket split, delimiter split, validation.
"""

import json

import pytest
from filename_tokens import Tokenizer, TokenizerOptions, TokenizationResult, TokenType, tokenize


@pytest.fixture
def tokenizer():
    """Fixture providing a Tokenizer with the default delimiter set."""
    return Tokenizer(TokenizerOptions())


def test_tokenize_bracketed_release(tokenizer):
    """Bracket contents are enclosed, free text is not."""
    result = tokenizer.tokenize("[Group] Show - 01 (1080p)")

    assert result.original == "[Group] Show - 01 (1080p)"
    assert result.values == ["[", "Group", "]", " ", "Show", " ", "-", " ", "01", " ", "(", "1080p", ")"]

    by_value = {token.value: token for token in result.tokens}
    for bracket in "[]()":
        assert by_value[bracket].type is TokenType.BRACKET
        assert by_value[bracket].enclosed is True
    assert by_value["Group"].enclosed is True
    assert by_value["1080p"].enclosed is True
    for value in ("Show", "-", "01"):
        assert by_value[value].enclosed is False


def test_tokenize_empty_string(tokenizer):
    result = tokenizer.tokenize("")
    assert result.tokens == []
    assert json.loads(result.to_json()) == {"original": "", "tokens": []}


def test_tokenize_without_delimiters(tokenizer):
    result = tokenizer.tokenize("ShowTitle")
    assert len(result.tokens) == 1
    assert result.tokens[0].type is TokenType.UNKNOWN
    assert result.tokens[0].value == "ShowTitle"


def test_single_character_absorption():
    tokens = tokenize("A-1", TokenizerOptions(allowed_delimiters=" _-"))
    assert [(token.type, token.value) for token in tokens] == [(TokenType.UNKNOWN, "A-1")]


def test_numeric_merge(tokenizer):
    result = tokenizer.tokenize("01+02")
    assert [(token.type, token.value) for token in result.tokens] == [(TokenType.UNKNOWN, "01+02")]


def test_stray_symmetric_delimiter(tokenizer):
    result = tokenizer.tokenize("_&_")
    assert [token.type for token in result.tokens] == [
        TokenType.DELIMITER, TokenType.UNKNOWN, TokenType.DELIMITER,
    ]


def test_split_keeps_naive_tokens(tokenizer):
    """split() returns the segmenter output before validation."""
    assert [token.value for token in tokenizer.split("01+02")] == ["01", "+", "02"]


def test_default_options_come_from_dictionary():
    assert Tokenizer().options.allowed_delimiters == " _.&+,|"


def test_tokenize_helper_uses_defaults():
    assert [token.value for token in tokenize("A.B")] == ["A.B"]


def test_tokenizer_json_output(tokenizer):
    """Results serialize every token with type, value and enclosed flag."""
    result = tokenizer.tokenize("[Sub] Title")
    parsed = json.loads(result.to_json())

    assert parsed["original"] == "[Sub] Title"
    assert parsed["tokens"][0] == {"type": "bracket", "value": "[", "enclosed": True}
    assert parsed["tokens"][-1] == {"type": "unknown", "value": "Title", "enclosed": False}
    for token in parsed["tokens"]:
        assert set(token) == {"type", "value", "enclosed"}


def test_json_keeps_non_ascii(tokenizer):
    result = tokenizer.tokenize("【字幕组】标题")
    assert "字幕组" in result.to_json()


def test_result_defaults():
    result = TokenizationResult(original="x")
    assert result.tokens == []
    assert result.values == []


def test_tokenizer_is_reusable(tokenizer):
    """One tokenizer instance can process many filenames independently."""
    first = tokenizer.tokenize("A.B.C")
    tokenizer.tokenize("[Other] Name")
    again = tokenizer.tokenize("A.B.C")
    assert first.tokens == again.tokens
