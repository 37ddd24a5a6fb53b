# Copyright 2026 EER Studio Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tokenizer for single EER statements.

Works on one line at a time, after comments and coordinates have been
removed. Tokens are separated by any Unicode whitespace, except that a quoted string
and a bracketed marker are always read as one token even when they contain
spaces or touch the previous token. The tokenizer never fails: unterminated
strings and markers fall back to plain words.
"""

import enum
from dataclasses import dataclass

# ###############
# Public Interface
# ###############


class TokenType(enum.Enum):
    """All token types produced by the statement tokenizer."""

    WORD = "WORD"
    ARROW = "->"
    STRING = "STRING"
    MARKER = "MARKER"


@dataclass(frozen=True)
class Token:
    """A token of a statement line.

    Attributes:
        type: The kind of token.
        value: The raw text of the token, or the content between the quotes
            for STRING tokens.
    """

    type: TokenType
    value: str


def tokenize_statement(text: str) -> list[Token]:
    """Split statement text into tokens.

    Args:
        text: One statement line with its coordinate suffix already removed.

    Returns:
        The list of tokens in source order. Empty for blank input.
    """
    return _Tokenizer(text).tokenize()


# ################
# Implementation
# ################


class _Tokenizer:
    """Internal scanner over one statement line."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0
        self._tokens: list[Token] = []

    def tokenize(self) -> list[Token]:
        """Run the scanner and return all tokens."""
        while True:
            self._skip_whitespace()
            if self._pos >= len(self._text):
                break
            self._scan_token()
        return self._tokens

    def _current(self) -> str:
        """Return the character at the current position, or '' at end of input."""
        if self._pos < len(self._text):
            return self._text[self._pos]
        return ""

    def _skip_whitespace(self) -> None:
        while self._pos < len(self._text) and self._text[self._pos].isspace():
            self._pos += 1

    def _scan_token(self) -> None:
        """Dispatch on the first character of the next token."""
        ch = self._current()
        if ch == '"':
            self._scan_delimited('"', TokenType.STRING, keep_delimiters=False)
        elif ch == "[":
            self._scan_delimited("]", TokenType.MARKER, keep_delimiters=True)
        else:
            self._scan_word()

    def _scan_delimited(self, closing: str, token_type: TokenType, keep_delimiters: bool) -> None:
        """Scan a quoted string or bracketed marker.

        Without a closing delimiter on the line the token is read as a word.
        """
        start = self._pos
        end = self._text.find(closing, start + 1)
        if end == -1:
            self._scan_word()
            return
        if keep_delimiters:
            value = self._text[start : end + 1]
        else:
            value = self._text[start + 1 : end]
        self._tokens.append(Token(token_type, value))
        self._pos = end + 1

    def _scan_word(self) -> None:
        """Scan a run of non-whitespace characters."""
        start = self._pos
        while self._pos < len(self._text) and not self._text[self._pos].isspace():
            self._pos += 1
        value = self._text[start : self._pos]
        token_type = TokenType.ARROW if value == "->" else TokenType.WORD
        self._tokens.append(Token(token_type, value))
