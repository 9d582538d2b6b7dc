"""Split a command line into shell tokens."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterator, Optional

_SPACES = frozenset(" \t\n\r")
_SPECIALS = frozenset("|<>")
_QUOTES = ("'", '"')


class TokenType(enum.Enum):
    """Kinds of token the tokenizer produces."""

    WORD = enum.auto()
    PIPE = enum.auto()
    REDIR_IN = enum.auto()
    REDIR_OUT = enum.auto()
    REDIR_APPEND = enum.auto()
    HEREDOC = enum.auto()
    EOF = enum.auto()
    ERROR = enum.auto()


@dataclass(frozen=True)
class Token:
    """A single token: its kind and, for words and operators, its text."""

    type: TokenType
    value: Optional[str] = None


def is_space(char: str) -> bool:
    """Return True for the characters that separate tokens."""
    return char in _SPACES and char != ""


def is_special_char(char: str) -> bool:
    """Return True for the operator characters ``|``, ``<`` and ``>``."""
    return char in _SPECIALS and char != ""


class Tokenizer:
    """Produce tokens one at a time from a command line.

    Quote characters are kept in word tokens; they are removed later, during
    expansion. A word with an unclosed quote yields an ERROR token.
    """

    def __init__(self, text: str) -> None:
        nul = text.find("\0")
        self._text = text if nul < 0 else text[:nul]
        self._pos = 0

    @property
    def _current(self) -> str:
        return self._text[self._pos] if self._pos < len(self._text) else ""

    def _peek(self) -> str:
        nxt = self._pos + 1
        return self._text[nxt] if nxt < len(self._text) else ""

    def _advance(self, count: int = 1) -> None:
        self._pos = min(self._pos + count, len(self._text))

    def _skip_spaces(self) -> None:
        while self._current and is_space(self._current):
            self._advance()

    def _read_word(self) -> Optional[str]:
        chars: list[str] = []
        in_quote = ""
        while self._current and (
            in_quote
            or (not is_space(self._current) and not is_special_char(self._current))
        ):
            char = self._current
            if char in _QUOTES:
                if in_quote == char:
                    in_quote = ""
                elif not in_quote:
                    in_quote = char
            chars.append(char)
            self._advance()
        if in_quote:
            print("quote error", end="")
            return None
        return "".join(chars)

    def next_token(self) -> Token:
        """Return the next token; EOF once the input is used up."""
        self._skip_spaces()
        current = self._current
        if current == ">":
            if self._peek() == ">":
                self._advance(2)
                return Token(TokenType.REDIR_APPEND, ">>")
            self._advance()
            return Token(TokenType.REDIR_OUT, ">")
        if current == "":
            return Token(TokenType.EOF)
        if current == "|":
            self._advance()
            return Token(TokenType.PIPE, "|")
        if current == "<":
            if self._peek() == "<":
                self._advance(2)
                return Token(TokenType.HEREDOC, "<<")
            self._advance()
            return Token(TokenType.REDIR_IN, "<")
        word = self._read_word()
        if word:
            return Token(TokenType.WORD, word)
        return Token(TokenType.ERROR)

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            if token.type is TokenType.EOF:
                return
            yield token


def tokenize(text: str) -> list[Token]:
    """Return every token of ``text``, without the final EOF."""
    return list(Tokenizer(text))