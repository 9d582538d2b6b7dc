"""Expansion of ``$`` variables and removal of quotes in words."""

from __future__ import annotations

import os
from typing import Optional

from minishell.environment import Environment

_BLANKS = frozenset(" \t")


def is_name_char(char: str) -> bool:
    """Return True for characters allowed in a variable name."""
    return char != "" and (
        ("A" <= char <= "Z") or ("a" <= char <= "z") or ("0" <= char <= "9") or char == "_"
    )


def _is_name_start(char: str) -> bool:
    return char != "" and (("A" <= char <= "Z") or ("a" <= char <= "z") or char == "_")


def split_words(text: Optional[str]) -> Optional[list[str]]:
    """Split ``text`` into words separated by spaces and tabs."""
    if text is None:
        return None
    words: list[str] = []
    current: list[str] = []
    for char in text:
        if char in _BLANKS:
            if current:
                words.append("".join(current))
                current = []
        else:
            current.append(char)
    if current:
        words.append("".join(current))
    return words


def _expand_dollar(
    text: str, pos: int, env: Optional[Environment], exit_status: int
) -> tuple[str, int]:
    """Expand the ``$`` at ``pos``; return the replacement and the next position."""
    pos += 1
    if pos >= len(text):
        return "$", pos
    char = text[pos]
    if char == "?":
        return str(exit_status), pos + 1
    if char == "$":
        return str(os.getpid()), pos + 1
    if _is_name_start(char):
        end = pos
        while end < len(text) and is_name_char(text[end]):
            end += 1
        name = text[pos:end]
        value = env.lookup(name) if env is not None else None
        return (value if value is not None else ""), end
    return "$", pos


def expand_variables(
    text: Optional[str], env: Optional[Environment], exit_status: int
) -> Optional[str]:
    """Replace every ``$`` reference in ``text``; quotes are left as they are."""
    if text is None:
        return None
    parts: list[str] = []
    pos = 0
    while pos < len(text):
        if text[pos] == "$":
            value, pos = _expand_dollar(text, pos, env, exit_status)
            parts.append(value)
        else:
            parts.append(text[pos])
            pos += 1
    return "".join(parts)


def expand_with_quotes(
    text: Optional[str], env: Optional[Environment], exit_status: int
) -> Optional[str]:
    """Remove quotes from ``text`` and expand ``$`` outside single quotes."""
    if text is None:
        return None
    parts: list[str] = []
    quote = ""
    pos = 0
    while pos < len(text):
        char = text[pos]
        if char in ("'", '"'):
            if not quote:
                quote = char
            elif quote == char:
                quote = ""
            else:
                parts.append(char)
            pos += 1
        elif char == "$" and quote != "'":
            value, pos = _expand_dollar(text, pos, env, exit_status)
            parts.append(value)
        else:
            parts.append(char)
            pos += 1
    return "".join(parts)