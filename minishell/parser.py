"""Turn a token stream into a list of commands with their redirections."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterable, Optional

from minishell.environment import Environment
from minishell.expander import expand_with_quotes
from minishell.lexer import Token, TokenType

_PIPE_ERROR = "bash: syntax error near unexpected token `|'"
_REDIR_ERROR = "bash: syntax error near unexpected token `<'"


class RedirType(enum.Enum):
    """Kinds of redirection."""

    IN = enum.auto()
    OUT = enum.auto()
    APPEND = enum.auto()
    HEREDOC = enum.auto()


@dataclass
class Redirection:
    """A redirection target; for a heredoc, ``filename`` is the delimiter."""

    filename: str
    type: RedirType
    no_expand: bool = False


@dataclass
class Command:
    """One simple command of a pipeline."""

    argv: list[str] = field(default_factory=list)
    redirs: list[Redirection] = field(default_factory=list)
    parse_error: bool = False
    heredoc: Optional[str] = None


_FILE_REDIRS = {
    TokenType.REDIR_IN: RedirType.IN,
    TokenType.REDIR_OUT: RedirType.OUT,
    TokenType.REDIR_APPEND: RedirType.APPEND,
}


def _heredoc_redirection(delimiter: str) -> Redirection:
    if (delimiter[0] == '"' and delimiter[-1] == '"') or (
        delimiter[0] == "'" and delimiter[-1] == "'"
    ):
        return Redirection(delimiter[1:-1], RedirType.HEREDOC, no_expand=True)
    return Redirection(delimiter, RedirType.HEREDOC, no_expand=False)


def _is_unquoted_empty_expansion(original: str, expanded: str) -> bool:
    if expanded or '"' in original or "'" in original:
        return False
    return (
        len(original) > 1
        and original[0] == "$"
        and (original[1].isascii() and (original[1].isalnum() or original[1] == "_"))
    )


def _add_word(
    command: Command, original: str, env: Optional[Environment], exit_status: int
) -> None:
    expanded = expand_with_quotes(original, env, exit_status) or ""
    if not command.argv and _is_unquoted_empty_expansion(original, expanded):
        return
    quoted = '"' in original or "'" in original
    if "$" in original and not quoted and (" " in expanded or "\t" in expanded):
        # Unquoted expansions that contain blanks are discarded.
        return
    command.argv.append(expanded)


def _parse_command(
    tokens: list[Token], pos: int, env: Optional[Environment], exit_status: int
) -> tuple[Command, int]:
    command = Command()
    while pos < len(tokens) and tokens[pos].type not in (TokenType.PIPE, TokenType.EOF):
        if command.parse_error:
            print(_REDIR_ERROR)
        token = tokens[pos]
        following = tokens[pos + 1] if pos + 1 < len(tokens) else None
        has_word = following is not None and following.type is TokenType.WORD
        if token.type in _FILE_REDIRS or token.type is TokenType.HEREDOC:
            if has_word:
                target = following.value or ""
                if token.type is TokenType.HEREDOC:
                    command.redirs.append(_heredoc_redirection(target))
                else:
                    filename = expand_with_quotes(target, env, exit_status)
                    command.redirs.append(
                        Redirection(filename or "", _FILE_REDIRS[token.type])
                    )
                pos += 1
            else:
                command.parse_error = True
        elif token.type is TokenType.WORD:
            _add_word(command, token.value or "", env, exit_status)
        pos += 1
    if pos < len(tokens) and tokens[pos].type is TokenType.PIPE:
        pos += 1
    return command, pos


def parse(
    tokens: Iterable[Token], env: Optional[Environment], exit_status: int
) -> list[Command]:
    """Build the pipeline's commands, expanding words and redirection targets."""
    items = list(tokens)
    commands: list[Command] = []
    pos = 0
    while pos < len(items) and items[pos].type is not TokenType.EOF:
        while pos < len(items) and items[pos].type is TokenType.PIPE:
            print(_PIPE_ERROR)
            pos += 1
        if pos >= len(items) or items[pos].type is TokenType.EOF:
            break
        command, pos = _parse_command(items, pos, env, exit_status)
        commands.append(command)
    return commands