"""The ``export`` and ``unset`` builtins."""

from __future__ import annotations

from itertools import takewhile
from typing import Sequence

from minishell.environment import Environment


def _is_valid_identifier(name: str) -> bool:
    if not name:
        return False
    first = name[0]
    return first == "_" or ("a" <= first <= "z") or ("A" <= first <= "Z")


def format_exports(env: Environment) -> list[str]:
    """Return the ``declare -x`` lines that ``export`` prints with no arguments."""
    lines = []
    for key, value in env.exports.items():
        if value is None:
            lines.append(f"declare -x {key}")
        else:
            lines.append(f'declare -x {key}="{value}"')
    return lines


def _assign(env: Environment, name: str, value: str) -> None:
    env.exports.set(name, value)
    env.variables.set(name, value)


def builtin_export(argv: Sequence[str], env: Environment) -> int:
    """Run ``export``; print the export table when no names are given.

    A non-empty ``NAME=value`` swallows the following arguments that hold no
    ``=``, joining them to the value with single spaces.
    """
    args = list(argv[1:])
    if not args:
        for line in format_exports(env):
            print(line)
        return 0
    index = 0
    while index < len(args):
        arg = args[index]
        name, sep, value = arg.partition("=")
        if not _is_valid_identifier(name):
            print(f"bash: export: `{name}': not a valid identifier")
        elif not sep:
            env.exports.set(arg, None)
        else:
            if value and index + 1 < len(args):
                extra = list(takewhile(lambda a: "=" not in a, args[index + 1:]))
                value = " ".join([value, *extra])
                index += len(extra)
            _assign(env, name, value)
        index += 1
    return 0


def builtin_unset(argv: Sequence[str], env: Environment) -> int:
    """Run ``unset``: remove each name from the variables and the exports."""
    names = list(argv[1:])
    if not names:
        print("unset: not enough arguments")
        return 0
    for name in names:
        env.variables.unset(name)
        env.exports.unset(name)
    return 0