"""Shell variables: the environment passed to programs and the export table."""

from __future__ import annotations

from typing import Iterable, Iterator, Mapping, Optional, Tuple, Union

EnvironSource = Union[Mapping[str, str], Iterable[str]]


class VariableList:
    """An ordered table of ``key -> value`` pairs.

    Newly added keys come first, as in a list that grows at its head.
    Updating an existing key keeps its position. A value may be ``None``,
    which marks a name that is known but has no value.
    """

    def __init__(self) -> None:
        # Kept in insertion order; iteration walks it backwards so the
        # newest key comes first.
        self._data: dict[str, Optional[str]] = {}

    def get(self, key: str) -> Optional[str]:
        """Return the value of ``key``, or None if it is absent or has no value."""
        return self._data.get(key)

    def set(self, key: str, value: Optional[str]) -> None:
        """Set ``key`` to ``value``, adding it at the front if it is new."""
        self._data[key] = value

    def unset(self, key: str) -> None:
        """Remove ``key``; a missing key is ignored."""
        self._data.pop(key, None)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return reversed(list(self._data))

    def __len__(self) -> int:
        return len(self._data)

    def items(self) -> Iterator[Tuple[str, Optional[str]]]:
        """Yield ``(key, value)`` pairs, newest first."""
        for key in self:
            yield key, self._data[key]

    def __repr__(self) -> str:
        return f"VariableList({list(self.items())!r})"


def _split_entry(entry: str) -> Optional[Tuple[str, str]]:
    key, sep, value = entry.partition("=")
    if not sep:
        return None
    return key, value


class Environment:
    """The shell's variables and the separate table of exported names."""

    def __init__(self) -> None:
        self.variables = VariableList()
        self.exports = VariableList()

    @classmethod
    def from_environ(cls, environ: EnvironSource) -> "Environment":
        """Build an environment from a mapping or from ``KEY=VALUE`` strings.

        Strings without ``=`` are skipped. Every variable is also exported.
        """
        env = cls()
        if isinstance(environ, Mapping):
            pairs: Iterable[Tuple[str, str]] = environ.items()
        else:
            pairs = (p for p in map(_split_entry, environ) if p is not None)
        for key, value in pairs:
            env.variables.set(key, value)
        for key, value in env.variables.items():
            env.exports.set(key, value)
        return env

    def lookup(self, name: str) -> Optional[str]:
        """Return the value used when ``$name`` is expanded, or None."""
        value = self.variables.get(name)
        if value is not None:
            return value
        return self.export_value(name)

    def export_value(self, name: str) -> Optional[str]:
        """Return the exported value of ``name``, or None if it has none."""
        return self.exports.get(name)

    def to_envp(self) -> list[str]:
        """Return ``KEY=VALUE`` strings for every variable that has a value."""
        return [
            f"{key}={value}"
            for key, value in self.variables.items()
            if value is not None
        ]