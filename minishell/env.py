"""Environment variables kept by the shell, in insertion order."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


def parse_entry(text: str | None) -> tuple[str, str] | None:
    """Split ``KEY=VALUE`` at the first ``=``.

    Returns ``None`` when there is no ``=`` or the key is empty.
    """
    if text is None:
        return None
    key, sep, value = text.partition("=")
    if not sep or not key:
        return None
    return key, value


class Environment:
    """An ordered set of variables plus the last exit status."""

    def __init__(self, entries: Iterable[str] = ()) -> None:
        self._vars: dict[str, str] = {}
        self.exit_status = 0
        for entry in entries:
            self.add(entry)

    def find(self, key: str) -> str | None:
        """Return the value of ``key``, or ``None`` if it is not set."""
        return self._vars.get(key)

    def add(self, token: str) -> tuple[str, str] | None:
        """Set a variable from ``KEY=VALUE``.

        An existing variable keeps its position and takes the new value.
        Returns the stored pair, or ``None`` if the token is not an assignment.
        """
        parsed = parse_entry(token)
        if parsed is None:
            return None
        key, value = parsed
        self._vars[key] = value
        return key, value

    def delete(self, key: str) -> None:
        """Remove ``key`` if it is set."""
        self._vars.pop(key, None)

    def to_list(self) -> list[str]:
        """Return the variables as ``KEY=VALUE`` strings, in order."""
        return [f"{key}={value}" for key, value in self._vars.items()]

    def __len__(self) -> int:
        return len(self._vars)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        """Yield ``(key, value)`` pairs in order."""
        return iter(list(self._vars.items()))