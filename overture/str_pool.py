"""String pool: equal strings inserted into it come back as the very same object."""

from __future__ import annotations

from .hash import hash_string
from .hash_table import HashSet


class StrPool:
    """Interns strings so that they can be compared by identity."""

    def __init__(self) -> None:
        self._strings = HashSet(hash_string)

    def insert(self, s: str) -> str:
        """Return the pooled string equal to `s`, adding `s` if it is new."""
        found = self._strings.find(s)
        if found is not None:
            return found
        self._strings.insert(s)
        return s

    def find(self, s: str) -> str | None:
        """Return the pooled string equal to `s`, or None."""
        return self._strings.find(s)

    def __len__(self) -> int:
        return len(self._strings)

    def __contains__(self, s: object) -> bool:
        return s in self._strings