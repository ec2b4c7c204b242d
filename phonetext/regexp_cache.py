"""A thread-safe cache of compiled regular expressions keyed by pattern."""

from __future__ import annotations

import threading
from typing import Protocol

from phonetext.regexp import RegExp


class _RegExpMaker(Protocol):
    def create_regexp(self, pattern: str) -> RegExp: ...


class RegExpCache:
    """Compiles each pattern once through a factory and hands out the result.

    ``min_items`` is a sizing hint for the expected number of patterns.
    """

    def __init__(self, factory: _RegExpMaker, min_items: int = 64) -> None:
        if min_items < 0:
            raise ValueError(f"min_items must not be negative: {min_items}")
        self._factory = factory
        self.min_items = min_items
        self._lock = threading.Lock()
        self._cache: dict[str, RegExp] = {}

    def get_regexp(self, pattern: str) -> RegExp:
        """Return the compiled ``pattern``, compiling it on first use."""
        with self._lock:
            cached = self._cache.get(pattern)
            if cached is not None:
                return cached
            regexp = self._factory.create_regexp(pattern)
            self._cache[pattern] = regexp
            return regexp

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)

    def __contains__(self, pattern: object) -> bool:
        with self._lock:
            return pattern in self._cache