"""ObfuscationCache: run-scoped mapping from original values to placeholders.

Design goals:
  - Consistent: the same original always yields the same placeholder
    for as long as the cache lives
  - One-way: nothing maps placeholders back to originals
  - Explicit: callers own the cache and pass it to every obfuscation
    call, so independent runs never share hidden state

Not thread-safe.  Share one instance across a single sequential pass.
"""

from __future__ import annotations
from typing import Callable


class ObfuscationCache:
    """Original → placeholder store, scoped to one obfuscation run."""

    __slots__ = ("_placeholders",)

    def __init__(self) -> None:
        self._placeholders: dict[str, str] = {}   # "10.0.0.1" → "XXX.XXX.XXX.3fa"

    # ------------------------------------------------------------------
    # Core API
    # ------------------------------------------------------------------

    def get_or_create(self, original: str, builder: Callable[[], str]) -> str:
        """Return the cached placeholder, or build, store and return one.

        Keys are exact and case-sensitive.  The builder only runs on a miss.
        """
        cached = self._placeholders.get(original)
        if cached is not None:
            return cached

        placeholder = builder()
        self._placeholders[original] = placeholder
        return placeholder

    def lookup(self, original: str) -> str | None:
        """Look up the placeholder already assigned to *original*."""
        return self._placeholders.get(original)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def __contains__(self, original: object) -> bool:
        return original in self._placeholders

    def __len__(self) -> int:
        return len(self._placeholders)

    @property
    def size(self) -> int:
        return len(self._placeholders)
