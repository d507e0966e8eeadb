"""Interface shared by the key-value stores backing the catalog cache."""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class KeyValueStore(Protocol):
    """Minimal string key-value store.

    Implementations only need to round-trip strings; they are free to raise
    on write, callers that treat the store as a cache are expected to cope.
    """

    def get(self, key: str) -> Optional[str]:
        """Return the value stored under ``key`` or ``None``."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        ...


__all__ = ["KeyValueStore"]
