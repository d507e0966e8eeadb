from __future__ import annotations

from typing import Dict, Optional


class MemoryStore:
    """Process-local store, mostly useful for tests and one-off scripts."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError("value must be a string")
        self._data[key] = value

    def snapshot(self) -> Dict[str, str]:
        """Return a copy of the stored values keyed by name."""
        return dict(self._data)


__all__ = ["MemoryStore"]
