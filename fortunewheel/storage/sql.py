"""Key-value store persisted in the ``cache_entries`` table."""

from __future__ import annotations

from typing import Optional

from sqlalchemy.orm import Session

from ..models import CacheEntry


class SqlKeyValueStore:
    """Key-value store bound to a SQLAlchemy session.

    Writes are flushed but not committed; transaction boundaries belong to
    the caller that owns the session.
    """

    def __init__(self, session: Session) -> None:
        """Create a store bound to ``session``.

        Parameters
        ----------
        session : Session
            Active SQLAlchemy session used for lookups and persistence.
        """

        self._session = session

    def get(self, key: str) -> Optional[str]:
        entry = self._session.get(CacheEntry, key)
        return entry.value if entry is not None else None

    def set(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError("value must be a string")
        entry = self._session.get(CacheEntry, key)
        if entry is None:
            entry = CacheEntry(key=key, value=value)
            self._session.add(entry)
        else:
            entry.value = value
        self._session.flush()


__all__ = ["SqlKeyValueStore"]
