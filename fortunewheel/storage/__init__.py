"""Key-value stores usable as the prize catalog cache."""

from .base import KeyValueStore
from .memory import MemoryStore
from .sql import SqlKeyValueStore

__all__ = [
    "KeyValueStore",
    "MemoryStore",
    "SqlKeyValueStore",
]
