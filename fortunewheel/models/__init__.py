from .base import Base

# import models so Alembic/autoloaders can discover mappers
from .cache import CacheEntry  # noqa: F401
from .spin_result import SpinResult  # noqa: F401

__all__ = [
    "Base",
    "CacheEntry",
    "SpinResult",
]
