"""Storage layer for the URL shortener."""

from .base import URLStoreBase
from .sqlite import SQLiteURLStore
from .exceptions import StoreError, InitError, AliasExistsError, AliasNotFoundError

__all__ = [
    "URLStoreBase",
    "SQLiteURLStore",
    "StoreError",
    "InitError",
    "AliasExistsError",
    "AliasNotFoundError",
]
