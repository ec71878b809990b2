"""Core business logic for URL shortener."""

from .aliasgen import AliasGenerator
from .service import URLShortenerService

__all__ = ["AliasGenerator", "URLShortenerService"]
