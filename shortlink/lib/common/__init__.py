"""Common utilities for URL shortener."""

from .validators import is_valid_url
from .logging_config import setup_logging, get_logger

__all__ = [
    "is_valid_url",
    "setup_logging",
    "get_logger",
]
