"""Validation utilities for URL shortener."""

from urllib.parse import urlparse
from typing import Tuple


def is_valid_url(url: str) -> Tuple[bool, str]:
    """Validate that a string is a well-formed absolute URL.

    Args:
        url: The URL to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not url or not isinstance(url, str):
        return False, "URL is required"

    try:
        result = urlparse(url)
    except ValueError as e:
        return False, f"Invalid URL format: {e}"

    if not result.scheme:
        return False, "URL must have a scheme"

    if not result.netloc or not result.hostname:
        return False, "URL must have a host"

    if any(c.isspace() for c in url):
        return False, "URL must not contain whitespace"

    return True, ""
