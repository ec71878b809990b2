"""Alias generation utilities."""

import random
import string
from typing import Optional


class AliasGenerator:
    """Generate random aliases for URLs.

    Create one instance at process start and pass it to whoever needs
    aliases. Aliases are not a security boundary, so a seeded
    ``random.Random`` is used rather than ``secrets``.
    """

    # Base62 characters (alphanumeric, case-sensitive)
    ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits

    def __init__(self, default_length: int = 6, rng: Optional[random.Random] = None):
        """Initialize alias generator.

        Args:
            default_length: Default length for generated aliases
            rng: Random source (a fresh, per-process seeded one if not given)
        """
        self.default_length = default_length
        self._rng = rng or random.Random()

    def generate(self, length: Optional[int] = None) -> str:
        """Generate a random alias.

        Characters are drawn uniformly, with replacement, from ALPHABET.
        Uniqueness is not guaranteed; the store rejects duplicates.

        Args:
            length: Length of the alias (uses default if not specified)

        Returns:
            Random alias of exactly ``length`` characters
        """
        if length is None:
            length = self.default_length
        if length < 1:
            raise ValueError(f"alias length must be positive, got {length}")

        return ''.join(self._rng.choices(self.ALPHABET, k=length))
