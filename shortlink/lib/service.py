"""Business logic service for URL shortener."""

import logging
from typing import Optional, Tuple

from .aliasgen import AliasGenerator
from .database.base import URLStoreBase
from .database.exceptions import AliasExistsError


class URLShortenerService:
    """Service layer between the HTTP handlers and the URL store."""

    def __init__(
        self,
        store: URLStoreBase,
        alias_generator: Optional[AliasGenerator] = None,
        logger: Optional[logging.Logger] = None,
        alias_length: int = 6,
        max_collision_retries: int = 3,
    ):
        """Initialize URL shortener service.

        Args:
            store: URL store instance
            alias_generator: Generator used when no alias is supplied
            logger: Optional logger
            alias_length: Length of generated aliases
            max_collision_retries: Extra attempts when a generated alias is taken
        """
        self.store = store
        self.generator = alias_generator or AliasGenerator(default_length=alias_length)
        self.logger = logger or logging.getLogger("shortlink.service")
        self.alias_length = alias_length
        self.max_collision_retries = max_collision_retries

    async def save_url(self, url: str, alias: Optional[str] = None) -> Tuple[str, int]:
        """Save a URL under an alias, generating the alias if none is given.

        Args:
            url: The URL to shorten
            alias: Optional caller-chosen alias

        Returns:
            Tuple of (alias, record id)

        Raises:
            AliasExistsError: If the chosen alias is taken, or every generated
                alias collided
            StoreError: On other storage failures
        """
        if alias:
            record_id = await self.store.save_url(url, alias)
            self.logger.info(f"url added: {alias} -> {url} (id={record_id})")
            return alias, record_id

        attempts = self.max_collision_retries + 1
        for attempt in range(1, attempts + 1):
            alias = self.generator.generate(self.alias_length)
            try:
                record_id = await self.store.save_url(url, alias)
            except AliasExistsError:
                self.logger.debug(f"Generated alias collided: {alias} (attempt {attempt}/{attempts})")
                if attempt == attempts:
                    raise
                continue

            self.logger.info(f"url added: {alias} -> {url} (id={record_id})")
            return alias, record_id

    async def get_url(self, alias: str) -> str:
        """Get the URL stored under an alias.

        Raises:
            AliasNotFoundError: If the alias is unknown
            StoreError: On other storage failures
        """
        url = await self.store.get_url(alias)
        self.logger.debug(f"Retrieved URL: {alias} -> {url}")
        return url

    async def close(self) -> None:
        """Close service resources."""
        await self.store.close()
