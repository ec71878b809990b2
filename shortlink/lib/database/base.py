"""Abstract base class for URL store implementations."""

from abc import ABC, abstractmethod


class URLStoreBase(ABC):
    """Abstract base class for alias -> URL storage.

    Implementations own the persisted mapping and enforce that every alias
    is stored at most once. Constructing an implementation opens (and, if
    needed, initializes) the backing store and raises InitError on failure.
    """

    def __init__(self, storage_path: str):
        """Initialize store.

        Args:
            storage_path: Location of the backing store
        """
        self.storage_path = storage_path

    @abstractmethod
    async def save_url(self, url_to_save: str, alias: str) -> int:
        """Save a new alias -> URL mapping.

        Args:
            url_to_save: The URL to store
            alias: The alias to store it under (must be non-empty)

        Returns:
            Identifier assigned to the new record

        Raises:
            AliasExistsError: If the alias is already stored
            StoreError: On any other storage failure
        """
        pass

    @abstractmethod
    async def get_url(self, alias: str) -> str:
        """Get the URL stored under an alias.

        Args:
            alias: The alias to look up

        Returns:
            The stored URL

        Raises:
            AliasNotFoundError: If no record has this alias
            StoreError: On any other storage failure
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Release all resources held by the store.

        Raises:
            StoreError: Listing every resource that failed to close
        """
        pass
