"""Exceptions raised by URL store implementations.

Callers branch on the exception type, never on the message text.

Classes:
    StoreError:
        Base class; also raised as-is for unclassified storage failures
        (disk errors, corrupted file, use of a closed store, ...).

    InitError:
        The store could not be opened or its schema could not be created.

    AliasExistsError:
        Save was attempted with an alias that is already stored.

    AliasNotFoundError:
        Lookup found no record for the requested alias.
"""


class StoreError(Exception):
    """Generic storage failure."""

    pass


class InitError(StoreError):
    """Raised when the backing store cannot be opened or initialized."""

    pass


class AliasExistsError(StoreError):
    """Raised when the alias uniqueness constraint is violated on save."""

    pass


class AliasNotFoundError(StoreError):
    """Raised when no record exists for an alias."""

    pass
