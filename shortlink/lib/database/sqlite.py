"""SQLite implementation of the URL store."""

import asyncio
import sqlite3
import threading
from typing import List

from .base import URLStoreBase
from .exceptions import AliasExistsError, AliasNotFoundError, InitError, StoreError


class SQLiteURLStore(URLStoreBase):
    """SQLite implementation of URL store operations.

    Blocking SQLite calls run in worker threads. Every worker thread gets its
    own connection to the database file; all of them are tracked so close()
    can release them. Alias uniqueness is enforced by the UNIQUE constraint
    on the table, checked by SQLite at insert time.
    """

    CREATE_SCHEMA_SQL = """
    CREATE TABLE IF NOT EXISTS url(
        id INTEGER PRIMARY KEY,
        alias TEXT NOT NULL UNIQUE,
        url TEXT NOT NULL);
    CREATE INDEX IF NOT EXISTS idx_alias ON url(alias);
    """

    INSERT_SQL = "INSERT INTO url(url, alias) VALUES(?, ?)"
    SELECT_SQL = "SELECT url FROM url WHERE alias = ?"

    def __init__(self, storage_path: str, busy_timeout_seconds: float = 5.0):
        """Open the database file and ensure the schema exists.

        The parent directory of storage_path must already exist.

        Args:
            storage_path: Path to the SQLite database file
            busy_timeout_seconds: How long a connection waits on a locked database

        Raises:
            InitError: If the file cannot be opened or the schema cannot be created
        """
        super().__init__(storage_path)

        self.busy_timeout_seconds = busy_timeout_seconds

        self._local = threading.local()
        self._connections: List[sqlite3.Connection] = []
        self._connections_lock = threading.Lock()
        self._closed = False

        try:
            conn = self._connect()
        except sqlite3.Error as e:
            raise InitError(f"unable to open database file {storage_path}: {e}") from e

        try:
            conn.executescript(self.CREATE_SCHEMA_SQL)
        except sqlite3.Error as e:
            self._closed = True
            conn.close()
            raise InitError(f"unable to create schema in {storage_path}: {e}") from e

        self._local.conn = conn

    def _connect(self) -> sqlite3.Connection:
        """Open a new connection and register it for close()."""
        # Autocommit: each INSERT is its own transaction.
        conn = sqlite3.connect(
            self.storage_path,
            timeout=self.busy_timeout_seconds,
            isolation_level=None,
            check_same_thread=False,
        )
        with self._connections_lock:
            self._connections.append(conn)
        return conn

    def _connection(self) -> sqlite3.Connection:
        """Get the calling thread's connection, opening it on first use."""
        if self._closed:
            raise StoreError("store is closed")

        conn = getattr(self._local, "conn", None)
        if conn is None:
            try:
                conn = self._connect()
            except sqlite3.Error as e:
                raise StoreError(f"unable to open database file {self.storage_path}: {e}") from e
            self._local.conn = conn
        return conn

    def _save_url(self, url_to_save: str, alias: str) -> int:
        conn = self._connection()
        try:
            cursor = conn.execute(self.INSERT_SQL, (url_to_save, alias))
        except sqlite3.IntegrityError as e:
            if e.sqlite_errorcode == sqlite3.SQLITE_CONSTRAINT_UNIQUE:
                raise AliasExistsError(f"alias '{alias}' already exists") from e
            raise StoreError(f"failed to save url: {e}") from e
        except sqlite3.Error as e:
            raise StoreError(f"failed to save url: {e}") from e
        return cursor.lastrowid

    def _get_url(self, alias: str) -> str:
        conn = self._connection()
        try:
            row = conn.execute(self.SELECT_SQL, (alias,)).fetchone()
        except sqlite3.Error as e:
            raise StoreError(f"failed to get url: {e}") from e

        if row is None:
            raise AliasNotFoundError(f"alias '{alias}' not found")
        return row[0]

    async def save_url(self, url_to_save: str, alias: str) -> int:
        """Save a new alias -> URL mapping.

        The insert is attempted directly; a duplicate alias is reported by
        SQLite's unique constraint and translated to AliasExistsError.

        Args:
            url_to_save: The URL to store
            alias: The alias to store it under

        Returns:
            Row id of the new record
        """
        if not alias:
            raise ValueError("alias must not be empty")

        return await asyncio.to_thread(self._save_url, url_to_save, alias)

    async def get_url(self, alias: str) -> str:
        """Get the URL stored under an alias.

        Args:
            alias: The alias to look up

        Returns:
            The stored URL
        """
        return await asyncio.to_thread(self._get_url, alias)

    def _close_connections(self) -> None:
        with self._connections_lock:
            self._closed = True
            connections = self._connections
            self._connections = []

        errors = []
        for conn in connections:
            try:
                conn.close()
            except sqlite3.Error as e:
                errors.append(str(e))

        if errors:
            raise StoreError(f"failed to close storage: {', '.join(errors)}")

    async def close(self) -> None:
        """Close every connection opened by this store.

        All connections are closed even if some fail; the failures are
        reported together. Calling close() again does nothing.
        """
        self._close_connections()
