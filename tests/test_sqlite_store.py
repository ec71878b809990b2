"""Tests for the SQLite URL store."""

import sqlite3

import pytest
from shortlink.lib.database.exceptions import (
    AliasExistsError,
    AliasNotFoundError,
    InitError,
    StoreError,
)
from shortlink.lib.database.sqlite import SQLiteURLStore


class FailingConnection:
    """Stands in for a connection whose close() fails."""

    def __init__(self, message: str):
        self.message = message

    def close(self):
        raise sqlite3.OperationalError(self.message)


class TestSQLiteURLStoreInit:
    """Test opening the store."""

    def test_creates_schema(self, storage_path):
        store = SQLiteURLStore(storage_path=storage_path)
        store._close_connections()

        conn = sqlite3.connect(storage_path)
        try:
            tables = {row[0] for row in conn.execute("SELECT name FROM sqlite_master WHERE type = 'table'")}
            indexes = {row[0] for row in conn.execute("SELECT name FROM sqlite_master WHERE type = 'index'")}
            columns = [row[1] for row in conn.execute("PRAGMA table_info(url)")]
        finally:
            conn.close()

        assert "url" in tables
        assert "idx_alias" in indexes
        assert columns == ["id", "alias", "url"]

    def test_missing_directory(self, tmp_path):
        with pytest.raises(InitError):
            SQLiteURLStore(storage_path=str(tmp_path / "missing" / "storage.db"))

    def test_not_a_database(self, tmp_path):
        path = tmp_path / "garbage.db"
        path.write_bytes(b"this is definitely not a sqlite database file\n" * 50)

        with pytest.raises(InitError):
            SQLiteURLStore(storage_path=str(path))

    def test_init_error_is_store_error(self, tmp_path):
        with pytest.raises(StoreError):
            SQLiteURLStore(storage_path=str(tmp_path / "missing" / "storage.db"))

    async def test_reopen_existing_file(self, storage_path):
        store = SQLiteURLStore(storage_path=storage_path)
        await store.save_url("https://example.com", "persisted")
        await store.close()

        reopened = SQLiteURLStore(storage_path=storage_path)
        try:
            assert await reopened.get_url("persisted") == "https://example.com"
        finally:
            await reopened.close()


class TestSQLiteURLStore:
    """Test save and lookup."""

    async def test_save_and_get(self, store):
        record_id = await store.save_url("https://example.com", "test_alias")

        assert record_id > 0
        assert await store.get_url("test_alias") == "https://example.com"

    async def test_ids_increase(self, store, sample_urls):
        ids = [await store.save_url(url, f"alias{i}") for i, url in enumerate(sample_urls)]

        assert ids == sorted(ids)
        assert len(set(ids)) == len(ids)

    async def test_duplicate_alias(self, store):
        await store.save_url("https://example.com", "existing_alias")

        with pytest.raises(AliasExistsError):
            await store.save_url("https://other.example.com", "existing_alias")

        # Original record unchanged
        assert await store.get_url("existing_alias") == "https://example.com"

    async def test_duplicate_url_allowed(self, store):
        first = await store.save_url("https://example.com", "first")
        second = await store.save_url("https://example.com", "second")

        assert first != second
        assert await store.get_url("first") == await store.get_url("second")

    async def test_aliases_are_case_sensitive(self, store):
        await store.save_url("https://lower.example.com", "abc")
        await store.save_url("https://upper.example.com", "ABC")

        assert await store.get_url("abc") == "https://lower.example.com"
        assert await store.get_url("ABC") == "https://upper.example.com"

    async def test_get_unknown_alias(self, store):
        with pytest.raises(AliasNotFoundError):
            await store.get_url("never_saved")

    async def test_empty_alias_rejected(self, store):
        with pytest.raises(ValueError):
            await store.save_url("https://example.com", "")

    async def test_url_stored_verbatim(self, store):
        url = "https://Example.com/Path?q=a b&x=%20#frag"
        await store.save_url(url, "verbatim")

        assert await store.get_url("verbatim") == url


class TestSQLiteURLStoreClose:
    """Test releasing the store."""

    async def test_operations_after_close(self, store):
        await store.save_url("https://example.com", "before_close")
        await store.close()

        with pytest.raises(StoreError):
            await store.get_url("before_close")
        with pytest.raises(StoreError):
            await store.save_url("https://example.com", "after_close")

    async def test_close_twice(self, store):
        await store.close()
        await store.close()

    async def test_close_reports_every_failure(self, store):
        await store.save_url("https://example.com", "some_alias")
        store._connections.extend([FailingConnection("first failure"), FailingConnection("second failure")])

        with pytest.raises(StoreError) as exc_info:
            await store.close()

        assert "first failure" in str(exc_info.value)
        assert "second failure" in str(exc_info.value)

        assert store._connections == []
        with pytest.raises(StoreError):
            await store.get_url("some_alias")
