"""Pytest configuration and fixtures."""

import random
from typing import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from shortlink.config import Config
from shortlink.lib.aliasgen import AliasGenerator
from shortlink.lib.common.logging_config import setup_logging
from shortlink.lib.database.base import URLStoreBase
from shortlink.lib.database.sqlite import SQLiteURLStore
from shortlink.lib.service import URLShortenerService
from shortlink.web_app import create_app

from .stubs import StubStore


TEST_USER = "myuser"
TEST_PASSWORD = "mypass"


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(env="local")


@pytest.fixture
def storage_path(tmp_path) -> str:
    return str(tmp_path / "storage.db")


@pytest.fixture
async def store(storage_path) -> AsyncGenerator[SQLiteURLStore, None]:
    """Create SQLite store backed by a temporary file."""
    s = SQLiteURLStore(storage_path=storage_path)

    yield s

    await s.close()


@pytest.fixture
def stub_store() -> StubStore:
    return StubStore()


@pytest.fixture
def alias_generator() -> AliasGenerator:
    """Create alias generator with a seeded random source."""
    return AliasGenerator(default_length=6, rng=random.Random(1234))


@pytest.fixture
def service(store, alias_generator, logger) -> URLShortenerService:
    """Create service backed by the SQLite store."""
    return URLShortenerService(
        store=store,
        alias_generator=alias_generator,
        logger=logger,
    )


@pytest.fixture
def config(storage_path, monkeypatch) -> Config:
    monkeypatch.delenv("CONFIG_PATH", raising=False)
    return Config(
        storage_path=storage_path,
        http_server={"user": TEST_USER, "password": TEST_PASSWORD},
    )


def make_app(store: URLStoreBase, config: Config, alias_generator: AliasGenerator, logger):
    service = URLShortenerService(
        store=store,
        alias_generator=alias_generator,
        logger=logger,
    )
    return create_app(
        service_instance=service,
        config=config,
    )


@pytest.fixture
def app(store, config, alias_generator, logger):
    """Create test FastAPI app backed by the SQLite store."""
    return make_app(store, config, alias_generator, logger)


@pytest.fixture
async def client(app):
    """Create authenticated test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport,
        base_url="http://testserver",
        auth=(TEST_USER, TEST_PASSWORD),
    ) as ac:
        yield ac


@pytest.fixture
def client_for(config, alias_generator, logger):
    """Build an authenticated client around a given store."""
    def _client(store: URLStoreBase, auth=(TEST_USER, TEST_PASSWORD)) -> AsyncClient:
        app = make_app(store, config, alias_generator, logger)
        return AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://testserver",
            auth=auth,
        )
    return _client


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "https://example.com/test",
        "https://github.com/user/repo",
        "https://stackoverflow.com/questions/123456",
    ]
