#!/usr/bin/env python3
"""
Main entry point for URL shortener service.

Usage:
    CONFIG_PATH=config/local.yaml python -m shortlink.app

Configuration is read from the YAML file named by CONFIG_PATH, with
environment variables taking precedence (nested keys use "__", e.g.
HTTP_SERVER__PASSWORD).

uvicorn handles SIGINT/SIGTERM: it stops accepting connections, waits up to
http_server.shutdown_timeout for in-flight requests, then runs the lifespan
shutdown which closes the store.
"""

import logging
import os
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from pydantic import ValidationError

from .config import Config, load_config
from .lib.aliasgen import AliasGenerator
from .lib.database.exceptions import InitError, StoreError
from .lib.database.sqlite import SQLiteURLStore
from .lib.service import URLShortenerService
from .lib.common.logging_config import setup_logging, ENV_LOCAL
from .web_app import create_app


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown."""
    logger = app.state.logger

    logger.info("server started")

    yield

    logger.info("stopping server")

    try:
        await app.state.service.close()
    except StoreError as e:
        logger.error(f"failed to close storage: {e}")

    logger.info("server stopped")


def setup_storage(config: Config, logger: logging.Logger) -> SQLiteURLStore:
    """Create the storage directory if needed and open the store.

    Raises:
        OSError: If the storage directory cannot be created
        InitError: If the store cannot be opened
    """
    dir_path = os.path.dirname(os.path.abspath(config.storage_path))
    if not os.path.isdir(dir_path):
        logger.debug(f"Creating storage directory {dir_path}")
        os.makedirs(dir_path, exist_ok=True)

    return SQLiteURLStore(storage_path=config.storage_path)


def main():
    """Main entry point."""
    # Load configuration
    try:
        config = load_config()
    except (FileNotFoundError, ValidationError) as e:
        print(f"error reading config: {e}", file=sys.stderr)
        sys.exit(1)

    # Setup logging
    logger = setup_logging(env=config.env, log_file=config.log_file)

    logger.info(f"starting url-shortener (env={config.env})")
    logger.debug("debug messages are enabled")
    logger.debug(f"Configuration: {config.model_dump()}")

    try:
        store = setup_storage(config, logger)
    except (OSError, InitError) as e:
        logger.error(f"failed to initialize storage: {e}")
        sys.exit(1)

    generator = AliasGenerator(default_length=config.alias_length)
    service = URLShortenerService(
        store=store,
        alias_generator=generator,
        logger=logger.getChild("service"),
        alias_length=config.alias_length,
        max_collision_retries=config.max_collision_retries,
    )

    app = create_app(
        service_instance=service,
        config=config,
    )
    app.state.logger = logger
    app.router.lifespan_context = lifespan

    server_config = config.http_server
    uvicorn_config = uvicorn.Config(
        app,
        host=server_config.host,
        port=server_config.port,
        log_level="debug" if config.env == ENV_LOCAL else "info",
        access_log=False,
        timeout_keep_alive=int(server_config.idle_timeout),
        timeout_graceful_shutdown=int(server_config.shutdown_timeout),
    )

    server = uvicorn.Server(uvicorn_config)

    logger.info(f"starting server on {server_config.address}")
    try:
        server.run()
    except Exception as e:
        logger.error(f"failed to serve server: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
