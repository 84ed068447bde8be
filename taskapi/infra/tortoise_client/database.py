"""
Database lifecycle: the connection pool is opened once at process start,
handed to the repositories, and closed at shutdown.
"""
from contextlib import asynccontextmanager
from typing import AsyncIterator

from tortoise import Tortoise, connections
from tortoise.backends.base.client import BaseDBAsyncClient

from ..config import Settings
from ..logging_config import get_logger
from .config import build_tortoise_config

logger = get_logger("database")


async def init_database(settings: Settings) -> BaseDBAsyncClient:
    """Initialise Tortoise, create missing tables and return the default connection"""
    await Tortoise.init(config=build_tortoise_config(settings))
    # CREATE TABLE IF NOT EXISTS / CREATE INDEX IF NOT EXISTS
    await Tortoise.generate_schemas(safe=True)
    logger.info("Database initialized", extra={"backend": settings.db_url.split(":", 1)[0]})
    return connections.get("default")


async def close_database() -> None:
    await Tortoise.close_connections()
    logger.info("Database connections closed")


@asynccontextmanager
async def open_database(settings: Settings) -> AsyncIterator[BaseDBAsyncClient]:
    db = await init_database(settings)
    try:
        yield db
    finally:
        await close_database()
