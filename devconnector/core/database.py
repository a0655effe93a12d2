from __future__ import annotations

from typing import AsyncGenerator

import motor.motor_asyncio
from beanie import init_beanie

from .config import settings


# Globals populated during startup
_motor_client: motor.motor_asyncio.AsyncIOMotorClient | None = None
_motor_db = None
_owns_client = False


async def init_db(app=None, client=None) -> None:
    """Initialize Motor client and Beanie (call from application lifespan/startup).

    ``client`` lets callers hand in an already built Motor-compatible client,
    e.g. an in-memory one for tests.
    """
    # models import core.config, so they are pulled in lazily here
    from ..models import User, Profile

    global _motor_client, _motor_db, _owns_client
    _owns_client = client is None
    _motor_client = client if client is not None else motor.motor_asyncio.AsyncIOMotorClient(settings.MONGO_URI)
    _motor_db = _motor_client[settings.MONGO_DB_NAME]

    # Initialize Beanie with all document models; this also builds indexes
    await init_beanie(
        database=_motor_db,
        document_models=[
            User,
            Profile,
        ],
    )


async def close_db() -> None:
    """Close Motor client (call on shutdown); injected clients stay with their owner."""
    global _motor_client, _motor_db
    if _motor_client is not None and _owns_client:
        _motor_client.close()
    _motor_client = None
    _motor_db = None


async def get_db_session() -> AsyncGenerator:
    """FastAPI dependency: yields the Motor database instance (or None if not initialized)."""
    yield _motor_db


def get_motor_client() -> motor.motor_asyncio.AsyncIOMotorClient | None:
    return _motor_client
