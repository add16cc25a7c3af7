"""
database.py – Motor client helpers
"""

from functools import lru_cache

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from ..core.config import get_settings


@lru_cache
def get_client() -> AsyncIOMotorClient:
    """One Motor client per process, built from ``MONGO_URI`` (a MongoDsn, hence ``str``)."""
    return AsyncIOMotorClient(str(get_settings().mongo_uri))


def get_db() -> AsyncIOMotorDatabase:
    # users and counters live in the database named by the URI path
    return get_client().get_default_database()
