# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection

# Local application imports
from ...core.config import Settings

logger = logging.getLogger(__name__)

USER_COLLECTION_NAME = "users"

# Global MongoDB connection instances (singleton pattern)
_mongo_client: Optional[AsyncIOMotorClient] = None
_mongo_database: Optional[AsyncIOMotorDatabase] = None


def get_database(settings: Settings) -> AsyncIOMotorDatabase:
    """
    Get MongoDB database instance (singleton pattern)

    The Motor client connects lazily, so this does not touch the network.

    Args:
        settings: Application settings holding the connection string

    Returns:
        MongoDB database instance
    """
    global _mongo_client, _mongo_database

    if _mongo_database is not None:
        return _mongo_database

    _mongo_client = AsyncIOMotorClient(
        settings.mongo_uri,
        serverSelectionTimeoutMS=10000,
        connectTimeoutMS=10000,
    )
    _mongo_database = _mongo_client[settings.mongo_database_name]
    return _mongo_database


def get_user_collection(database: AsyncIOMotorDatabase) -> AsyncIOMotorCollection:
    """
    Get users collection from MongoDB

    Returns:
        MongoDB collection for users
    """
    return database[USER_COLLECTION_NAME]


async def ping_database(database: AsyncIOMotorDatabase) -> None:
    """
    Check that MongoDB is reachable.

    Raises:
        RuntimeError: If the server cannot be reached
    """
    try:
        await database.command("ping")
    except Exception as e:
        raise RuntimeError(f"Failed to connect to MongoDB: {e}") from e
    logger.info("MongoDB connected (database=%s)", database.name)


def close_connection() -> None:
    """Close the global MongoDB client, if one was created."""
    global _mongo_client, _mongo_database
    if _mongo_client is not None:
        _mongo_client.close()
        logger.info("MongoDB connection closed")
    _mongo_client = None
    _mongo_database = None
