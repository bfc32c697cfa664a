import logging

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from .config import settings

logger = logging.getLogger(__name__)

# =============================================================================
# CLIENT CONFIGURATION
# =============================================================================


def create_client() -> MongoClient:
    """
    Create the process-wide MongoDB client.

    MongoClient keeps its own connection pool and is safe to share between
    request threads, so one instance is created at startup and reused.
    Connecting is lazy: nothing touches the network until the first command.
    """
    return MongoClient(
        settings.MONGODB_URL,
        serverSelectionTimeoutMS=settings.MONGODB_SERVER_SELECTION_TIMEOUT_MS,
        appname=settings.PROJECT_NAME,
    )


def get_students_collection(client: MongoClient) -> Collection:
    """Collection holding the student documents."""
    return client[settings.MONGODB_DB][settings.MONGODB_COLLECTION]


# =============================================================================
# DATABASE UTILITIES
# =============================================================================

def check_database_connection(client: MongoClient) -> bool:
    """
    Check if the MongoDB server answers a ping.

    Returns:
        bool: True if connection successful, False otherwise
    """
    try:
        client.admin.command("ping")
        logger.info("MongoDB connection successful")
        return True
    except PyMongoError as e:
        logger.error(f"MongoDB connection failed: {e}")
        return False


# =============================================================================
# INITIALIZATION
# =============================================================================

def init_db() -> MongoClient:
    """
    Connect to MongoDB.
    Run this when starting the application; raises if the server is unreachable.
    """
    logger.info(f"Connecting to MongoDB at {settings.get_masked_mongodb_url()}...")
    client = create_client()

    if not check_database_connection(client):
        client.close()
        raise RuntimeError("Cannot connect to MongoDB!")

    logger.info(
        f"Using collection {settings.MONGODB_DB}.{settings.MONGODB_COLLECTION}"
    )
    return client


def close_db(client: MongoClient) -> None:
    logger.info("Closing MongoDB client")
    client.close()
