# Standard library imports
import logging

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection
from pymongo import monitoring
from pymongo.errors import PyMongoError

# Local application imports
from ...core.config import Settings
from ...domain.exceptions import StoreError

logger = logging.getLogger(__name__)


class HeartbeatFailureLogger(monitoring.ServerHeartbeatListener):
    """Logs connection-level failures detected by the driver after startup"""
    
    def started(self, event: monitoring.ServerHeartbeatStartedEvent) -> None:
        pass
    
    def succeeded(self, event: monitoring.ServerHeartbeatSucceededEvent) -> None:
        pass
    
    def failed(self, event: monitoring.ServerHeartbeatFailedEvent) -> None:
        logger.warning(f"MongoDB heartbeat to {event.connection_id} failed: {event.reply}")


def build_mongo_uri(settings: Settings) -> str:
    """
    Substitute connection values into the MONGO_URL template.
    
    Every ``<host>``, ``<port>``, ``<user>``, ``<password>`` and ``<dbname>``
    placeholder is replaced verbatim (no escaping).
    
    Args:
        settings: Application settings
        
    Returns:
        MongoDB connection string
    """
    values = {
        "host": settings.mongo_host,
        "port": settings.mongo_port,
        "user": settings.mongo_user,
        "password": settings.mongo_password,
        "dbname": settings.mongo_dbname,
    }
    uri = settings.mongo_url_template
    for key, value in values.items():
        uri = uri.replace(f"<{key}>", value)
    return uri


async def connect_to_store(settings: Settings) -> AsyncIOMotorClient:
    """
    Open the MongoDB connection and verify it with a ping.
    
    Args:
        settings: Application settings
        
    Returns:
        Connected client
        
    Raises:
        StoreError: If the server cannot be reached
    """
    client = None
    try:
        client = AsyncIOMotorClient(
            build_mongo_uri(settings),
            serverSelectionTimeoutMS=10000,
            connectTimeoutMS=10000,
            event_listeners=[HeartbeatFailureLogger()],
        )
        await client.admin.command("ping")
    except PyMongoError as e:
        if client is not None:
            client.close()
        logger.error(f"Failed to connect to MongoDB at {settings.mongo_host}:{settings.mongo_port}: {e}")
        raise StoreError(f"Failed to connect to MongoDB: {e}") from e
    
    logger.info(f"Connected to MongoDB at {settings.mongo_host}:{settings.mongo_port}")
    return client


def get_database(client: AsyncIOMotorClient, settings: Settings) -> AsyncIOMotorDatabase:
    """Get the configured database from a connected client"""
    return client[settings.mongo_dbname]


def get_user_collection(database: AsyncIOMotorDatabase, settings: Settings) -> AsyncIOMotorCollection:
    """
    Get users collection from MongoDB
    
    Returns:
        MongoDB collection for users
    """
    return database[settings.mongo_collection]
