"""
MongoDB Client
==============

MongoDB client manager for database connections.
"""
import logging
from typing import Optional

from pymongo import MongoClient
from pymongo.client_session import ClientSession
from pymongo.collection import Collection
from pymongo.database import Database

from taskia.core.config import get_settings

logger = logging.getLogger(__name__)


class MongoClientManager:
    """
    MongoDB client manager.

    Manages the MongoDB connection and provides access to collections.
    A ready-made client (for example a mongomock client in tests) can be
    passed in instead of a URI.
    """

    def __init__(
        self,
        mongo_uri: Optional[str] = None,
        database_name: Optional[str] = None,
        client: Optional[MongoClient] = None,
    ):
        settings = get_settings()
        self._mongo_uri = mongo_uri or settings.mongo_uri
        self._database_name = database_name or settings.mongo_database_name
        self._client: Optional[MongoClient] = client
        self._database: Optional[Database] = None

    def _initialize_client(self) -> None:
        """Initialize MongoDB client connection."""
        if self._client is None:
            if not self._mongo_uri:
                raise RuntimeError("MONGO_URI not set. Please configure it in your .env file.")
            self._client = MongoClient(
                self._mongo_uri,
                tz_aware=True,
                serverSelectionTimeoutMS=get_settings().mongo_server_selection_timeout_ms,
            )
        self._database = self._client[self._database_name]
        logger.info(f"Using MongoDB database: {self._database_name}")

    @property
    def database_name(self) -> str:
        return self._database_name

    def get_database(self) -> Database:
        """Get MongoDB database instance."""
        if self._database is None:
            self._initialize_client()
        return self._database

    def get_collection(self, collection_name: str) -> Collection:
        """
        Get a MongoDB collection.

        Args:
            collection_name: Name of the collection

        Returns:
            MongoDB Collection object
        """
        return self.get_database()[collection_name]

    def start_session(self) -> ClientSession:
        """Start a client session (needed for multi-document transactions)."""
        self.get_database()
        return self._client.start_session()

    def ping(self) -> None:
        """
        Round-trip to the server.

        Raises:
            pymongo.errors.PyMongoError: If the server cannot be reached
        """
        self.get_database().list_collection_names()

    def close(self) -> None:
        """Close MongoDB connection."""
        if self._client:
            self._client.close()
            self._client = None
            self._database = None


# Global client manager (singleton pattern)
_mongo_client: Optional[MongoClientManager] = None


def get_mongo_client() -> MongoClientManager:
    """Get singleton MongoDB client manager."""
    global _mongo_client
    if _mongo_client is None:
        _mongo_client = MongoClientManager()
    return _mongo_client


def close_mongo_client() -> None:
    """Close the singleton client manager if it was ever created."""
    global _mongo_client
    if _mongo_client is not None:
        _mongo_client.close()
        _mongo_client = None
