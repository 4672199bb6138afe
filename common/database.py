"""MongoDB client wrapper holding the users and files collections."""

from typing import Any, Dict, Optional

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from common.config import DB_DATABASE, DB_HOST, DB_PORT
from common.logging_config import get_logger

logger = get_logger(__name__)

USERS_COLLECTION = "users"
FILES_COLLECTION = "files"


class Database:
    """
    Thin adapter over a MongoDB database.

    The client is injected so tests can pass an in-memory implementation
    with the same interface.
    """

    def __init__(self, client: Any, name: str = DB_DATABASE):
        self.client = client
        self.name = name
        self.db = client[name]

    @classmethod
    def from_config(
        cls,
        host: str = DB_HOST,
        port: int = DB_PORT,
        name: str = DB_DATABASE,
        server_selection_timeout_ms: int = 2000,
    ) -> "Database":
        """
        Build a Database connected to the configured MongoDB server.

        Connection is lazy; no request is sent until the first operation.
        """
        client = MongoClient(
            host=host,
            port=port,
            serverSelectionTimeoutMS=server_selection_timeout_ms,
        )
        logger.info(f"MongoDB client created for {host}:{port}/{name}")
        return cls(client, name)

    @property
    def users(self) -> Collection:
        return self.db[USERS_COLLECTION]

    @property
    def files(self) -> Collection:
        return self.db[FILES_COLLECTION]

    def ensure_indexes(self) -> None:
        """
        Create indexes used by lookups and listing if they don't exist.
        """
        self.users.create_index("email", unique=True)
        self.files.create_index([("userId", 1), ("parentId", 1)])

    def is_alive(self) -> bool:
        try:
            self.client.admin.command("ping")
            return True
        except PyMongoError as e:
            logger.warning(f"MongoDB ping failed: {e}")
            return False

    def count(self, collection: str, query: Optional[Dict[str, Any]] = None) -> int:
        """
        Count documents in a collection, returning 0 when the store is down.
        """
        if not self.is_alive():
            return 0
        try:
            return self.db[collection].count_documents(query or {})
        except PyMongoError as e:
            logger.error(f"Failed to count {collection}: {e}", exc_info=True)
            return 0

    def close(self) -> None:
        self.client.close()
        logger.info("MongoDB client closed")
