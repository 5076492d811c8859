"""
MongoDB connection owner.

One MongoStore per application; created and closed by the app lifespan
and handed to request handlers through `app.state`.
"""
from __future__ import annotations
import logging
from typing import Optional

from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase

from config import Settings
from db.repo import DocumentCollection
from errors import StoreUnavailable

logger = logging.getLogger(__name__)


class MongoStore:
    def __init__(self, settings: Settings) -> None:
        self._settings = settings
        self._client: Optional[AsyncMongoClient] = None
        self._db: Optional[AsyncDatabase] = None

    async def connect(self) -> None:
        """Create the client. The driver opens sockets lazily on first use."""
        if self._client is not None:
            return
        self._client = AsyncMongoClient(
            self._settings.mongo_uri,
            tz_aware=True,
            serverSelectionTimeoutMS=self._settings.server_selection_timeout_ms,
        )
        self._db = self._client[self._settings.db_name]
        logger.info("MongoDB client created for database %r", self._settings.db_name)

    async def close(self) -> None:
        if self._client is None:
            return
        await self._client.close()
        self._client = None
        self._db = None
        logger.info("MongoDB client closed")

    def collection(self, name: str) -> DocumentCollection:
        if self._db is None:
            raise StoreUnavailable(f"collection({name})")
        return DocumentCollection(self._db[name])
