"""
Thin repository wrapper to isolate pymongo calls from the request logic.

Every driver and BSON encoding exception is translated into a StoreError
here, so callers never see pymongo types.
"""
from __future__ import annotations
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional, Protocol

from bson import ObjectId
from bson.errors import BSONError
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import ConnectionFailure, PyMongoError

from errors import MalformedIdentifier, StoreUnavailable, UnexpectedStoreError


def parse_object_id(raw: Any, detail: str) -> ObjectId:
    """Validate a path id without touching the store."""
    if not isinstance(raw, str) or not ObjectId.is_valid(raw):
        raise MalformedIdentifier(detail)
    return ObjectId(raw)


class Collection(Protocol):
    """What the service layer needs from a collection."""

    async def insert_one(self, document: Dict[str, Any]) -> str: ...

    async def find_one(self, object_id: ObjectId) -> Optional[Dict[str, Any]]: ...

    async def find_all(self) -> List[Dict[str, Any]]: ...

    async def replace_one(self, object_id: ObjectId, document: Dict[str, Any]) -> bool: ...

    async def delete_one(self, object_id: ObjectId) -> bool: ...


@contextmanager
def _translated(operation: str) -> Iterator[None]:
    try:
        yield
    except ConnectionFailure as e:
        raise StoreUnavailable(operation, e) from e
    except (PyMongoError, BSONError) as e:
        raise UnexpectedStoreError(operation, e) from e


class DocumentCollection:
    def __init__(self, collection: AsyncCollection) -> None:
        self._collection = collection

    @property
    def name(self) -> str:
        return self._collection.name

    async def insert_one(self, document: Dict[str, Any]) -> str:
        # pymongo writes `_id` back into the dict it is given
        with _translated(f"{self.name}.insert_one"):
            result = await self._collection.insert_one(dict(document))
        return str(result.inserted_id)

    async def find_one(self, object_id: ObjectId) -> Optional[Dict[str, Any]]:
        with _translated(f"{self.name}.find_one"):
            return await self._collection.find_one({"_id": object_id})

    async def find_all(self) -> List[Dict[str, Any]]:
        with _translated(f"{self.name}.find"):
            return await self._collection.find({}).to_list()

    async def replace_one(self, object_id: ObjectId, document: Dict[str, Any]) -> bool:
        """Returns False when no document matched (deleted concurrently)."""
        with _translated(f"{self.name}.replace_one"):
            result = await self._collection.replace_one({"_id": object_id}, document)
        return result.matched_count > 0

    async def delete_one(self, object_id: ObjectId) -> bool:
        with _translated(f"{self.name}.delete_one"):
            result = await self._collection.delete_one({"_id": object_id})
        return result.deleted_count > 0
