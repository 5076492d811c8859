"""
Quiz handlers. Same verb set and status mapping as questions, single record shape.
"""
from __future__ import annotations
from typing import Any, Dict, List

from db.repo import Collection, parse_object_id
from errors import NotFound
from schemas import document_to_quiz, quiz_resource, to_document, utcnow
from service.validation import validate_quiz

NOT_FOUND = "Quiz not found"
INVALID_ID = "Invalid quiz id"


async def create(collection: Collection, payload: Any) -> Dict[str, Any]:
    quiz = validate_quiz(payload, utcnow())
    quiz_id = await collection.insert_one(to_document(quiz))
    return quiz_resource(quiz_id, quiz)


async def get(collection: Collection, raw_id: str) -> Dict[str, Any]:
    object_id = parse_object_id(raw_id, INVALID_ID)
    doc = await collection.find_one(object_id)
    if doc is None:
        raise NotFound(NOT_FOUND)
    return quiz_resource(*document_to_quiz(doc))


async def list_all(collection: Collection) -> List[Dict[str, Any]]:
    return [quiz_resource(*document_to_quiz(doc)) for doc in await collection.find_all()]


async def update(collection: Collection, raw_id: str, payload: Any) -> Dict[str, Any]:
    object_id = parse_object_id(raw_id, INVALID_ID)
    existing = await collection.find_one(object_id)
    if existing is None:
        raise NotFound(NOT_FOUND)

    quiz = validate_quiz(payload, utcnow(), existing.get("createdAt"))
    if not await collection.replace_one(object_id, to_document(quiz)):
        raise NotFound(NOT_FOUND)
    updated = await collection.find_one(object_id)
    if updated is None:
        raise NotFound(NOT_FOUND)
    return quiz_resource(*document_to_quiz(updated))


async def delete(collection: Collection, raw_id: str) -> None:
    object_id = parse_object_id(raw_id, INVALID_ID)
    if not await collection.delete_one(object_id):
        raise NotFound(NOT_FOUND)
