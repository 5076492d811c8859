"""
Question handlers: validate -> persist -> shape.

Each function takes the questions collection explicitly and returns the
resource object placed under `data` in the response. Client errors are
raised as ApiError subclasses; StoreError propagates to the app handler.
"""
from __future__ import annotations
from typing import Any, Dict, List

from db.repo import Collection, parse_object_id
from errors import NotFound
from schemas import document_to_question, question_resource, to_document, utcnow
from service.validation import validate_question

NOT_FOUND = "Question not found"
INVALID_ID = "Invalid question id"


async def create(collection: Collection, payload: Any) -> Dict[str, Any]:
    question = validate_question(payload, utcnow())
    question_id = await collection.insert_one(to_document(question))
    return question_resource(question_id, question)


async def get(collection: Collection, raw_id: str) -> Dict[str, Any]:
    object_id = parse_object_id(raw_id, INVALID_ID)
    doc = await collection.find_one(object_id)
    if doc is None:
        raise NotFound(NOT_FOUND)
    return question_resource(*document_to_question(doc))


async def list_all(collection: Collection) -> List[Dict[str, Any]]:
    docs = await collection.find_all()
    return [question_resource(*document_to_question(doc)) for doc in docs]


async def update(collection: Collection, raw_id: str, payload: Any) -> Dict[str, Any]:
    object_id = parse_object_id(raw_id, INVALID_ID)
    existing = await collection.find_one(object_id)
    if existing is None:
        raise NotFound(NOT_FOUND)

    question = validate_question(payload, utcnow(), existing.get("createdAt"))

    # The document may have been deleted since the lookup above.
    if not await collection.replace_one(object_id, to_document(question)):
        raise NotFound(NOT_FOUND)
    updated = await collection.find_one(object_id)
    if updated is None:
        raise NotFound(NOT_FOUND)
    return question_resource(*document_to_question(updated))


async def delete(collection: Collection, raw_id: str) -> None:
    object_id = parse_object_id(raw_id, INVALID_ID)
    if not await collection.delete_one(object_id):
        raise NotFound(NOT_FOUND)
