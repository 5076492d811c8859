"""
Domain records and their external (resource) representation.

Records use snake_case attributes in Python and camelCase keys both in the
store and on the wire. Questions are a discriminated union on `kind`.
"""
from __future__ import annotations
from datetime import datetime, timezone
from typing import Annotated, Any, Dict, Literal, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel

from errors import UnexpectedStoreError


def utcnow() -> datetime:
    """Current UTC time truncated to milliseconds (the store's resolution)."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def _iso(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class _Record(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    created_at: datetime
    updated_at: datetime


# ---- Questions ----

class FreeTextQuestion(_Record):
    kind: Literal["free_text"] = "free_text"
    prompt: str


class MultipleChoiceQuestion(_Record):
    kind: Literal["multiple_choice"] = "multiple_choice"
    prompt: str
    options: Dict[str, str]         # option key -> option text, e.g. {"A": "Paris"}
    correct_option_key: str


Question = Annotated[Union[FreeTextQuestion, MultipleChoiceQuestion], Field(discriminator="kind")]
_question_adapter: TypeAdapter[Question] = TypeAdapter(Question)


# ---- Quizzes ----

class Quiz(_Record):
    title: str
    description: str
    candidate_instructions: str


# ---- Store documents ----

def to_document(record: _Record) -> Dict[str, Any]:
    """Persisted form of a record (camelCase keys, no `_id`)."""
    return record.model_dump(by_alias=True)


def document_to_question(doc: Dict[str, Any]) -> Tuple[str, Question]:
    fields = {k: v for k, v in doc.items() if k != "_id"}
    try:
        return str(doc["_id"]), _question_adapter.validate_python(fields)
    except ValidationError as e:
        raise UnexpectedStoreError("questions.decode", e) from e


def document_to_quiz(doc: Dict[str, Any]) -> Tuple[str, Quiz]:
    fields = {k: v for k, v in doc.items() if k != "_id"}
    try:
        return str(doc["_id"]), Quiz.model_validate(fields)
    except ValidationError as e:
        raise UnexpectedStoreError("quizzes.decode", e) from e


# ---- Shaped responses ----

def question_resource(question_id: str, question: Question) -> Dict[str, Any]:
    if isinstance(question, MultipleChoiceQuestion):
        attributes: Dict[str, Any] = {
            "kind": question.kind,
            "prompt": question.prompt,
            "options": dict(question.options),
            "correctOptionKey": question.correct_option_key,
        }
    elif isinstance(question, FreeTextQuestion):
        attributes = {
            "kind": question.kind,
            "prompt": question.prompt,
        }
    else:
        raise TypeError(f"Unknown question variant: {type(question).__name__}")

    attributes["createdAt"] = _iso(question.created_at)
    attributes["updatedAt"] = _iso(question.updated_at)
    return {"type": "questions", "id": question_id, "attributes": attributes}


def quiz_resource(quiz_id: str, quiz: Quiz) -> Dict[str, Any]:
    return {
        "type": "quizzes",
        "id": quiz_id,
        "attributes": {
            "title": quiz.title,
            "description": quiz.description,
            "candidateInstructions": quiz.candidate_instructions,
            "createdAt": _iso(quiz.created_at),
            "updatedAt": _iso(quiz.updated_at),
        },
    }
