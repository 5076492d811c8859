"""
Request-body validators.

Pure functions: given an untrusted JSON payload, the current time and (on
update) the stored creation time, return a normalized record or raise
RejectedPayload. Nothing here touches the store.
"""
from __future__ import annotations
from datetime import datetime
from typing import Any, Optional

from errors import RejectedPayload, RejectionReason
from schemas import FreeTextQuestion, MultipleChoiceQuestion, Question, Quiz


def _is_text(value: Any) -> bool:
    return isinstance(value, str)


def validate_question(payload: Any, now: datetime, existing_created_at: Optional[datetime] = None) -> Question:
    if not isinstance(payload, dict) or not _is_text(payload.get("kind")) or not _is_text(payload.get("prompt")):
        raise RejectedPayload(RejectionReason.INVALID_SHAPE, "Invalid request body")

    created_at = existing_created_at if existing_created_at is not None else now
    kind = payload["kind"]

    if kind == "free_text":
        return FreeTextQuestion(prompt=payload["prompt"], created_at=created_at, updated_at=now)

    if kind == "multiple_choice":
        options = payload.get("options")
        if not isinstance(options, dict):
            raise RejectedPayload(RejectionReason.INVALID_OPTIONS, "options must be an object of key/value pairs")
        if len(options) < 2:
            raise RejectedPayload(RejectionReason.TOO_FEW_OPTIONS, "At least two options are required")
        if not all(_is_text(k) and _is_text(v) for k, v in options.items()):
            raise RejectedPayload(RejectionReason.INVALID_OPTION_TYPES, "Option keys and values must be strings")

        correct = payload.get("correctOptionKey")
        if not _is_text(correct) or correct not in options:
            raise RejectedPayload(
                RejectionReason.INVALID_CORRECT_KEY, "correctOptionKey must match one of the option keys"
            )

        return MultipleChoiceQuestion(
            prompt=payload["prompt"],
            options=dict(options),
            correct_option_key=correct,
            created_at=created_at,
            updated_at=now,
        )

    raise RejectedPayload(RejectionReason.INVALID_KIND, "Invalid question kind")


def validate_quiz(payload: Any, now: datetime, existing_created_at: Optional[datetime] = None) -> Quiz:
    fields = ("title", "description", "candidateInstructions")
    if not isinstance(payload, dict) or not all(_is_text(payload.get(f)) for f in fields):
        raise RejectedPayload(
            RejectionReason.INVALID_SHAPE,
            "Invalid request body. Expected title, description and candidateInstructions as strings.",
        )

    return Quiz(
        title=payload["title"],
        description=payload["description"],
        candidate_instructions=payload["candidateInstructions"],
        created_at=existing_created_at if existing_created_at is not None else now,
        updated_at=now,
    )
