"""Tests for the request-body validators."""
from datetime import datetime, timedelta, timezone

import pytest

from errors import RejectedPayload, RejectionReason
from schemas import FreeTextQuestion, MultipleChoiceQuestion
from service.validation import validate_question, validate_quiz

NOW = datetime(2025, 3, 1, 12, 0, 0, tzinfo=timezone.utc)
EARLIER = NOW - timedelta(days=3)


def _reason(payload) -> RejectionReason:
    with pytest.raises(RejectedPayload) as info:
        validate_question(payload, NOW)
    return info.value.reason


class TestFreeTextQuestion:
    def test_accepts_prompt_and_kind(self) -> None:
        question = validate_question({"kind": "free_text", "prompt": "Why?"}, NOW)

        assert isinstance(question, FreeTextQuestion)
        assert question.prompt == "Why?"
        assert question.created_at == NOW
        assert question.updated_at == NOW

    def test_ignores_multiple_choice_fields(self) -> None:
        question = validate_question(
            {"kind": "free_text", "prompt": "Why?", "options": {"A": "a"}, "correctOptionKey": "A"}, NOW
        )

        assert isinstance(question, FreeTextQuestion)
        assert not hasattr(question, "options")

    def test_keeps_existing_created_at(self) -> None:
        question = validate_question({"kind": "free_text", "prompt": "Why?"}, NOW, EARLIER)

        assert question.created_at == EARLIER
        assert question.updated_at == NOW


class TestMultipleChoiceQuestion:
    def test_accepts_valid_options(self) -> None:
        payload = {
            "kind": "multiple_choice",
            "prompt": "Capital of France?",
            "options": {"A": "Paris", "B": "Lyon"},
            "correctOptionKey": "A",
        }
        question = validate_question(payload, NOW)

        assert isinstance(question, MultipleChoiceQuestion)
        assert question.options == {"A": "Paris", "B": "Lyon"}
        assert question.correct_option_key == "A"

    def test_duplicate_option_texts_are_allowed(self) -> None:
        payload = {
            "kind": "multiple_choice",
            "prompt": "Pick one",
            "options": {"A": "same", "B": "same"},
            "correctOptionKey": "B",
        }
        assert validate_question(payload, NOW).options == {"A": "same", "B": "same"}

    @pytest.mark.parametrize("options", [None, ["Paris", "Lyon"], "A,B", 3])
    def test_rejects_non_mapping_options(self, options) -> None:
        payload = {"kind": "multiple_choice", "prompt": "p", "options": options, "correctOptionKey": "A"}
        assert _reason(payload) is RejectionReason.INVALID_OPTIONS

    def test_rejects_missing_options(self) -> None:
        assert _reason({"kind": "multiple_choice", "prompt": "p"}) is RejectionReason.INVALID_OPTIONS

    @pytest.mark.parametrize("options", [{}, {"A": "only"}])
    def test_rejects_fewer_than_two_options(self, options) -> None:
        payload = {"kind": "multiple_choice", "prompt": "p", "options": options, "correctOptionKey": "A"}
        assert _reason(payload) is RejectionReason.TOO_FEW_OPTIONS

    @pytest.mark.parametrize("value", [1, None, True, ["x"]])
    def test_rejects_non_text_option_values(self, value) -> None:
        payload = {"kind": "multiple_choice", "prompt": "p", "options": {"A": "a", "B": value}, "correctOptionKey": "A"}
        assert _reason(payload) is RejectionReason.INVALID_OPTION_TYPES

    @pytest.mark.parametrize("key", ["C", None, 0, ""])
    def test_rejects_correct_key_not_among_options(self, key) -> None:
        payload = {"kind": "multiple_choice", "prompt": "p", "options": {"A": "a", "B": "b"}, "correctOptionKey": key}
        assert _reason(payload) is RejectionReason.INVALID_CORRECT_KEY

    def test_rejection_details(self) -> None:
        with pytest.raises(RejectedPayload) as info:
            validate_question({"kind": "multiple_choice", "prompt": "p", "options": {"A": "a"}}, NOW)
        assert info.value.detail == "At least two options are required"
        assert info.value.status_code == 400


class TestQuestionShape:
    @pytest.mark.parametrize(
        "payload",
        [
            None,
            [],
            "free_text",
            {},
            {"kind": "free_text"},
            {"prompt": "p"},
            {"kind": 1, "prompt": "p"},
            {"kind": "free_text", "prompt": 5},
        ],
    )
    def test_rejects_invalid_shape(self, payload) -> None:
        assert _reason(payload) is RejectionReason.INVALID_SHAPE

    def test_shape_detail(self) -> None:
        with pytest.raises(RejectedPayload) as info:
            validate_question({}, NOW)
        assert info.value.detail == "Invalid request body"

    def test_rejects_unknown_kind(self) -> None:
        with pytest.raises(RejectedPayload) as info:
            validate_question({"kind": "essay", "prompt": "p"}, NOW)
        assert info.value.reason is RejectionReason.INVALID_KIND
        assert info.value.detail == "Invalid question kind"


class TestQuizValidation:
    def test_accepts_all_text_fields(self) -> None:
        quiz = validate_quiz({"title": "T", "description": "D", "candidateInstructions": "C"}, NOW)

        assert quiz.title == "T"
        assert quiz.description == "D"
        assert quiz.candidate_instructions == "C"
        assert quiz.created_at == quiz.updated_at == NOW

    def test_keeps_existing_created_at(self) -> None:
        quiz = validate_quiz({"title": "T", "description": "D", "candidateInstructions": "C"}, NOW, EARLIER)
        assert quiz.created_at == EARLIER

    @pytest.mark.parametrize(
        "payload",
        [
            None,
            {"title": "T", "description": "D"},
            {"title": "T", "description": None, "candidateInstructions": "C"},
            {"title": 1, "description": "D", "candidateInstructions": "C"},
        ],
    )
    def test_rejects_missing_or_non_text_fields(self, payload) -> None:
        with pytest.raises(RejectedPayload) as info:
            validate_quiz(payload, NOW)
        assert info.value.reason is RejectionReason.INVALID_SHAPE
        assert info.value.detail.startswith("Invalid request body. Expected title")
