"""
FastAPI routes.

We expose:
- GET    /health
- POST   /questions, GET /questions, GET|PATCH|DELETE /questions/{id}
- POST   /quizzes,   GET /quizzes,   GET|PATCH|DELETE /quizzes/{id}

Bodies are taken as raw JSON; shape checks live in service.validation.
ASSUMPTION: No auth (out of scope).
"""
from __future__ import annotations
from typing import Any

from fastapi import APIRouter, Body, Depends, Request, Response, status

from db.repo import Collection
from service import questions as question_service
from service import quizzes as quiz_service

router = APIRouter(tags=["service"])
questions_router = APIRouter(prefix="/questions", tags=["questions"])
quizzes_router = APIRouter(prefix="/quizzes", tags=["quizzes"])


@router.get("/health")
def health() -> dict:
    return {"status": "ok"}


# ---- Dependencies ----

def question_collection(request: Request) -> Collection:
    state = request.app.state
    return state.store.collection(state.settings.questions_collection)


def quiz_collection(request: Request) -> Collection:
    state = request.app.state
    return state.store.collection(state.settings.quizzes_collection)


# ---- Questions ----

@questions_router.post("", status_code=status.HTTP_201_CREATED)
async def create_question(payload: Any = Body(None), collection: Collection = Depends(question_collection)) -> dict:
    return {"data": await question_service.create(collection, payload)}


@questions_router.get("/{question_id}")
async def get_question_by_id(question_id: str, collection: Collection = Depends(question_collection)) -> dict:
    return {"data": await question_service.get(collection, question_id)}


@questions_router.get("")
async def get_questions(collection: Collection = Depends(question_collection)) -> dict:
    return {"data": await question_service.list_all(collection)}


@questions_router.patch("/{question_id}")
async def update_question(
    question_id: str,
    payload: Any = Body(None),
    collection: Collection = Depends(question_collection),
) -> dict:
    return {"data": await question_service.update(collection, question_id, payload)}


@questions_router.delete("/{question_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_question(question_id: str, collection: Collection = Depends(question_collection)) -> Response:
    await question_service.delete(collection, question_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ---- Quizzes ----

@quizzes_router.post("", status_code=status.HTTP_201_CREATED)
async def create_quiz(payload: Any = Body(None), collection: Collection = Depends(quiz_collection)) -> dict:
    return {"data": await quiz_service.create(collection, payload)}


@quizzes_router.get("/{quiz_id}")
async def get_quiz_by_id(quiz_id: str, collection: Collection = Depends(quiz_collection)) -> dict:
    return {"data": await quiz_service.get(collection, quiz_id)}


@quizzes_router.get("")
async def get_quizzes(collection: Collection = Depends(quiz_collection)) -> dict:
    return {"data": await quiz_service.list_all(collection)}


@quizzes_router.patch("/{quiz_id}")
async def update_quiz(
    quiz_id: str,
    payload: Any = Body(None),
    collection: Collection = Depends(quiz_collection),
) -> dict:
    return {"data": await quiz_service.update(collection, quiz_id, payload)}


@quizzes_router.delete("/{quiz_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_quiz(quiz_id: str, collection: Collection = Depends(quiz_collection)) -> Response:
    await quiz_service.delete(collection, quiz_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
