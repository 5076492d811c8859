from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from config import Settings
from main import create_app
from tests.fake_store import FakeCollection, FakeStore


@pytest.fixture
def store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def client(store: FakeStore) -> Iterator[TestClient]:
    app = create_app(settings=Settings(), store=store)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def questions(store: FakeStore) -> FakeCollection:
    return store.collection("questions")


@pytest.fixture
def quizzes(store: FakeStore) -> FakeCollection:
    return store.collection("quizzes")
