"""
Central settings for the quiz authoring service.

Values come from the environment (a local `.env` is loaded first); every
field has a default that works against a MongoDB on localhost.
"""
from __future__ import annotations
import logging
import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()  # loads MONGO_URI / DB_NAME from .env for local dev


class Settings(BaseModel):
    service_name: str = "quiz-authoring-service"
    version: str = "0.1.0"

    # Document store
    mongo_uri: str = Field(default_factory=lambda: os.getenv("MONGO_URI", "mongodb://localhost:27017"))
    db_name: str = Field(default_factory=lambda: os.getenv("DB_NAME", "Synap-Tech-Test"))
    server_selection_timeout_ms: int = Field(default_factory=lambda: int(os.getenv("MONGO_TIMEOUT_MS", "5000")))

    # One collection per resource type
    questions_collection: str = "questions"
    quizzes_collection: str = "quizzes"

    # HTTP listener
    host: str = Field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = Field(default_factory=lambda: int(os.getenv("PORT", "3000")))

    log_level: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))


def configure_logging(level: str = "INFO") -> None:
    """Install a single stream handler on the root logger (idempotent)."""
    root = logging.getLogger()
    root.setLevel(level.upper())
    if any(getattr(h, "_quiz_service", False) for h in root.handlers):
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    handler._quiz_service = True  # type: ignore[attr-defined]
    root.addHandler(handler)


settings = Settings()
