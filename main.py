"""
App entrypoint.

- create_app() wires settings, the document store and the routers
- the store is opened/closed by the lifespan and lives on app.state
- `python main.py` serves on settings.host:settings.port
"""
from __future__ import annotations
import logging
from contextlib import asynccontextmanager
from typing import Any, Optional

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

import routers
from config import Settings, configure_logging, settings as default_settings
from db.client import MongoStore
from errors import ApiError, StoreError

logger = logging.getLogger(__name__)


def _errors(status_code: int, detail: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"errors": [{"detail": detail}]})


async def _api_error(request: Request, exc: ApiError) -> JSONResponse:
    return _errors(exc.status_code, exc.detail)


async def _invalid_body(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Only reachable for bodies that are not parseable JSON.
    return _errors(400, "Invalid request body")


async def _store_error(request: Request, exc: StoreError) -> Response:
    route = request.scope.get("route")
    handler = getattr(route, "name", request.url.path)
    logger.error("%s error: %s", handler, exc, exc_info=exc)
    return Response(status_code=500)


def create_app(settings: Optional[Settings] = None, store: Optional[Any] = None) -> FastAPI:
    """
    Build the service. `store` must provide connect()/close()/collection(name);
    when omitted a MongoStore is created from `settings`.
    """
    settings = settings or default_settings
    store = store if store is not None else MongoStore(settings)
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await store.connect()
        app.state.store = store
        logger.info("Server is running on port %d", settings.port)
        try:
            yield
        finally:
            await store.close()

    app = FastAPI(
        title=settings.service_name,
        version=settings.version,
        description="CRUD over questions and quizzes backed by MongoDB",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_exception_handler(ApiError, _api_error)
    app.add_exception_handler(RequestValidationError, _invalid_body)
    app.add_exception_handler(StoreError, _store_error)

    app.include_router(routers.router)
    app.include_router(routers.questions_router)
    app.include_router(routers.quizzes_router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=default_settings.host, port=default_settings.port)
