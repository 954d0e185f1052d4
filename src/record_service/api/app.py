"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import Body, FastAPI, Request, Response
from fastapi.responses import JSONResponse

from record_service.api.models import UserPayload
from record_service.app_logging import configure_logging
from record_service.containers import AppContainer
from record_service.domain.models import UserRecord
from record_service.services.users import StoreOperationFailed

GENERIC_ERROR_MESSAGE = "An error occurred"


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        await app.state.container.prepare_resources()
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(StoreOperationFailed)
    async def store_failure_handler(
        request: Request, exc: StoreOperationFailed
    ) -> JSONResponse:
        logger.error(
            "%s %s failed: %s", request.method, request.url.path, exc, exc_info=exc
        )
        return JSONResponse(status_code=500, content={"error": GENERIC_ERROR_MESSAGE})

    # Store calls block; these handlers run in the threadpool.
    @app.post("/create")
    def create_user(request: Request, raw_body: Any = Body(None)) -> dict[str, object]:
        """Insert a user and return the stored row."""
        body = UserPayload.from_body(raw_body)
        state_container: AppContainer = request.app.state.container
        record = state_container.user_service.create_user(body.name, body.email)
        return record.to_dict()

    @app.get("/read")
    def read_users(request: Request) -> list[dict[str, object]]:
        """Return all users."""
        state_container: AppContainer = request.app.state.container
        return [record.to_dict() for record in state_container.user_service.list_users()]

    @app.put("/update/{record_id}", response_model=None)
    def update_user(
        record_id: str, request: Request, raw_body: Any = Body(None)
    ) -> dict[str, object] | Response:
        """Overwrite a user's name and email."""
        body = UserPayload.from_body(raw_body)
        state_container: AppContainer = request.app.state.container
        record = state_container.user_service.update_user(
            record_id, body.name, body.email
        )
        return _record_or_empty(record)

    @app.delete("/delete/{record_id}", response_model=None)
    def delete_user(record_id: str, request: Request) -> dict[str, object] | Response:
        """Delete a user and return the removed row."""
        state_container: AppContainer = request.app.state.container
        return _record_or_empty(state_container.user_service.delete_user(record_id))

    return app


def _record_or_empty(record: UserRecord | None) -> dict[str, object] | Response:
    # No matching row: 200 with an empty body rather than a 404.
    if record is None:
        return Response(status_code=200, media_type="application/json")
    return record.to_dict()
