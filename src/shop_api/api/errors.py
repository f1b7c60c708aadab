"""Centralized error handlers for FastAPI.

Forwarded handler failures end up here. Domain errors map to client
status codes, storage outages to 503, everything else to 500. No stack
traces or internal details are exposed to clients.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from redis.exceptions import ConnectionError as RedisConnectionError

from shop_api.dto import ErrorResponse
from shop_api.errors import (
    InvalidPayloadError,
    InvalidQueryError,
    MalformedBodyError,
    ResourceNotFoundError,
    ShopError,
)

logger = logging.getLogger(__name__)


def error_response(status_code: int, error: str, detail: str | None = None) -> JSONResponse:
    """Build a consistent JSON error response."""
    body = ErrorResponse(error=error, detail=detail)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(InvalidQueryError)
    async def handle_invalid_query(_request: Request, exc: InvalidQueryError) -> JSONResponse:
        logger.warning("Invalid query parameter: %s", exc.field)
        return error_response(status.HTTP_400_BAD_REQUEST, "Invalid query", exc.message)

    @app.exception_handler(InvalidPayloadError)
    async def handle_invalid_payload(_request: Request, exc: InvalidPayloadError) -> JSONResponse:
        logger.warning("Invalid payload: %s", exc.message)
        return error_response(status.HTTP_400_BAD_REQUEST, "Invalid payload", exc.message)

    @app.exception_handler(MalformedBodyError)
    async def handle_malformed_body(_request: Request, exc: MalformedBodyError) -> JSONResponse:
        logger.warning("Malformed request body")
        return error_response(status.HTTP_400_BAD_REQUEST, "Malformed body", exc.message)

    @app.exception_handler(ResourceNotFoundError)
    async def handle_resource_not_found(
        _request: Request, exc: ResourceNotFoundError
    ) -> JSONResponse:
        logger.warning("%s not found: %s", exc.resource, exc.resource_id)
        return error_response(status.HTTP_404_NOT_FOUND, "Not Found", exc.message)

    @app.exception_handler(ShopError)
    async def handle_shop_error(_request: Request, exc: ShopError) -> JSONResponse:
        """Catch-all for domain errors without a dedicated mapping."""
        logger.error("Unhandled shop error: %s", exc.message)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")

    @app.exception_handler(RedisConnectionError)
    async def handle_storage_unavailable(
        _request: Request, exc: RedisConnectionError
    ) -> JSONResponse:
        logger.error("Storage unavailable: %s", exc)
        return error_response(status.HTTP_503_SERVICE_UNAVAILABLE, "Storage unavailable")

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")
