"""
Exception Handlers for the FastAPI Application.

Storage failures, malformed request bodies and unexpected exceptions all
collapse into the same plain-text ``500 Server error``. The underlying message
is logged and never sent to the caller. The only exception is a body that is
not valid JSON, answered with a plain-text 400.
"""

from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError

from rfid_db.core.database.errors import classify_storage_error
from rfid_db.core.logging_config import get_logger
from rfid_db.server.core import constant

logger = get_logger(__name__)


def _server_error(headers: Optional[dict[str, str]] = None) -> PlainTextResponse:
    return PlainTextResponse(
        constant.SERVER_ERROR_MESSAGE,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        headers=headers,
    )


async def storage_exception_handler(request: Request, exc: SQLAlchemyError) -> PlainTextResponse:
    """
    Handle any error raised while talking to the database.

    Constraint violations, lost connections and failed queries are not
    distinguished in the response. The error kind is logged, and is exposed in
    the ``X-Error-Kind`` header only when the application enables it.

    Args:
        request: The HTTP request being served
        exc: The storage exception

    Returns:
        Generic plain-text 500 response
    """
    kind = classify_storage_error(exc)
    logger.error(
        f"Storage error ({kind.value}) in {request.method} {request.url.path}: {exc}",
        extra={
            "method": request.method,
            "path": request.url.path,
            "error_kind": kind.value,
            "error_type": type(exc).__name__,
        },
    )

    headers = None
    if getattr(request.app.state, "expose_error_kind", False):
        headers = {constant.ERROR_KIND_HEADER: kind.value}
    return _server_error(headers)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> PlainTextResponse:
    """
    Handle request bodies that could not be parsed into the endpoint's model.

    A body that is not JSON at all is a client error. Anything else (a field of
    the wrong type, a non-object body) is malformed input and gets the generic
    server error, the same outcome as when the storage layer rejects it.
    """
    errors = exc.errors()
    logger.error(f"Invalid request body for {request.method} {request.url.path}: {errors}")

    if any(error.get("type") == "json_invalid" for error in errors):
        return PlainTextResponse("Bad Request", status_code=status.HTTP_400_BAD_REQUEST)
    return _server_error()


async def global_exception_handler(request: Request, exc: Exception) -> PlainTextResponse:
    """
    Global exception handler for anything the other handlers did not catch.

    Args:
        request: The HTTP request that caused the exception
        exc: The exception that was raised

    Returns:
        Generic plain-text 500 response
    """
    logger.error(
        f"Unhandled exception in {request.method} {request.url.path}: {exc}",
        exc_info=True,
        extra={
            "method": request.method,
            "path": request.url.path,
            "client": request.client.host if request.client else "unknown",
            "error_type": type(exc).__name__,
        },
    )
    return _server_error()


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI application.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(SQLAlchemyError, storage_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
    logger.debug("Exception handlers registered successfully")
