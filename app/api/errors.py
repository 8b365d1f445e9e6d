"""
Exception handlers that turn every fault into a status code plus a
``{"message": ...}`` body.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from app.core.exceptions import ServiceError

logger = logging.getLogger(__name__)

INTERNAL_ERROR = "Internal server error"


def _message(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


def _describe_validation_error(exc: RequestValidationError) -> str:
    """Build a short message from the first pydantic error."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    loc = [str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path")]
    field = ".".join(loc)
    if first.get("type") == "missing":
        return f"{field} is required" if field else "Request body is required"
    return f"{field}: {first.get('msg')}" if field else str(first.get("msg"))


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("Error in %s %s: %s", request.method, request.url.path, exc.message)
    return _message(exc.status_code, exc.message)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _message(400, _describe_validation_error(exc))


async def store_error_handler(request: Request, exc: PyMongoError) -> JSONResponse:
    logger.error("Error in %s %s: %s", request.method, request.url.path, exc)
    return _message(500, INTERNAL_ERROR)


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Error in %s %s: %s", request.method, request.url.path, exc, exc_info=exc)
    return _message(500, INTERNAL_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all handlers to the application."""
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(PyMongoError, store_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
