"""
handlers/errors.py
------------------
Maps database errors and request validation failures to JSON error
responses of the form ``{"error": "<message>"}``.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from db.errors import Conflict, NotFound, StoreError, Unavailable, Unknown
from utils.logger import get_logger

logger = get_logger(__name__)

STATUS_BY_ERROR = {
    NotFound: 404,
    Conflict: 409,
    Unavailable: 503,
    Unknown: 500,
}


def error_body(message: str) -> dict:
    return {"error": message}


def status_for(exc: StoreError) -> int:
    """HTTP status for a store error; unlisted subtypes fall back to 500."""
    for error_type, status in STATUS_BY_ERROR.items():
        if isinstance(exc, error_type):
            return status
    return 500


def describe_validation_error(exc: RequestValidationError) -> str:
    """Render the first validation problem as ``field: reason``."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = [str(part) for part in first.get("loc", ()) if part not in ("body", "path", "query")]
    reason = first.get("msg", "invalid value")
    return f"{'.'.join(location)}: {reason}" if location else reason


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    status = status_for(exc)
    if status >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=status, content=error_body(exc.message))


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = describe_validation_error(exc)
    logger.warning(f"Rejected {request.method} {request.url.path}: {message}")
    return JSONResponse(status_code=400, content=error_body(message))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"{request.method} {request.url.path} raised {exc.__class__.__name__}")
    return JSONResponse(status_code=500, content=error_body(str(exc) or exc.__class__.__name__))


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the JSON error handlers on the application."""
    app.add_exception_handler(StoreError, store_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
