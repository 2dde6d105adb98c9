"""
text_analyzer/api/error_handlers.py

Exception handlers that render every failure as `{error, timestamp[, stack]}`.

Classified errors keep their status (400 for validation, 500 otherwise) and
their stable message. Unknown routes and unsupported methods answer 404
"Route not found". Anything unexpected becomes a generic 500. Stack traces
are only included when `config["api"]["environment"]` is "development".
"""

import traceback
from datetime import datetime, timezone

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from text_analyzer.api.schemas import ErrorResponse
from text_analyzer.config import config
from text_analyzer.models.errors import ClassifiedError
from text_analyzer.utils.logger import get_logger

logger = get_logger()

ROUTE_NOT_FOUND_MESSAGE = "Route not found"
INTERNAL_ERROR_MESSAGE = "Internal Server Error"


def utc_timestamp() -> str:
    """Current UTC time as an ISO-8601 string with millisecond precision."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def is_development() -> bool:
    return config.get("api", {}).get("environment", "") == "development"


def _format_stack(exc: BaseException) -> str:
    return "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))


def error_response(status_code: int, message: str, exc: BaseException) -> JSONResponse:
    """
    Logs the failure and builds the JSON error body.

    Every error is logged with its status; 5xx errors also log the traceback.
    """
    logger.error(f"Error {status_code}: {message}")
    if status_code >= 500:
        logger.error(_format_stack(exc))

    body = ErrorResponse(
        error=message,
        timestamp=utc_timestamp(),
        stack=_format_stack(exc) if is_development() else None,
    )
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
    )


async def classified_error_handler(request: Request, exc: ClassifiedError) -> JSONResponse:
    return error_response(exc.status_code, exc.message, exc)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # A known path with the wrong method counts as an unknown route.
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"error": ROUTE_NOT_FOUND_MESSAGE},
        )
    return error_response(exc.status_code, str(exc.detail), exc)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled exception on {request.method} {request.url.path}: "
        f"{type(exc).__name__}: {exc}"
    )
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE, exc)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ClassifiedError, classified_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
