"""Custom validation error handling for FastAPI."""

from logging import getLogger
from typing import cast

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_400_BAD_REQUEST

from app.configs import file_logger
from app.errors.base import BaseAppError, create_exception_handler
from app.utils.helpers import host

logger = file_logger(getLogger(__name__))


class ValidationError(BaseAppError):
    """Malformed or missing input, including a missing acting user on mutating operations."""

    def __init__(
        self,
        detail: str = "Validation Error",
        errors: list[dict] | None = None,
    ) -> None:
        super().__init__(detail=detail, status_code=HTTP_400_BAD_REQUEST)
        self.errors = errors or []


def format_errors(raw_errors: list[dict], *, skip_body: bool = True) -> list[dict]:
    """
    Flatten pydantic error dicts into a JSON-safe list.

    Args:
        raw_errors: Errors as returned by ``.errors()``.
        skip_body: Drop the leading ``body`` location segment.

    Returns:
        list[dict]: Errors with ``field``, ``message`` and ``type`` keys.
    """
    formatted_errors = []
    for error in raw_errors:
        loc = list(error.get("loc", []))
        if skip_body and loc[:1] == ["body"]:
            loc = loc[1:]
        formatted_error = {
            "field": ".".join(str(part) for part in loc),
            "message": error.get("msg", "Invalid value"),
            "type": error.get("type", "validation_error"),
        }
        # Convert non-serializable values (like ValueError) to strings
        if "ctx" in error:
            formatted_error["context"] = {
                key: str(value) if isinstance(value, Exception) else value
                for key, value in error["ctx"].items()
            }
        formatted_errors.append(formatted_error)
    return formatted_errors


def summarize_errors(formatted_errors: list[dict]) -> str:
    """Join formatted errors into a single human readable detail string."""
    if not formatted_errors:
        return "Validation failed"
    return "; ".join(
        f"{error['field']}: {error['message']}" if error["field"] else error["message"]
        for error in formatted_errors
    )


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> ORJSONResponse:
    """
    Handle request validation errors with a 400 response.

    Args:
        request: The incoming request.
        exc: The RequestValidationError exception.

    Returns:
        ORJSONResponse with formatted validation errors.
    """
    exec_error = cast(RequestValidationError, exc)
    formatted_errors = format_errors(list(exec_error.errors()))

    logger.warning(
        f"Validation error for ip: {host(request)} at endpoint {request.url.path}: {formatted_errors}",
    )

    return ORJSONResponse(
        status_code=HTTP_400_BAD_REQUEST,
        content={
            "detail": summarize_errors(formatted_errors),
            "errors": formatted_errors,
        },
    )


app_validation_exception_handler = create_exception_handler(logger)
