"""
API error types and the exception handlers that turn them into responses.
"""

import logging
from typing import Any, Iterable

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Movie not found"

# Reason templates keyed by pydantic error type; formatted with the error ctx.
_MESSAGES = {
    "missing": "{field} is required",
    "string_type": "{field} must be a string",
    "string_too_short": "{field} must not be empty",
    "int_type": "{field} must be an integer",
    "greater_than": "{field} must be greater than {gt}",
    "list_type": "{field} must be an array",
    "too_short": "{field} must not be empty",
    "literal_error": "{field} must be one of {expected}",
    "model_type": "{field} must be a JSON object",
    "model_attributes_type": "{field} must be a JSON object",
    "json_invalid": "{field} must be valid JSON",
}


class MovieValidationError(ValueError):
    """A candidate movie failed validation.

    ``errors`` maps each offending field to its list of human-readable reasons.
    """

    def __init__(self, errors: dict[str, list[str]]):
        super().__init__("; ".join(m for reasons in errors.values() for m in reasons))
        self.errors = errors


class MovieNotFoundError(LookupError):
    """No movie with the requested id.

    ``status_code`` is carried on the error because PATCH reports a missing
    movie as 400 while GET and DELETE report 404.
    """

    def __init__(self, movie_id: str, status_code: int = 404):
        super().__init__(f"Movie {movie_id} not found")
        self.movie_id = movie_id
        self.status_code = status_code


def _field_label(loc: tuple) -> tuple[str, str]:
    """Return (field key, display label) for a pydantic error location."""
    if not loc or isinstance(loc[0], int):
        return "body", "body"
    field = str(loc[0])
    label = field + "".join(f"[{part}]" if isinstance(part, int) else f".{part}" for part in loc[1:])
    return field, label


def format_errors(errors: Iterable[dict[str, Any]]) -> dict[str, list[str]]:
    """Group pydantic error dicts into ``{field: [reason, ...]}``."""
    grouped: dict[str, list[str]] = {}
    for err in errors:
        field, label = _field_label(tuple(err.get("loc", ())))
        ctx = err.get("ctx") or {}
        if err["type"] == "value_error" and "error" in ctx:
            reason = str(ctx["error"])
        elif err["type"] in _MESSAGES:
            reason = _MESSAGES[err["type"]].format(field=label, **ctx)
        else:
            reason = f"{label}: {err['msg']}"
        grouped.setdefault(field, []).append(reason)
    return grouped


async def movie_validation_error_handler(request: Request, exc: MovieValidationError) -> JSONResponse:
    logger.info("%s %s rejected: %s", request.method, request.url.path, exc.errors)
    return JSONResponse(status_code=400, content={"error": exc.errors})


async def movie_not_found_handler(request: Request, exc: MovieNotFoundError) -> JSONResponse:
    logger.info("%s %s: movie %s not found", request.method, request.url.path, exc.movie_id)
    return JSONResponse(status_code=exc.status_code, content={"message": NOT_FOUND_MESSAGE})


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report unparseable request bodies as 400 in the same shape as schema errors."""
    errors = []
    for err in exc.errors():
        loc = tuple(err.get("loc", ()))
        if loc and loc[0] == "body":
            loc = loc[1:]
        errors.append({**err, "loc": loc})
    grouped = format_errors(errors)
    logger.info("%s %s rejected: %s", request.method, request.url.path, grouped)
    return JSONResponse(status_code=400, content={"error": grouped})


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the movie API exception handlers to ``app``."""
    app.add_exception_handler(MovieValidationError, movie_validation_error_handler)
    app.add_exception_handler(MovieNotFoundError, movie_not_found_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
