"""
Validation of candidate movie payloads.

Both functions are pure: they never mutate ``candidate`` and return a new dict
holding only the fields declared on the schema.
"""

from typing import Any

from pydantic import ValidationError

from movies_api.api.errors import MovieValidationError, format_errors
from movies_api.api.models.movie import MovieCreate, MovieUpdate


def validate_movie(candidate: Any) -> dict[str, Any]:
    """
    Validate a full movie record.

    Args:
        candidate: Decoded JSON body

    Returns:
        Normalized fields, with ``rate`` defaulted to 0 when absent

    Raises:
        MovieValidationError: With per-field reasons if any rule fails
    """
    try:
        movie = MovieCreate.model_validate(candidate)
    except ValidationError as e:
        raise MovieValidationError(format_errors(e.errors())) from e
    return movie.model_dump()


def validate_partial_movie(candidate: Any) -> dict[str, Any]:
    """
    Validate a partial movie record for an update.

    Only the fields present in ``candidate`` are checked and returned; no
    defaults are injected.

    Raises:
        MovieValidationError: With per-field reasons if a present field is invalid
    """
    try:
        update = MovieUpdate.model_validate(candidate)
    except ValidationError as e:
        raise MovieValidationError(format_errors(e.errors())) from e
    return update.model_dump(exclude_unset=True)
