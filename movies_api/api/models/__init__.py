"""
Pydantic schemas for API request/response validation.
"""

from movies_api.api.models.movie import (
    GENRES,
    Message,
    Movie,
    MovieBase,
    MovieCreate,
    MovieCreated,
    MovieUpdate,
)

__all__ = [
    "GENRES",
    "Message",
    "Movie",
    "MovieBase",
    "MovieCreate",
    "MovieCreated",
    "MovieUpdate",
]
