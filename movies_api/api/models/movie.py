"""
Pydantic schemas for Movie API.

Each field rule is declared once as an annotated type below and used by both
the full record (``MovieBase`` and its subclasses) and the partial record used
for PATCH (``MovieUpdate``).
"""

import math
from typing import Annotated, Literal, Optional, Union, get_args

from pydantic import (
    AfterValidator,
    AnyUrl,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    StrictFloat,
    StrictInt,
    StrictStr,
    TypeAdapter,
    conint,
    conlist,
    constr,
    field_validator,
)

Genre = Literal[
    "Action",
    "Adventure",
    "Comedy",
    "Drama",
    "Fantasy",
    "Horror",
    "Thriller",
    "Sci-Fi",
    "Crime",
]

GENRES = get_args(Genre)

_url_adapter = TypeAdapter(AnyUrl)


def check_poster_url(value: str) -> str:
    """Reject strings that do not parse as an absolute URL; keep the original text."""
    try:
        _url_adapter.validate_python(value)
    except ValueError:
        raise ValueError("poster must be a valid URL") from None
    return value


def integral_float_to_int(value):
    """JSON has one number type, so ``1979.0`` counts as the integer 1979."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def check_rate(value):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError("rate must be a number")
    if not math.isfinite(value):
        raise ValueError("rate must be a finite number")
    if not 0 <= value <= 10:
        raise ValueError("rate must be between 0 and 10")
    return value


Title = constr(strict=True, min_length=1)
PositiveInt = Annotated[conint(strict=True, gt=0), BeforeValidator(integral_float_to_int)]
# Ints stay ints so a rate of 7 is echoed back as 7, not 7.0.
Rate = Annotated[Union[StrictInt, StrictFloat], BeforeValidator(check_rate)]
PosterUrl = Annotated[StrictStr, AfterValidator(check_poster_url)]
Genres = conlist(Genre, min_length=1)


class MovieBase(BaseModel):
    """Field rules common to every full movie schema."""

    title: Title
    year: PositiveInt
    director: StrictStr
    duration: PositiveInt
    rate: Rate = 0
    poster: PosterUrl
    genre: Genres


class MovieCreate(MovieBase):
    """Request body for creating a movie. Unknown keys, ``id`` included, are dropped."""


class MovieUpdate(BaseModel):
    """Request body for updating a movie (all fields optional).

    Absent fields are left unchanged; an explicit ``null`` is rejected so an
    update can never clear a field.
    """

    title: Optional[Title] = None
    year: Optional[PositiveInt] = None
    director: Optional[StrictStr] = None
    duration: Optional[PositiveInt] = None
    rate: Optional[Rate] = None
    poster: Optional[PosterUrl] = None
    genre: Optional[Genres] = None

    @field_validator("*", mode="before")
    @classmethod
    def reject_null(cls, value, info):
        if value is None:
            raise ValueError(f"{info.field_name} must not be null")
        return value


class Movie(MovieBase):
    """A movie record as held by the store and returned by the API."""

    id: str = Field(..., min_length=1, strict=True)


class MovieCreated(BaseModel):
    """Response body for a created movie."""

    model_config = ConfigDict(populate_by_name=True)

    message: str
    new_movie: Movie = Field(..., alias="newMovie")


class Message(BaseModel):
    """Plain ``{"message": ...}`` response body."""

    message: str
