"""
Movie API endpoints.
"""

from typing import Any, List

from fastapi import APIRouter, Body, Depends, Query, Response

from movies_api.api.dependencies import get_store
from movies_api.api.errors import MovieNotFoundError
from movies_api.api.models.movie import Message, Movie, MovieCreated
from movies_api.api.validation import validate_movie, validate_partial_movie
from movies_api.store.movie_store import MovieStore

router = APIRouter(prefix="/movies", tags=["movies"])


@router.get("", response_model=List[Movie])
def list_movies(
    genre: str | None = Query(None),
    store: MovieStore = Depends(get_store),
):
    """List all movies, optionally filtered by genre (case-insensitive)."""
    return store.list_movies(genre=genre)


@router.get("/{movie_id}", response_model=Movie)
def get_movie(movie_id: str, store: MovieStore = Depends(get_store)):
    """Get movie details by ID."""
    movie = store.get_movie(movie_id)
    if movie is None:
        raise MovieNotFoundError(movie_id)
    return movie


@router.post("", response_model=MovieCreated, status_code=201)
def create_movie(payload: Any = Body(None), store: MovieStore = Depends(get_store)):
    """Validate a full movie and add it to the store."""
    fields = validate_movie(payload)
    movie = store.create_movie(fields)
    return MovieCreated(message="Movie created!", new_movie=movie)


@router.patch("/{movie_id}", response_model=Movie)
def update_movie(
    movie_id: str,
    payload: Any = Body(None),
    store: MovieStore = Depends(get_store),
):
    """Apply a partial update; a missing movie is reported as 400."""
    fields = validate_partial_movie(payload)
    movie = store.update_movie(movie_id, fields)
    if movie is None:
        raise MovieNotFoundError(movie_id, status_code=400)
    return movie


@router.delete("/{movie_id}", response_model=Message)
def delete_movie(movie_id: str, store: MovieStore = Depends(get_store)):
    """Delete a movie by ID."""
    if not store.delete_movie(movie_id):
        raise MovieNotFoundError(movie_id)
    return Message(message="Movie deleted")


@router.options("")
def preflight_collection():
    """Answer CORS pre-flight for /movies; headers are added by the CORS gate."""
    return Response(status_code=204)


@router.options("/{movie_id}")
def preflight_movie(movie_id: str):
    """Answer CORS pre-flight for a single movie."""
    return Response(status_code=204)
