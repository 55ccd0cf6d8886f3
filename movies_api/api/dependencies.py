"""
FastAPI dependency injection for the movie store.
"""

from fastapi import Request

from movies_api.store.movie_store import MovieStore


def get_store(request: Request) -> MovieStore:
    """Return the store owned by the running app, for FastAPI Depends()."""
    return request.app.state.store
