"""
In-memory record store for movies.
"""

from movies_api.store.movie_store import MovieStore
from movies_api.store.seed import load_seed_movies

__all__ = ["MovieStore", "load_seed_movies"]
