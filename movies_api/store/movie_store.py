"""
In-memory movie store.

Records are kept in insertion order (seed order, then creation order) and
looked up by id. Every operation holds ``_lock`` since FastAPI runs sync route
handlers on a thread pool.
"""

import logging
import threading
from pathlib import Path
from typing import Any, Iterable, List, Optional
from uuid import uuid4

from movies_api.api.models.movie import Movie
from movies_api.store.seed import load_seed_movies

logger = logging.getLogger(__name__)


class MovieStore:
    """Ordered, process-lifetime collection of movies."""

    def __init__(self, movies: Optional[Iterable[Movie]] = None):
        self._movies: List[Movie] = list(movies or [])
        self._lock = threading.Lock()

    @classmethod
    def from_seed(cls, path: str | Path) -> "MovieStore":
        """Build a store holding the records of a seed dataset file."""
        return cls(load_seed_movies(path))

    def __len__(self) -> int:
        return self.count()

    def count(self) -> int:
        with self._lock:
            return len(self._movies)

    def _index_of(self, movie_id: str) -> int:
        for index, movie in enumerate(self._movies):
            if movie.id == movie_id:
                return index
        return -1

    def list_movies(self, genre: Optional[str] = None) -> List[Movie]:
        """
        List movies, optionally filtered by genre.

        Args:
            genre: Genre name matched case-insensitively against each movie's genres

        Returns:
            Matching movies in insertion order
        """
        with self._lock:
            if not genre:
                return list(self._movies)
            wanted = genre.lower()
            return [m for m in self._movies if any(g.lower() == wanted for g in m.genre)]

    def get_movie(self, movie_id: str) -> Optional[Movie]:
        """Return the movie with ``movie_id`` or None."""
        with self._lock:
            index = self._index_of(movie_id)
            return self._movies[index] if index >= 0 else None

    def create_movie(self, fields: dict[str, Any]) -> Movie:
        """
        Append a new movie built from validated fields.

        Args:
            fields: Output of ``validate_movie``; an ``id`` key is ignored

        Returns:
            The stored movie with its generated id
        """
        data = {k: v for k, v in fields.items() if k != "id"}
        movie = Movie(id=str(uuid4()), **data)
        with self._lock:
            self._movies.append(movie)
        logger.info("Created movie %s (%s)", movie.id, movie.title)
        return movie

    def update_movie(self, movie_id: str, fields: dict[str, Any]) -> Optional[Movie]:
        """
        Merge validated partial fields onto an existing movie.

        Fields absent from ``fields`` keep their current value and the id never
        changes.

        Returns:
            Updated movie, or None if not found
        """
        changes = {k: v for k, v in fields.items() if k != "id"}
        with self._lock:
            index = self._index_of(movie_id)
            if index < 0:
                return None
            current = self._movies[index]
            updated = Movie.model_validate({**current.model_dump(), **changes})
            self._movies[index] = updated
        logger.info("Updated movie %s fields=%s", movie_id, sorted(changes))
        return updated

    def delete_movie(self, movie_id: str) -> bool:
        """
        Remove a movie.

        Returns:
            True if the movie was removed, False if not found
        """
        with self._lock:
            index = self._index_of(movie_id)
            if index < 0:
                return False
            del self._movies[index]
        logger.info("Deleted movie %s", movie_id)
        return True
