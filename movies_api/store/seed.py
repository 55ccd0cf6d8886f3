"""
Seed dataset loading.
"""

import json
import logging
from pathlib import Path
from typing import List

from pydantic import ValidationError

from movies_api.api.models.movie import Movie

logger = logging.getLogger(__name__)


def load_seed_movies(path: str | Path) -> List[Movie]:
    """
    Load and validate the seed movies from a JSON file.

    Args:
        path: JSON file holding an array of movie objects, each with an ``id``

    Returns:
        List of Movie records in file order

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not a JSON array, a record is invalid,
            or two records share an id
    """
    path = Path(path)
    with path.open(encoding="utf-8") as f:
        raw = json.load(f)
    if not isinstance(raw, list):
        raise ValueError(f"Seed file {path} must contain a JSON array")

    movies: List[Movie] = []
    seen_ids = set()
    for position, record in enumerate(raw):
        try:
            movie = Movie.model_validate(record)
        except ValidationError as e:
            raise ValueError(f"Invalid seed movie at index {position} in {path}: {e}") from e
        if movie.id in seen_ids:
            raise ValueError(f"Duplicate seed movie id {movie.id} in {path}")
        seen_ids.add(movie.id)
        movies.append(movie)

    logger.info("Loaded %d seed movies from %s", len(movies), path)
    return movies
