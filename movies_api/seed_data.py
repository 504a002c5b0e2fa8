import json
import logging
from pathlib import Path
from typing import Dict, List, Union

from pydantic import ValidationError

from .exceptions import SeedDataError
from .schemas.movie import Movie

logger = logging.getLogger(__name__)


def load_movies(path: Union[str, Path]) -> List[Dict]:
    """
    Read the initial movie collection from a JSON array on disk.

    Each record is checked against the Movie model and ids must be unique.
    Any problem is fatal: the service should not start on a broken catalog.
    """
    path = Path(path)
    try:
        with path.open(encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise SeedDataError(f"Cannot read movies from {path}: {e}") from e

    if not isinstance(raw, list):
        raise SeedDataError(f"{path} must contain a JSON array of movies")

    movies = []
    seen_ids = set()
    for position, record in enumerate(raw):
        try:
            movie = Movie.model_validate(record)
        except ValidationError as e:
            raise SeedDataError(f"Invalid movie at index {position} in {path}: {e}") from e
        if movie.id in seen_ids:
            raise SeedDataError(f"Duplicate movie id {movie.id!r} in {path}")
        seen_ids.add(movie.id)
        movies.append(movie.model_dump(mode="json"))

    logger.info("Loaded seed movies", extra={"count": len(movies), "source": str(path)})
    return movies
