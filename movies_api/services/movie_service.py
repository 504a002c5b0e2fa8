import logging
import uuid
from typing import Any, Dict, List, Optional

from ..exceptions import MovieNotFoundError
from ..repositories.movie_repository import MovieRepository
from ..validation import validate_movie, validate_partial_movie

logger = logging.getLogger(__name__)


class MovieService:
    def __init__(self, movie_repo: MovieRepository):
        self.movie_repo = movie_repo

    async def list_movies(self, genre: Optional[str] = None) -> List[Dict]:
        if genre:
            return await self.movie_repo.list_by_genre(genre)
        return await self.movie_repo.list_all()

    async def get_movie(self, movie_id: str) -> Dict:
        movie = await self.movie_repo.find_by_id(movie_id)
        if movie is None:
            raise MovieNotFoundError(movie_id)
        return movie

    async def create_movie(self, payload: Any) -> Dict:
        data = validate_movie(payload)

        movie_id = str(uuid.uuid4())
        while await self.movie_repo.find_by_id(movie_id) is not None:
            movie_id = str(uuid.uuid4())

        movie = await self.movie_repo.insert({"id": movie_id, **data})
        logger.info("Movie created", extra={"movie_id": movie_id, "title": movie["title"]})
        return movie

    async def update_movie(self, movie_id: str, payload: Any) -> Dict:
        """
        Shallow-merge a partial payload over an existing movie.

        The payload is validated before the lookup, so a bad body on an
        unknown id is reported as a validation error rather than a 404.
        """
        changes = validate_partial_movie(payload)

        movie = await self.movie_repo.update(movie_id, changes)
        if movie is None:
            raise MovieNotFoundError(movie_id)

        logger.info("Movie updated", extra={"movie_id": movie_id, "fields": sorted(changes)})
        return movie

    async def delete_movie(self, movie_id: str) -> Dict[str, str]:
        if not await self.movie_repo.delete(movie_id):
            raise MovieNotFoundError(movie_id, message="Movie can't be deleted", body_key="error")

        logger.info("Movie deleted", extra={"movie_id": movie_id})
        return {"message": "Movie was deleted"}
