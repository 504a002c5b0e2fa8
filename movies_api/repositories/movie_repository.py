from typing import List, Dict, Optional, Iterable


class MovieRepository:
    """
    In-memory movie store. Owns its list and mutates it in place.

    Methods are async so a persistent store can stand in without touching
    the service layer; none of them await, so a call never yields to
    another request mid-mutation.
    """
    def __init__(self, movies: Optional[Iterable[Dict]] = None):
        self._movies: List[Dict] = [dict(movie) for movie in movies or []]

    def _index_of(self, movie_id: str) -> int:
        for index, movie in enumerate(self._movies):
            if movie.get("id") == movie_id:
                return index
        return -1

    async def list_all(self) -> List[Dict]:
        return list(self._movies)

    async def list_by_genre(self, genre: str) -> List[Dict]:
        wanted = genre.lower()
        return [
            movie for movie in self._movies
            if any(isinstance(g, str) and g.lower() == wanted for g in movie.get("genre") or [])
        ]

    async def find_by_id(self, movie_id: str) -> Optional[Dict]:
        index = self._index_of(movie_id)
        return self._movies[index] if index != -1 else None

    async def insert(self, movie: Dict) -> Dict:
        self._movies.append(movie)
        return movie

    async def update(self, movie_id: str, changes: Dict) -> Optional[Dict]:
        index = self._index_of(movie_id)
        if index == -1:
            return None
        # id is immutable
        changes = {k: v for k, v in changes.items() if k != "id"}
        updated = {**self._movies[index], **changes}
        self._movies[index] = updated
        return updated

    async def delete(self, movie_id: str) -> bool:
        index = self._index_of(movie_id)
        if index == -1:
            return False
        del self._movies[index]
        return True

    async def count(self) -> int:
        return len(self._movies)
