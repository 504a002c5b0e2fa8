from fastapi import Depends

from .config import settings
from .repositories.movie_repository import MovieRepository
from .seed_data import load_movies
from .services.movie_service import MovieService

# Global state, populated once at startup
class AppState:
    movie_repository: MovieRepository = None

state = AppState()

def init_resources():
    """Load the movie catalog into a fresh in-memory repository"""
    state.movie_repository = MovieRepository(load_movies(settings.MOVIES_FILE))

def close_resources():
    state.movie_repository = None

# Dependencies
async def get_movie_repository() -> MovieRepository:
    return state.movie_repository

async def get_movie_service(movie_repo: MovieRepository = Depends(get_movie_repository)) -> MovieService:
    return MovieService(movie_repo)
