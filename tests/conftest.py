import copy

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from movies_api.main import app
from movies_api.dependencies import get_movie_repository
from movies_api.repositories.movie_repository import MovieRepository

SAMPLE_MOVIES = [
    {
        "id": "dcdd0fad-a94c-4810-8acc-5f108d3b18c3",
        "title": "The Shawshank Redemption",
        "year": 1994,
        "director": "Frank Darabont",
        "duration": 142,
        "poster": "https://example.com/shawshank.jpg",
        "genre": ["Drama"],
        "rating": 9.3
    },
    {
        "id": "c8a7d63f-3b04-44d3-9d95-8782fd7dcfaf",
        "title": "The Dark Knight",
        "year": 2008,
        "director": "Christopher Nolan",
        "duration": 152,
        "poster": "https://example.com/dark-knight.jpg",
        "genre": ["Action", "Crime", "Drama"],
        "rating": 9.0
    },
    {
        "id": "c906673b-3948-4402-ac7f-73ac3a9e3105",
        "title": "The Matrix",
        "year": 1999,
        "director": "Lana Wachowski",
        "duration": 136,
        "poster": "https://example.com/matrix.jpg",
        "genre": ["Action", "Sci-Fi"],
        "rating": 8.7
    },
]

@pytest.fixture
def sample_movies():
    return copy.deepcopy(SAMPLE_MOVIES)

@pytest.fixture
def valid_payload():
    return {
        "title": "Inception",
        "year": 2010,
        "director": "Nolan",
        "duration": 148,
        "rating": 8.8,
        "poster": "http://x/p.jpg",
        "genre": ["Action", "Sci-Fi"]
    }

@pytest.fixture
def movie_repo(sample_movies):
    return MovieRepository(sample_movies)

@pytest_asyncio.fixture
async def client(movie_repo):
    # Override dependencies
    app.dependency_overrides[get_movie_repository] = lambda: movie_repo

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides = {}
