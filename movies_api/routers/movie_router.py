from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends, Response, status

from ..dependencies import get_movie_service
from ..schemas.movie import MessageResponse, Movie
from ..services.movie_service import MovieService

router = APIRouter(prefix="/movies", tags=["movies"])

@router.get("", response_model=List[Movie])
async def list_movies(
    genre: Optional[str] = None,
    service: MovieService = Depends(get_movie_service)
):
    """
    List every movie, or only those tagged with `genre` (case-insensitive)
    """
    return await service.list_movies(genre)

@router.get("/{movie_id}", response_model=Movie)
async def get_movie(movie_id: str, service: MovieService = Depends(get_movie_service)):
    return await service.get_movie(movie_id)

@router.post("", response_model=Movie, status_code=status.HTTP_201_CREATED)
async def create_movie(
    payload: Any = Body(...),
    service: MovieService = Depends(get_movie_service)
):
    """Create a movie; the id is generated server-side"""
    return await service.create_movie(payload)

@router.patch("/{movie_id}", response_model=Movie)
async def update_movie(
    movie_id: str,
    payload: Any = Body(...),
    service: MovieService = Depends(get_movie_service)
):
    """Merge the given fields over an existing movie"""
    return await service.update_movie(movie_id, payload)

@router.delete("/{movie_id}", response_model=MessageResponse)
async def delete_movie(movie_id: str, service: MovieService = Depends(get_movie_service)):
    return await service.delete_movie(movie_id)

# Preflight. CORS headers are added by CorsPolicyMiddleware.
@router.options("")
@router.options("/{movie_id}")
async def movie_preflight():
    return Response(status_code=status.HTTP_200_OK)
