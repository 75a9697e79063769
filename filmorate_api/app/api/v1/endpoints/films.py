"""
Film endpoints for API v1.

CRUD for the catalogue, likes and the popularity ranking.  The
``/popular`` route is declared before ``/{film_id}`` so that it is not
captured by the id path parameter.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from filmorate_api.app.api.deps import get_film_service
from filmorate_api.app.core.config import settings
from filmorate_api.app.schemas.film import FilmCreate, FilmRead, FilmUpdate
from filmorate_api.app.services.film_service import FilmService


router = APIRouter()


@router.get("", response_model=List[FilmRead])
async def list_films(service: FilmService = Depends(get_film_service)) -> List[FilmRead]:
    return [FilmRead.from_entity(film) for film in service.list_films()]


@router.get("/popular", response_model=List[FilmRead])
async def popular_films(
    count: Optional[int] = Query(None, description="Number of films to return"),
    service: FilmService = Depends(get_film_service),
) -> List[FilmRead]:
    """Получить самые популярные фильмы по количеству лайков.

    Без параметра ``count`` возвращается ``POPULAR_DEFAULT_COUNT``
    фильмов (по умолчанию 10).  Неположительный ``count`` даёт 400.
    """
    if count is None:
        count = settings.popular_default_count
    return [FilmRead.from_entity(film) for film in service.popular(count)]


@router.get("/{film_id}", response_model=FilmRead)
async def get_film(film_id: int, service: FilmService = Depends(get_film_service)) -> FilmRead:
    return FilmRead.from_entity(service.get_film(film_id))


@router.post("", response_model=FilmRead, status_code=status.HTTP_201_CREATED)
async def create_film(film: FilmCreate, service: FilmService = Depends(get_film_service)) -> FilmRead:
    """Add a film to the catalogue."""
    return FilmRead.from_entity(service.create_film(film.to_entity()))


@router.put("", response_model=FilmRead)
async def update_film(film: FilmUpdate, service: FilmService = Depends(get_film_service)) -> FilmRead:
    """Replace a film identified by ``id`` in the body.

    Likes already given to the film are preserved.
    """
    return FilmRead.from_entity(service.update_film(film.to_entity()))


@router.put("/{film_id}/like/{user_id}")
async def add_like(
    film_id: int,
    user_id: int,
    service: FilmService = Depends(get_film_service),
) -> Response:
    service.add_like(film_id, user_id)
    return Response(status_code=status.HTTP_200_OK)


@router.delete("/{film_id}/like/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_like(
    film_id: int,
    user_id: int,
    service: FilmService = Depends(get_film_service),
) -> Response:
    """Withdraw a like; 404 if the user has not liked the film."""
    service.remove_like(film_id, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
