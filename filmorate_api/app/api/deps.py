"""
FastAPI dependencies giving handlers access to the services.

The services are built once per application by ``create_app`` and
kept on ``app.state``; handlers never reach for module-level state.
"""

from fastapi import Request

from ..services.film_service import FilmService
from ..services.user_service import UserService


def get_user_service(request: Request) -> UserService:
    return request.app.state.user_service


def get_film_service(request: Request) -> FilmService:
    return request.app.state.film_service
