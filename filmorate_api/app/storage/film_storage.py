"""In-memory store of films."""

from ..models.film import Film
from .base import InMemoryStorage


class FilmStorage(InMemoryStorage[Film]):
    entity_name = "Film"
    # ``likes`` survives a full update; it is owned by ``FilmService``.
    mutable_fields = ("name", "description", "release_date", "duration")
