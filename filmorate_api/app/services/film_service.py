"""
Business logic for films, likes and the popularity ranking.

Likes live on the film as a set of user ids.  Like operations hold the
film store lock for the whole check-then-mutate sequence and consult
the user store from inside it; locks are therefore always taken in the
order film store → user store.
"""

import copy
import logging
from typing import List

from ..core.exceptions import ConflictError, NotFoundError, ValidationError
from ..models.film import Film
from ..storage.film_storage import FilmStorage
from ..storage.user_storage import UserStorage
from .validation import validate_film


logger = logging.getLogger(__name__)


class FilmService:
    """Service for the film catalogue."""

    def __init__(self, storage: FilmStorage, user_storage: UserStorage) -> None:
        self.storage = storage
        self.user_storage = user_storage

    def list_films(self) -> List[Film]:
        return self.storage.list()

    def get_film(self, film_id: int) -> Film:
        film = self.storage.get(film_id)
        if film is None:
            raise NotFoundError(f"Film with id={film_id} not found")
        return film

    def create_film(self, film: Film) -> Film:
        logger.info("Adding film '%s'", film.name)
        validate_film(film)
        created = self.storage.create(film)
        logger.info("Added film with id=%s", created.id)
        return created

    def update_film(self, film: Film) -> Film:
        """Replace name, description, release date and duration.

        The like set of the stored film is not affected.
        """
        if film.id is None or not self.storage.exists(film.id):
            logger.error("Cannot update film: id=%s not found", film.id)
            raise NotFoundError(f"Film with id={film.id} not found")
        logger.info("Updating film with id=%s", film.id)
        validate_film(film)
        updated = self.storage.update(film)
        logger.info("Film with id=%s updated", updated.id)
        return updated

    def add_like(self, film_id: int, user_id: int) -> None:
        with self.storage.transaction() as films:
            film = self._liked_film(films, film_id, user_id)
            if user_id in film.likes:
                raise ConflictError(f"User {user_id} already liked film {film_id}")
            film.likes.add(user_id)

    def remove_like(self, film_id: int, user_id: int) -> None:
        """Withdraw a like.

        Unlike removing a friendship, withdrawing a like that was never
        given is an error (``NotFoundError``).
        """
        with self.storage.transaction() as films:
            film = self._liked_film(films, film_id, user_id)
            if user_id not in film.likes:
                raise NotFoundError(f"User {user_id} has not liked film {film_id}")
            film.likes.discard(user_id)

    def popular(self, count: int) -> List[Film]:
        """Return up to ``count`` films with the most likes.

        Films with the same number of likes are ordered by ascending id.
        """
        if count <= 0:
            raise ValidationError("count must be a positive number")
        with self.storage.transaction() as films:
            ranked = sorted(
                films.values(),
                key=lambda film: (-len(film.likes or ()), film.id),
            )
            return [copy.deepcopy(film) for film in ranked[:count]]

    def _liked_film(self, films, film_id: int, user_id: int) -> Film:
        film = films.get(film_id)
        if film is None:
            raise NotFoundError(f"Film with id={film_id} not found")
        if not self.user_storage.exists(user_id):
            raise NotFoundError(f"User with id={user_id} not found")
        return film
