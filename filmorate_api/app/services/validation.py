"""
Field rules for users and films.

The guards run before an entity is created or updated.  A violation is
logged and raised as ``ValidationError``; a passing entity may be
normalised in place (a blank user name is replaced by the login).
"""

import logging
from datetime import date
from typing import Optional

from ..core.exceptions import ValidationError
from ..models.film import Film
from ..models.user import User


logger = logging.getLogger(__name__)

MAX_DESCRIPTION_LENGTH = 200
# Date of the first public film screening by the Lumière brothers.
START_FILM_DATE = date(1895, 12, 28)


def _fail(message: str) -> None:
    logger.error("Validation failed: %s", message)
    raise ValidationError(message)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def validate_user(user: User, today: Optional[date] = None) -> User:
    """Check ``user`` and fill in its display name.

    ``today`` defaults to the current date; tests pass it explicitly.
    """
    if _is_blank(user.email):
        _fail("Email must not be empty")
    if "@" not in user.email:
        _fail("Email must contain the '@' character")

    if _is_blank(user.login):
        _fail("Login must not be empty")
    if any(ch.isspace() for ch in user.login):
        _fail("Login must not contain whitespace")

    today = today or date.today()
    if user.birthday is not None and user.birthday > today:
        _fail(f"Birthday must not be later than {today.isoformat()}")

    if _is_blank(user.name):
        logger.info("Login (%s) used as the user name", user.login)
        user.name = user.login
    return user


def validate_film(film: Film) -> Film:
    """Check ``film`` against the catalogue rules."""
    if _is_blank(film.name):
        _fail("Film name must not be empty")
    if film.description is not None and len(film.description) > MAX_DESCRIPTION_LENGTH:
        _fail(f"Description must not be longer than {MAX_DESCRIPTION_LENGTH} characters")
    if film.release_date is not None and film.release_date < START_FILM_DATE:
        _fail(f"Release date must not be earlier than {START_FILM_DATE.isoformat()}")
    if film.duration is not None and film.duration < 0:
        _fail("Film duration must not be negative")
    return film
