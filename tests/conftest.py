"""
Shared fixtures.

Every test gets its own stores and services; nothing is shared between
tests.
"""

import pytest

from filmorate_api.app.services import FilmService, UserService
from filmorate_api.app.storage import FilmStorage, UserStorage


@pytest.fixture
def user_storage():
    return UserStorage()


@pytest.fixture
def film_storage():
    return FilmStorage()


@pytest.fixture
def user_service(user_storage):
    return UserService(user_storage)


@pytest.fixture
def film_service(film_storage, user_storage):
    return FilmService(film_storage, user_storage)
