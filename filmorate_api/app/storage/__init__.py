"""
In-memory entity stores.

Each store owns its entities and its lock; stores are created by
``create_app`` (or directly in tests) and passed to the services that
need them.  There is no module-level state.
"""

from .base import InMemoryStorage, next_id
from .film_storage import FilmStorage
from .user_storage import UserStorage

__all__ = ["InMemoryStorage", "next_id", "FilmStorage", "UserStorage"]
