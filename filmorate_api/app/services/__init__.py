"""
Service layer.

Each service encapsulates the business logic of one domain and works
on the stores passed to its constructor.  Swapping the in-memory
stores for database-backed ones does not change the API handlers.
"""

from .film_service import FilmService
from .user_service import UserService

__all__ = ["FilmService", "UserService"]
