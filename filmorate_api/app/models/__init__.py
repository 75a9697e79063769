"""
Domain entities kept by the in-memory stores.

Entities are plain dataclasses; the API layer converts them to and
from the pydantic schemas in ``app.schemas``.
"""

from .film import Film
from .user import User

__all__ = ["Film", "User"]
