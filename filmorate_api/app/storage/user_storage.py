"""In-memory store of users."""

from ..models.user import User
from .base import InMemoryStorage


class UserStorage(InMemoryStorage[User]):
    entity_name = "User"
    # ``friends`` is absent on purpose: only the friendship operations
    # of ``UserService`` change it, always on both sides at once.
    mutable_fields = ("email", "login", "name", "birthday")
