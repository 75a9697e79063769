"""
Business logic for users and friendships.

Friendship is symmetric and stored on both endpoints: ``b`` is in
``a.friends`` exactly when ``a`` is in ``b.friends``.  Every friendship
operation checks and mutates both users inside one transaction of the
user store, so no caller can observe a relation recorded on one side
only.
"""

import copy
import logging
from typing import List

from ..core.exceptions import ConflictError, NotFoundError, ValidationError
from ..models.user import User
from ..storage.user_storage import UserStorage
from .validation import validate_user


class UserService:
    """Сервис для работы с пользователями и их друзьями.

    Хранилище передаётся в конструктор; сервис не держит собственного
    состояния.  Добавление дружбы повторно считается конфликтом, а
    удаление несуществующей дружбы молча игнорируется.  Лайки фильмов
    ведут себя иначе (см. ``FilmService.remove_like``); это известное
    расхождение сохранено намеренно.
    """

    def __init__(self, storage: UserStorage) -> None:
        self.storage = storage

    def list_users(self) -> List[User]:
        return self.storage.list()

    def get_user(self, user_id: int) -> User:
        """Return the user or raise ``NotFoundError``."""
        user = self.storage.get(user_id)
        if user is None:
            raise NotFoundError(f"User with id={user_id} not found")
        return user

    def create_user(self, user: User) -> User:
        logger = logging.getLogger(__name__)
        logger.info("Adding user %s", user.login)
        validate_user(user)
        created = self.storage.create(user)
        logger.info("Added user with id=%s", created.id)
        return created

    def update_user(self, user: User) -> User:
        """Replace the profile fields of an existing user.

        The friend set is kept as is.  An unset or unknown id raises
        ``NotFoundError`` before the field rules are checked.
        """
        logger = logging.getLogger(__name__)
        if user.id is None or not self.storage.exists(user.id):
            logger.error("Cannot update user: id=%s not found", user.id)
            raise NotFoundError(f"User with id={user.id} not found")
        logger.info("Updating user with id=%s", user.id)
        validate_user(user)
        updated = self.storage.update(user)
        logger.info("User with id=%s updated", updated.id)
        return updated

    def add_friend(self, user_id: int, friend_id: int) -> None:
        """Make ``user_id`` and ``friend_id`` friends of each other.

        Raises ``NotFoundError`` if either user is missing and
        ``ConflictError`` if the friendship is recorded on either side.
        """
        if user_id == friend_id:
            raise ValidationError("A user cannot be their own friend")
        with self.storage.transaction() as users:
            user, friend = self._both(users, user_id, friend_id)
            # Checked on both sides so a half-recorded relation is never
            # silently completed.
            if friend_id in user.friends or user_id in friend.friends:
                raise ConflictError(f"Users {user_id} and {friend_id} are already friends")
            user.friends.add(friend_id)
            friend.friends.add(user_id)

    def remove_friend(self, user_id: int, friend_id: int) -> None:
        """Remove the friendship between two users.

        Removing a friendship that does not exist succeeds without
        changes.
        """
        if user_id == friend_id:
            raise ValidationError("A user cannot remove themselves from friends")
        with self.storage.transaction() as users:
            user, friend = self._both(users, user_id, friend_id)
            if friend_id not in user.friends or user_id not in friend.friends:
                return
            user.friends.discard(friend_id)
            friend.friends.discard(user_id)

    def list_friends(self, user_id: int) -> List[User]:
        with self.storage.transaction() as users:
            user = self._one(users, user_id)
            return [copy.deepcopy(users[i]) for i in sorted(user.friends)]

    def common_friends(self, user_id: int, other_id: int) -> List[User]:
        """Users that are friends of both ``user_id`` and ``other_id``."""
        with self.storage.transaction() as users:
            user, other = self._both(users, user_id, other_id)
            common = user.friends & other.friends
            return [copy.deepcopy(users[i]) for i in sorted(common)]

    @staticmethod
    def _one(users, user_id: int) -> User:
        user = users.get(user_id)
        if user is None:
            raise NotFoundError(f"User with id={user_id} not found")
        return user

    @classmethod
    def _both(cls, users, first_id: int, second_id: int):
        return cls._one(users, first_id), cls._one(users, second_id)
