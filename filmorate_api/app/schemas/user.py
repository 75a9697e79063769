"""
Pydantic models for user data.

``UserCreate`` is accepted by ``POST /users``, ``UserUpdate`` by
``PUT /users`` (the id travels in the body) and ``UserRead`` is
returned everywhere a user is shown.
"""

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field

from ..models.user import User


class UserBase(BaseModel):
    email: str = Field(..., examples=["mail@yandex.ru"])
    login: str = Field(..., examples=["dolore"])
    # Falls back to the login when empty.
    name: Optional[str] = Field(None, examples=["Nick Name"])
    birthday: Optional[date] = Field(None, examples=["1946-08-20"])


class UserCreate(UserBase):
    """Schema for registering a user."""

    def to_entity(self) -> User:
        return User(email=self.email, login=self.login, name=self.name, birthday=self.birthday)


class UserUpdate(UserBase):
    """Schema for replacing a user's profile.

    All profile fields are replaced; the friend list cannot be changed
    through this schema.
    """

    id: Optional[int] = Field(None, examples=[1])

    def to_entity(self) -> User:
        return User(
            id=self.id,
            email=self.email,
            login=self.login,
            name=self.name,
            birthday=self.birthday,
        )


class UserRead(UserBase):
    """Schema for reading a user from the API."""

    id: int
    friends: List[int] = Field(default_factory=list)

    model_config = {
        "from_attributes": True,
    }

    @classmethod
    def from_entity(cls, user: User) -> "UserRead":
        return cls(
            id=user.id,
            email=user.email,
            login=user.login,
            name=user.name,
            birthday=user.birthday,
            friends=sorted(user.friends),
        )
