"""User entity."""

from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Set


@dataclass
class User:
    email: str
    login: str
    name: Optional[str] = None
    birthday: Optional[date] = None
    id: Optional[int] = None
    # Ids of friends.  Kept symmetric by ``UserService``; never contains
    # the user's own id.
    friends: Set[int] = field(default_factory=set)
