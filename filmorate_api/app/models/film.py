"""Film entity."""

from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Set


@dataclass
class Film:
    name: str
    description: str = ""
    release_date: Optional[date] = None
    # Minutes.
    duration: int = 0
    id: Optional[int] = None
    # Ids of users who liked the film.
    likes: Set[int] = field(default_factory=set)
