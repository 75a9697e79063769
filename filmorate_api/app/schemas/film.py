"""
Pydantic models for film data.

Field names follow the public JSON contract (``releaseDate``) through
aliases; Python code uses ``release_date``.  ``duration`` is expressed
in minutes.
"""

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field

from ..models.film import Film


class FilmBase(BaseModel):
    name: str = Field(..., examples=["nisi eiusmod"])
    description: str = Field("", examples=["adipisicing"])
    release_date: date = Field(..., alias="releaseDate", examples=["1967-03-25"])
    duration: int = Field(..., examples=[100], description="Duration in minutes")

    model_config = {
        "populate_by_name": True,
    }


class FilmCreate(FilmBase):
    """Schema for adding a film to the catalogue."""

    def to_entity(self) -> Film:
        return Film(
            name=self.name,
            description=self.description,
            release_date=self.release_date,
            duration=self.duration,
        )


class FilmUpdate(FilmBase):
    """Schema for replacing a film; likes are left untouched."""

    id: Optional[int] = Field(None, examples=[1])

    def to_entity(self) -> Film:
        return Film(
            id=self.id,
            name=self.name,
            description=self.description,
            release_date=self.release_date,
            duration=self.duration,
        )


class FilmRead(FilmBase):
    """Schema for reading a film from the API."""

    id: int
    likes: List[int] = Field(default_factory=list)

    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
    }

    @classmethod
    def from_entity(cls, film: Film) -> "FilmRead":
        return cls(
            id=film.id,
            name=film.name,
            description=film.description,
            release_date=film.release_date,
            duration=film.duration,
            likes=sorted(film.likes),
        )
