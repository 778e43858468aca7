"""Film domain models.

Film is the persisted record; FilmDTO is the boundary-facing shape exchanged
with callers.  Neither carries ORM or persistence concerns.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

_MIN_RATING = 0.0
_MAX_RATING = 10.0


class Film(BaseModel):
    """A film on the watch list.

    Frozen: every change produces a new snapshot via model_copy, so an
    instance handed to a repository is never mutated behind its back.
    deleted_at being set means the film is soft-deleted and invisible to reads.
    """

    model_config = ConfigDict(frozen=True)

    film_id: UUID = Field(default_factory=uuid4)
    title: str = Field(min_length=1)
    rating: float = Field(ge=_MIN_RATING, le=_MAX_RATING)
    updated_at: datetime | None = None
    completed_at: datetime | None = None  # finished watching
    deleted_at: datetime | None = None

    @classmethod
    def create(
        cls,
        title: str,
        rating: float,
        completed_at: datetime | None = None,
    ) -> Film:
        return cls(title=title, rating=rating, completed_at=completed_at)

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def touched(self, at: datetime) -> Film:
        """Return a copy with updated_at set to *at*."""
        return self.model_copy(update={"updated_at": at})

    def soft_deleted(self, at: datetime) -> Film:
        """Return a copy marked as deleted at *at*."""
        return self.model_copy(update={"deleted_at": at})


class FilmDTO(BaseModel):
    """Transfer representation of a Film.

    All fields are optional so the same shape serves as create input,
    partial-update input (only explicitly set fields are applied) and output.
    extra is reserved for future use and is never read by current logic.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str | None = None
    title: str | None = None
    rating: float | None = Field(default=None, ge=_MIN_RATING, le=_MAX_RATING)
    updated_at: datetime | None = Field(default=None, alias="updatedAt")
    completed_at: datetime | None = Field(default=None, alias="completedAt")
    deleted_at: datetime | None = Field(default=None, alias="deletedAt")
    extra: dict[str, Any] | None = None
