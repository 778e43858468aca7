"""Film repository interface."""

from __future__ import annotations

from abc import abstractmethod
from uuid import UUID

from src.domain.models.films import Film

from .base import Repository


class FilmRepository(Repository[Film]):
    """Read/write interface for Film entities.

    find_by_id returns None when no match exists.  Neither finder filters
    soft-deleted films; that rule belongs to FilmService.
    """

    @abstractmethod
    async def find_by_id(self, id: UUID) -> Film | None:
        """Return the film with the given ID, or None."""

    @abstractmethod
    async def find_all(self) -> list[Film]:
        """Return all films in the repository's natural order."""

    @abstractmethod
    async def save(self, entity: Film) -> Film:
        """Persist *entity* (new or existing) and return the stored snapshot."""
