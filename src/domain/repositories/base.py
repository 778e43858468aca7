"""Generic repository base interface.

Repository[T] is the root abstraction for all data-access interfaces in this
domain layer.  Concrete implementations live in src/infrastructure/persistence/
and are wired at the application boundary.

Design notes:
  - All methods are async to accommodate async database drivers (asyncpg / SQLAlchemy async).
  - T is the domain model type (never an ORM row or DTO).
  - save() has insert-or-update semantics and returns the persisted snapshot;
    callers must use the returned value rather than the object they passed in.
  - There is no delete(): records are soft-deleted by saving them with
    deleted_at set, and the service filters them out of reads.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar
from uuid import UUID

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """Abstract persistence interface for a domain entity."""

    @abstractmethod
    async def find_by_id(self, id: UUID) -> T | None:
        """Return the entity with the given primary key, or None if not found."""

    @abstractmethod
    async def find_all(self) -> list[T]:
        """Return every stored entity, soft-deleted ones included."""

    @abstractmethod
    async def save(self, entity: T) -> T:
        """Insert or update *entity* and return the persisted state."""
