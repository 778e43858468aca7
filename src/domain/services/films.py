"""Film catalog service.

Orchestrates the FilmRepository and FilmMapper to implement create, read,
partial update and soft delete over the watch list.

Business rules owned here (not by the repository):
  - Soft-deleted films (deleted_at set) are invisible to get_by_id / get_all.
  - update applies only the fields the caller set and refreshes updated_at.
  - create always yields an active film; update never changes deleted_at.
  - update on a missing or soft-deleted film raises FilmNotFoundError.
  - delete is idempotent: a missing or already-deleted film causes no write.

Each operation issues at most one repository write.  Atomicity of the
read-then-write sequences is the repository's (session's) responsibility.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from uuid import UUID

from src.domain.mappers.films import FilmMapper
from src.domain.models.films import FilmDTO
from src.domain.repositories.films import FilmRepository

logger = logging.getLogger(__name__)


class FilmNotFoundError(LookupError):
    """No active film exists for the requested ID."""

    def __init__(self, film_id: UUID) -> None:
        super().__init__(f"Film {film_id} not found")
        self.film_id = film_id


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _as_uuid(film_id: UUID | str) -> UUID:
    return film_id if isinstance(film_id, UUID) else UUID(film_id)


class FilmService:
    """CRUD operations over films with soft-delete semantics.

    Collaborators are injected so the service can run against any
    FilmRepository implementation (SQL, in-memory, or a test double).
    """

    def __init__(self, repository: FilmRepository, mapper: FilmMapper | None = None) -> None:
        self._repository = repository
        self._mapper = mapper if mapper is not None else FilmMapper()

    async def create(self, dto: FilmDTO) -> FilmDTO:
        """Persist a new film and return it.

        Any id or deleted_at on *dto* is ignored: the new film always gets a
        generated ID and starts out active.
        """
        film = self._mapper.to_entity(dto.model_copy(update={"id": None, "deleted_at": None}))
        saved = await self._repository.save(film.touched(_utcnow()))
        logger.info("Created film %s (%r)", saved.film_id, saved.title)
        return self._mapper.to_dto(saved)

    async def get_by_id(self, film_id: UUID | str) -> FilmDTO | None:
        """Return the film, or None when it does not exist or is soft-deleted."""
        film = await self._repository.find_by_id(_as_uuid(film_id))
        if film is None or film.is_deleted:
            return None
        return self._mapper.to_dto(film)

    async def get_all(self) -> list[FilmDTO]:
        """Return every active film in repository order."""
        films = await self._repository.find_all()
        return [self._mapper.to_dto(f) for f in films if not f.is_deleted]

    async def update(self, film_id: UUID | str, dto: FilmDTO) -> FilmDTO:
        """Apply the fields set on *dto* to the film and return the result.

        *film_id* locates the record; an id carried on *dto* is not used.
        deleted_at cannot be changed here; soft deletion goes through delete().

        Raises:
            FilmNotFoundError: no film with this ID, or it is soft-deleted.
        """
        film_id = _as_uuid(film_id)
        existing = await self._repository.find_by_id(film_id)
        if existing is None or existing.is_deleted:
            raise FilmNotFoundError(film_id)

        merged = self._mapper.to_entity(dto.model_copy(update={"id": None}), existing)
        merged = merged.model_copy(
            update={
                "film_id": existing.film_id,
                "deleted_at": existing.deleted_at,
                "updated_at": _utcnow(),
            }
        )
        saved = await self._repository.save(merged)
        logger.info("Updated film %s", saved.film_id)
        return self._mapper.to_dto(saved)

    async def delete(self, film_id: UUID | str) -> None:
        """Soft-delete the film.  Missing or already-deleted films are left untouched."""
        film_id = _as_uuid(film_id)
        existing = await self._repository.find_by_id(film_id)
        if existing is None:
            logger.debug("Delete of unknown film %s ignored", film_id)
            return
        if existing.is_deleted:
            logger.debug("Film %s already deleted at %s", film_id, existing.deleted_at)
            return

        await self._repository.save(existing.soft_deleted(_utcnow()))
        logger.info("Soft-deleted film %s", film_id)
