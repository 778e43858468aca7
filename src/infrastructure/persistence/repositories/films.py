"""SQLAlchemy implementation of FilmRepository."""

from __future__ import annotations

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.models.films import Film as DomainFilm
from src.domain.repositories.films import FilmRepository
from src.infrastructure.persistence.models.films import Film as OrmFilm

logger = logging.getLogger(__name__)


class SqlFilmRepository(FilmRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @staticmethod
    def _to_domain(row: OrmFilm) -> DomainFilm:
        return DomainFilm(
            film_id=row.film_id,
            title=row.title,
            rating=row.rating,
            updated_at=row.updated_at,
            completed_at=row.completed_at,
            deleted_at=row.deleted_at,
        )

    async def _get_row(self, film_id: UUID) -> OrmFilm | None:
        stmt = select(OrmFilm).where(OrmFilm.film_id == film_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def find_by_id(self, id: UUID) -> DomainFilm | None:
        row = await self._get_row(id)
        return self._to_domain(row) if row else None

    async def find_all(self) -> list[DomainFilm]:
        stmt = select(OrmFilm).order_by(OrmFilm.updated_at.desc().nulls_last())
        result = await self._session.execute(stmt)
        return [self._to_domain(row) for row in result.scalars()]

    async def save(self, entity: DomainFilm) -> DomainFilm:
        row = await self._get_row(entity.film_id)
        if row is None:
            row = OrmFilm(film_id=entity.film_id)
            self._session.add(row)
            logger.debug("Inserting film %s", entity.film_id)
        row.title = entity.title
        row.rating = entity.rating
        row.updated_at = entity.updated_at
        row.completed_at = entity.completed_at
        row.deleted_at = entity.deleted_at
        await self._session.flush()
        return self._to_domain(row)
