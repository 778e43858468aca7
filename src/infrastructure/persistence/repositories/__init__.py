"""Concrete repository implementations.

Exports the repository classes plus the get_repositories() and
get_film_service() factories for wiring at the application boundary
(the entry-point layer that handles external requests).
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.services.films import FilmService

from .films import SqlFilmRepository
from .memory import InMemoryFilmRepository


@dataclass
class Repositories:
    """All repository instances bound to a single AsyncSession."""

    films: SqlFilmRepository


def get_repositories(session: AsyncSession) -> Repositories:
    """Construct all repositories bound to the given session.

    Intended for use by the entry-point layer, one session per request:

        async with AsyncSessionLocal() as session, session.begin():
            repos = get_repositories(session)
            film = await repos.films.find_by_id(film_id)
    """
    return Repositories(
        films=SqlFilmRepository(session),
    )


def get_film_service(session: AsyncSession) -> FilmService:
    """Return a FilmService backed by the SQL repository for *session*."""
    return FilmService(get_repositories(session).films)


__all__ = [
    "SqlFilmRepository",
    "InMemoryFilmRepository",
    "Repositories",
    "get_repositories",
    "get_film_service",
]
