"""In-memory implementation of FilmRepository.

Keeps films in an insertion-ordered dict.  Used for local runs and tests
that want real repository behaviour without a database.
"""

from __future__ import annotations

from uuid import UUID

from src.domain.models.films import Film
from src.domain.repositories.films import FilmRepository


class InMemoryFilmRepository(FilmRepository):
    def __init__(self, films: list[Film] | None = None) -> None:
        self._films: dict[UUID, Film] = {}
        for film in films or []:
            self._films[film.film_id] = film.model_copy()

    async def find_by_id(self, id: UUID) -> Film | None:
        film = self._films.get(id)
        return film.model_copy() if film is not None else None

    async def find_all(self) -> list[Film]:
        return [film.model_copy() for film in self._films.values()]

    async def save(self, entity: Film) -> Film:
        # Re-saving an existing ID keeps its original position in find_all().
        self._films[entity.film_id] = entity.model_copy()
        return entity.model_copy()

    def __len__(self) -> int:
        return len(self._films)
