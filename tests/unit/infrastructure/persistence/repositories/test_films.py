"""Tests for SqlFilmRepository — mapping and session interaction."""

from datetime import datetime, timezone
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

from src.domain.models.films import Film
from src.infrastructure.persistence.models.films import Film as OrmFilm
from src.infrastructure.persistence.repositories.films import SqlFilmRepository


def _orm_film(**overrides):
    defaults = {
        "film_id": uuid4(),
        "title": "Test Film",
        "rating": 5.0,
        "updated_at": datetime.now(timezone.utc),
        "completed_at": None,
        "deleted_at": None,
    }
    defaults.update(overrides)
    return SimpleNamespace(**defaults)


def _mock_session(scalar_result=None, scalars=None):
    session = AsyncMock()
    session.add = MagicMock()
    session.execute.return_value = MagicMock(
        scalar_one_or_none=MagicMock(return_value=scalar_result),
        scalars=MagicMock(return_value=scalars or []),
    )
    return session


# --- _to_domain mapping ---

def test_to_domain_maps_id_and_title():
    row = _orm_film(title="Heat")
    result = SqlFilmRepository._to_domain(row)
    assert result.film_id == row.film_id
    assert result.title == "Heat"


def test_to_domain_maps_rating():
    assert SqlFilmRepository._to_domain(_orm_film(rating=7.5)).rating == 7.5


def test_to_domain_preserves_none_timestamps():
    result = SqlFilmRepository._to_domain(_orm_film(updated_at=None))
    assert result.updated_at is None
    assert result.completed_at is None
    assert result.deleted_at is None


def test_to_domain_maps_deleted_at_when_set():
    at = datetime.now(timezone.utc)
    result = SqlFilmRepository._to_domain(_orm_film(deleted_at=at))
    assert result.is_deleted is True


# --- find_by_id / find_all ---

async def test_find_by_id_returns_none_when_not_found():
    repo = SqlFilmRepository(_mock_session(scalar_result=None))
    assert await repo.find_by_id(uuid4()) is None


async def test_find_by_id_returns_domain_object_when_found():
    row = _orm_film()
    repo = SqlFilmRepository(_mock_session(scalar_result=row))
    result = await repo.find_by_id(row.film_id)
    assert isinstance(result, Film)
    assert result.title == row.title


async def test_find_all_includes_deleted_rows():
    rows = [_orm_film(title="A"), _orm_film(title="B", deleted_at=datetime.now(timezone.utc))]
    repo = SqlFilmRepository(_mock_session(scalars=rows))
    result = await repo.find_all()
    assert [f.title for f in result] == ["A", "B"]


# --- save ---

async def test_save_updates_existing_row_in_place():
    row = _orm_film()
    session = _mock_session(scalar_result=row)
    entity = Film(film_id=row.film_id, title="Updated Title", rating=9.0)

    result = await SqlFilmRepository(session).save(entity)

    assert row.title == "Updated Title"
    assert row.rating == 9.0
    session.add.assert_not_called()
    session.flush.assert_awaited_once()
    assert result == entity


async def test_save_writes_soft_delete_timestamp():
    row = _orm_film()
    at = datetime.now(timezone.utc)
    entity = Film(film_id=row.film_id, title=row.title, rating=row.rating, deleted_at=at)

    await SqlFilmRepository(_mock_session(scalar_result=row)).save(entity)

    assert row.deleted_at == at


async def test_save_adds_new_row_when_missing():
    session = _mock_session(scalar_result=None)
    entity = Film(title="Heat", rating=8.0)

    result = await SqlFilmRepository(session).save(entity)

    session.add.assert_called_once()
    added = session.add.call_args.args[0]
    assert isinstance(added, OrmFilm)
    assert added.film_id == entity.film_id
    assert added.title == "Heat"
    assert result == entity


async def test_save_returns_new_snapshot_not_argument():
    row = _orm_film()
    entity = Film(film_id=row.film_id, title="X", rating=1.0)
    result = await SqlFilmRepository(_mock_session(scalar_result=row)).save(entity)
    assert result is not entity
