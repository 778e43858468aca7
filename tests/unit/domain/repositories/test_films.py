"""Tests for src/domain/repositories/films.py."""

import pytest

from src.domain.repositories.base import Repository
from src.domain.repositories.films import FilmRepository


def test_film_repository_is_a_repository():
    assert issubclass(FilmRepository, Repository)


def test_film_repository_cannot_be_instantiated_directly():
    with pytest.raises(TypeError):
        FilmRepository()  # type: ignore[abstract]


def test_film_repository_declares_capability_set():
    assert FilmRepository.__abstractmethods__ == {"find_by_id", "find_all", "save"}
