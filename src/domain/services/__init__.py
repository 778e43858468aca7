"""Domain services package."""

from .films import FilmNotFoundError, FilmService

__all__ = ["FilmNotFoundError", "FilmService"]
