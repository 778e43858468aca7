"""Domain model package.

All domain objects are pure Pydantic models with no ORM or infrastructure
dependencies.  Import from this package to avoid coupling application code
to individual module paths.
"""

from .films import Film, FilmDTO

__all__ = [
    "Film",
    "FilmDTO",
]
