"""Entity <-> transfer-object mappers.

Mappers are stateless and side-effect free; services receive them by
constructor injection so tests can substitute their own.
"""

from .films import FilmMapper

__all__ = ["FilmMapper"]
