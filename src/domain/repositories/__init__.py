"""Domain repository interfaces.

All abstractions are defined here with abc.ABC and @abstractmethod.
Concrete implementations live in src/infrastructure/persistence/ and are
wired at the application boundary.
"""

from .base import Repository
from .films import FilmRepository

__all__ = [
    "Repository",
    "FilmRepository",
]
