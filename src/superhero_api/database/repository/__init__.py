"""リポジトリモジュール."""

from .superhero_repository import (
    SuperheroRepository,
    get_superhero_repository,
)

__all__ = [
    "SuperheroRepository",
    "get_superhero_repository",
]
