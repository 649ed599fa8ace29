"""スーパーヒーローのサービスモジュール."""

import logging
from typing import Annotated

from fastapi import Depends

from superhero_api.common.log_prefix import LogPrefix
from superhero_api.database.model.superhero import Superhero, SuperheroBase
from superhero_api.database.repository.superhero_repository import (
    SuperheroRepository,
    get_superhero_repository,
)
from superhero_api.superhero.schema import SuperheroCreate

logger = logging.getLogger(__name__)


class SuperheroService:
    """スーパーヒーローに関するビジネスロジックを提供するサービス.

    Attributes
    ----------
        repo: Superheroリポジトリ

    """

    def __init__(self, repo: SuperheroRepository) -> None:
        """SuperheroServiceを初期化.

        Args:
        ----
            repo: Superheroリポジトリ

        """
        self.repo = repo

    def create(self, payload: SuperheroCreate) -> Superhero:
        """検証済みのリクエストからスーパーヒーローを登録.

        Args:
        ----
            payload: 検証済みの登録リクエスト

        Returns:
        -------
            登録されたSuperhero

        """
        candidate = SuperheroBase(**payload.model_dump())
        superhero = self.repo.add(candidate)
        logger.info(
            f"{LogPrefix.CREATE_SUPERHERO} id={superhero.id} "
            f"name={superhero.name!r} humility_score={superhero.humility_score}"
        )
        return superhero

    def find_all(self) -> list[Superhero]:
        """謙虚さスコアの降順で全スーパーヒーローを取得."""
        superheroes = self.repo.get_all()
        logger.debug(
            f"{LogPrefix.LIST_SUPERHEROES} returning {len(superheroes)} record(s)"
        )
        return superheroes


async def get_superhero_service(
    repo: Annotated[
        SuperheroRepository,
        Depends(get_superhero_repository),
    ],
) -> SuperheroService:
    """FastAPI DI用のSuperheroServiceファクトリ.

    Returns
    -------
        SuperheroService

    """
    return SuperheroService(repo=repo)
