"""スーパーヒーローAPIのルーター定義."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from superhero_api.superhero.schema import SuperheroCreate, SuperheroResponse
from superhero_api.superhero.service import (
    SuperheroService,
    get_superhero_service,
)

router = APIRouter(prefix="/superheroes", tags=["superheroes"])


@router.post(
    "",
    response_model=SuperheroResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_superhero(
    payload: SuperheroCreate,
    service: Annotated[SuperheroService, Depends(get_superhero_service)],
) -> SuperheroResponse:
    """スーパーヒーローを登録し、採番済みのレコードを返す."""
    superhero = service.create(payload)
    return SuperheroResponse.model_validate(superhero)


@router.get("", response_model=list[SuperheroResponse])
async def get_superheroes(
    service: Annotated[SuperheroService, Depends(get_superhero_service)],
) -> list[SuperheroResponse]:
    """謙虚さスコアの降順でスーパーヒーロー一覧を返す."""
    superheroes = service.find_all()
    return [SuperheroResponse.model_validate(h) for h in superheroes]
