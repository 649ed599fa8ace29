"""スーパーヒーローのリクエスト・レスポンススキーマ."""

from typing import Annotated, Any

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    StrictInt,
    StrictStr,
)
from pydantic.alias_generators import to_camel


def _integral_float_to_int(value: Any) -> Any:
    """5.0のような整数値の小数をintに変換する(それ以外はそのまま返す)."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


HumilityScore = Annotated[StrictInt, BeforeValidator(_integral_float_to_int)]


class SuperheroCreate(BaseModel):
    """スーパーヒーロー登録リクエストスキーマ.

    JSON上のキーはキャメルケース(humilityScore)で受け付ける。
    スコアは整数値のみ受け付け、5.0は5として扱う。
    文字列の数値、真偽値、5.5のような小数は拒否する。
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: StrictStr = Field(min_length=1)
    superpower: StrictStr = Field(min_length=1)
    humility_score: HumilityScore = Field(ge=1, le=10)


class SuperheroResponse(BaseModel):
    """スーパーヒーローレスポンススキーマ."""

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: int
    name: str
    superpower: str
    humility_score: int
