"""スーパーヒーローのデータモデルを定義するモジュール."""

from sqlmodel import Field, SQLModel


class SuperheroBase(SQLModel):
    """登録前のスーパーヒーローを表すモデル.

    Attributes
    ----------
        name: ヒーロー名
        superpower: 超能力
        humility_score: 謙虚さスコア(1〜10)

    """

    name: str = Field(min_length=1)
    superpower: str = Field(min_length=1)
    humility_score: int = Field(ge=1, le=10)


class Superhero(SuperheroBase):
    """登録済みのスーパーヒーローを表すモデル.

    Attributes
    ----------
        id: 登録順に採番される一意識別子(1始まり、再利用しない)

    """

    id: int = Field(ge=1)
