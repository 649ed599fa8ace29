"""スーパーヒーローのインメモリリポジトリモジュール."""

import threading

from fastapi import Request

from superhero_api.database.model.superhero import Superhero, SuperheroBase


class SuperheroRepository:
    """スーパーヒーローを保持するインメモリのリポジトリ.

    登録は追記のみで、更新・削除は提供しない。
    データはプロセス終了時に破棄される。

    Attributes
    ----------
        _superheroes: 登録順に並んだスーパーヒーローのリスト
        _next_id: 次に採番するID
        _lock: 採番と追記をまとめて排他するためのロック

    """

    def __init__(self) -> None:
        """空のSuperheroRepositoryを初期化."""
        self._superheroes: list[Superhero] = []
        self._next_id = 1
        self._lock = threading.Lock()

    def add(self, candidate: SuperheroBase) -> Superhero:
        """スーパーヒーローを採番して追加.

        入力値は呼び出し元で検証済みである前提とし、再検証は行わない。

        Args:
        ----
            candidate: 登録するヒーローの属性

        Returns:
        -------
            IDが付与された登録済みのSuperhero

        """
        with self._lock:
            superhero = Superhero(id=self._next_id, **candidate.model_dump())
            self._next_id += 1
            self._superheroes.append(superhero)
        return superhero

    def get_all(self) -> list[Superhero]:
        """全スーパーヒーローを謙虚さスコアの降順で取得.

        安定ソートのため、同じスコアのヒーローは登録順を保つ。
        内部リストの並び順は変更しない。

        Returns
        -------
            Superheroオブジェクトのリスト

        """
        with self._lock:
            snapshot = list(self._superheroes)
        return sorted(snapshot, key=lambda h: h.humility_score, reverse=True)

    def count(self) -> int:
        """登録済みのスーパーヒーロー数を返す."""
        with self._lock:
            return len(self._superheroes)


async def get_superhero_repository(request: Request) -> SuperheroRepository:
    """FastAPI DI用のSuperheroRepositoryファクトリ.

    アプリケーション生成時に作られた単一のインスタンスを返す。

    Returns
    -------
        SuperheroRepository

    """
    return request.app.state.superhero_repository

