"""データモデルを一括エクスポートするモジュール.

モデルはテーブルを持たず、プロセス内のメモリ上にのみ保持される。
"""

from .superhero import Superhero, SuperheroBase

__all__ = ["Superhero", "SuperheroBase"]
