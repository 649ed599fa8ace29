"""アプリケーション設定を管理するモジュール."""

from functools import lru_cache

from pydantic import computed_field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """アプリケーション全体の設定を管理するクラス.

    環境変数から設定値を読み込み、サーバーの待ち受け情報などを提供する。

    Attributes
    ----------
        environment: 実行環境(development, production等)
        server_host: 待ち受けホスト(デフォルト: 0.0.0.0)
        server_port: 待ち受けポート番号(デフォルト: 3001)
        cors_origins: CORSで許可するオリジンのリスト(JSON形式で指定)
        log_level: ログレベル(デフォルト: INFO)

    """

    environment: str = "development"

    server_host: str = "0.0.0.0"
    server_port: int = 3001

    cors_origins: list[str] = ["*"]

    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        """ログレベル名を大文字に揃える(info -> INFO)."""
        return value.upper()

    @computed_field  # type: ignore[prop-decorator]
    @property
    def public_url(self) -> str:
        """起動ログに表示するURLを生成する.

        Returns
        -------
            str: ローカルホストでのアクセスURL

        """
        return f"http://localhost:{self.server_port}"


@lru_cache
def get_settings() -> Settings:
    """アプリケーション設定のシングルトンインスタンスを取得する.

    LRUキャッシュにより同一インスタンスを再利用し、
    環境変数の読み込みコストを削減する。

    Returns
    -------
        Settings: アプリケーション設定オブジェクト

    """
    return Settings()
