"""APIサーバー起動コマンド.

uvicornを使用してスーパーヒーローAPIを起動する。
"""

import logging
import os
from typing import Annotated

import typer
import uvicorn

from superhero_api.common.log_prefix import LogPrefix
from superhero_api.settings.settings import get_settings

app = typer.Typer()

settings = get_settings()
logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@app.command()
def main(
    host: Annotated[str | None, typer.Option(help="待ち受けホスト")] = None,
    port: Annotated[int | None, typer.Option(help="待ち受けポート番号")] = None,
    reload: Annotated[
        bool,
        typer.Option(help="コード変更時に自動リロード(開発用)"),
    ] = False,
) -> None:
    """APIサーバーを起動する.

    Args:
    ----
        host: 待ち受けホスト(省略時は設定値)
        port: 待ち受けポート番号(省略時は設定値)
        reload: 自動リロードの有無

    """
    if host is None:
        host = settings.server_host
    if port is None:
        port = settings.server_port

    # アプリケーション側の設定(起動ログのURLなど)にも上書き値を反映する
    os.environ["SERVER_HOST"] = host
    os.environ["SERVER_PORT"] = str(port)
    get_settings.cache_clear()

    logger.info(
        f"{LogPrefix.SERVER} Starting uvicorn with host={host}, "
        f"port={port}, reload={reload}"
    )
    uvicorn.run(
        "superhero_api.main:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    app()
