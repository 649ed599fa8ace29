"""FastAPIアプリケーションのメインエントリーポイント."""

import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from superhero_api.common.log_prefix import LogPrefix
from superhero_api.database.repository import SuperheroRepository
from superhero_api.settings.settings import Settings, get_settings
from superhero_api.superhero.router import router as superhero_router

logger = logging.getLogger(__name__)


async def validation_error_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """入力検証エラーを400の構造化レスポンスに変換する.

    検証はリポジトリ呼び出しの前に行われるため、
    このハンドラーに到達した時点でストアは変更されていない。
    """
    logger.warning(
        f"{LogPrefix.VALIDATION_ERROR} {request.method} {request.url.path}: "
        f"{exc.errors()}"
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": {
                "code": "VALIDATION_ERROR",
                "message": "Invalid request data",
                "details": [
                    {
                        "field": ".".join(str(loc) for loc in e["loc"]),
                        "message": e["msg"],
                        "type": e["type"],
                    }
                    for e in exc.errors()
                ],
            },
        },
    )


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """想定外の例外を500レスポンスに変換する(内部情報は返さない)."""
    logger.error(
        f"{LogPrefix.INTERNAL_ERROR} {request.method} {request.url.path}: {exc}",
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": {
                "code": "INTERNAL_ERROR",
                "message": "An unexpected error occurred",
            },
        },
    )


async def catch_unhandled_errors(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """ルーター内の想定外の例外を500レスポンスに変換するミドルウェア.

    CORSMiddlewareの内側で動くため、500レスポンスにもCORSヘッダーが付く。
    """
    try:
        return await call_next(request)
    except Exception as exc:
        return await generic_error_handler(request, exc)


def create_app(settings: Settings | None = None) -> FastAPI:
    """FastAPIアプリケーションを生成する.

    呼び出しごとに空のSuperheroRepositoryを1つ生成し、
    アプリケーションの生存期間中保持する。

    Args:
    ----
        settings: アプリケーション設定(省略時は環境変数から読み込む)

    Returns:
    -------
        FastAPI: 設定済みのアプリケーション

    """
    if settings is None:
        settings = get_settings()

    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            f"{LogPrefix.SERVER} Application is running on: {settings.public_url}"
        )
        yield
        logger.info(f"{LogPrefix.SERVER} Shutting down")

    app = FastAPI(title="Superhero API", lifespan=lifespan)
    app.state.settings = settings
    app.state.superhero_repository = SuperheroRepository()

    # 後から追加したミドルウェアが外側になる
    app.middleware("http")(catch_unhandled_errors)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(superhero_router)

    app.add_exception_handler(RequestValidationError, validation_error_handler)  # type: ignore[arg-type]

    return app


app = create_app()
