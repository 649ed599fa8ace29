"""テスト共通フィクスチャ.

テストごとに新しいアプリケーションを生成し、空のリポジトリから始める。
"""

from collections.abc import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from superhero_api.database.repository import SuperheroRepository
from superhero_api.main import create_app
from superhero_api.settings.settings import Settings


@pytest.fixture
def settings() -> Settings:
    return Settings(cors_origins=["http://localhost:3000"])


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    return create_app(settings)


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app) as client:
        yield client


@pytest.fixture
def repository(app: FastAPI) -> SuperheroRepository:
    return app.state.superhero_repository
