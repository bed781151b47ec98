from __future__ import annotations

import os
from collections.abc import Iterator

# primed before any dailytodo import reads the environment
os.environ.setdefault("JWT_SECRET", "test-signing-secret-please-change")
os.environ["APP_ENV"] = "test"
os.environ["ENABLE_RATE_LIMIT"] = "false"
os.environ["AUTO_MIGRATE"] = "true"
os.environ.pop("ADMIN_USERNAME", None)
os.environ.pop("LOG_FILE", None)

import pytest
from flask import Flask
from flask.testing import FlaskClient

from dailytodo.app import create_app
from dailytodo.infrastructure.container import Container
from dailytodo.infrastructure.db.session import Database
from dailytodo.shared.config import AppConfig, load_config


@pytest.fixture(autouse=True)
def _fresh_config() -> Iterator[None]:
    load_config.cache_clear()
    yield
    load_config.cache_clear()


@pytest.fixture()
def database_url(tmp_path) -> str:
    return f"sqlite:///{tmp_path / 'dailytodo.db'}"


@pytest.fixture()
def app_config(monkeypatch: pytest.MonkeyPatch, database_url: str) -> AppConfig:
    monkeypatch.setenv("DATABASE_URL", database_url)
    load_config.cache_clear()
    return load_config()


@pytest.fixture()
def database(app_config: AppConfig) -> Iterator[Database]:
    db = Database(app_config.database)
    db.migrate()
    yield db
    db.dispose()


@pytest.fixture()
def container(app_config: AppConfig, database: Database) -> Container:
    return Container(app_config, database=database)


@pytest.fixture()
def app(app_config: AppConfig, container: Container) -> Flask:
    return create_app(app_config, container=container)


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    return app.test_client()
