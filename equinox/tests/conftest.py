from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

from equinox.app import create_app
from equinox.application.services.tokens import TokenService
from equinox.infrastructure.container import Container
from equinox.shared.config import AppConfig
from equinox.tests.support import TEST_SECRET, FrozenClock


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.setenv("LOG_FILE", str(tmp_path / "app.log"))
    for name in (
        "APP_ENV",
        "JWT_SECRET",
        "TOKEN_TTL_SECONDS",
        "DEBUG_LOGGING",
        "HOST",
        "PORT",
        "MAX_BODY_BYTES",
        "CLIENT_ORIGIN",
        "ENABLE_HSTS",
    ):
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture()
def clock() -> FrozenClock:
    return FrozenClock()


@pytest.fixture()
def token_service(clock: FrozenClock) -> TokenService:
    return TokenService(TEST_SECRET, clock=clock)


@pytest.fixture()
def config() -> AppConfig:
    return AppConfig(JWT_SECRET=TEST_SECRET)


@pytest.fixture()
def flask_app(config: AppConfig, clock: FrozenClock) -> Flask:
    return create_app(config, container=Container(config, clock=clock))


@pytest.fixture()
def client(flask_app: Flask) -> Iterator[FlaskClient]:
    with flask_app.test_client() as test_client:
        yield test_client
