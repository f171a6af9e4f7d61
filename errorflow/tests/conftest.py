from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import AbstractContextManager, contextmanager

import pytest
from flask import Flask
from flask.testing import FlaskClient
from loguru import logger

from errorflow.app import create_app
from errorflow.shared.config import AppConfig

RESPONDER_MODULE = "errorflow.shared.errors.http"


@pytest.fixture()
def make_app() -> Callable[[str], Flask]:
    def _make(app_env: str = "test") -> Flask:
        return create_app(AppConfig(APP_ENV=app_env))

    return _make


@pytest.fixture()
def app(make_app: Callable[[str], Flask]) -> Flask:
    return make_app("test")


@pytest.fixture()
def client(app: Flask) -> Iterator[FlaskClient]:
    with app.test_client() as c:
        yield c


@pytest.fixture()
def capture_diagnostics() -> Callable[[], AbstractContextManager[list[dict]]]:
    """Collect records written by the error responder.

    Enter it after the app is built: ``create_app`` replaces every sink.
    """

    @contextmanager
    def _capture() -> Iterator[list[dict]]:
        records: list[dict] = []
        handler_id = logger.add(
            lambda message: records.append(message.record),
            level="ERROR",
            filter=RESPONDER_MODULE,
        )
        try:
            yield records
        finally:
            logger.remove(handler_id)

    return _capture
