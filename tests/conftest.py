import pytest

from hello_server import config, logging_config
from hello_server.app import create_app
from hello_server.config import Settings

_ENV_VARS = (
    "HELLO_SERVER_HOST",
    "HELLO_SERVER_PORT",
    "HELLO_SERVER_DEBUG",
    "HELLO_SERVER_LOG_LEVEL",
    "HELLO_SERVER_ENV",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Isolate every test from the caller's HELLO_SERVER_* variables and cached state."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config, "_settings", None)
    monkeypatch.setattr(logging_config, "_configured", False)


@pytest.fixture()
def app():
    app = create_app(Settings())
    app.config["TESTING"] = True
    return app


@pytest.fixture()
def client(app):
    return app.test_client()
