import pytest
from fastapi.testclient import TestClient

from blog_api.app.core.config import Settings
from blog_api.app.core.db import Storage
from blog_api.app.main import create_app


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "data" / "test.sqlite")


@pytest.fixture
def storage(db_path):
    handle = Storage(db_path)
    handle.open()
    yield handle
    handle.close()


@pytest.fixture
def make_client(db_path):
    """Build a started TestClient; keyword arguments override Settings fields."""
    clients = []

    def _make(**overrides):
        overrides.setdefault("database_path", db_path)
        config = Settings(**overrides)
        app = create_app(config, Storage(config.database_path))
        client = TestClient(app)
        client.__enter__()
        clients.append(client)
        return client

    yield _make
    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture
def client(make_client):
    return make_client()
