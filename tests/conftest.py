from unittest.mock import Mock

import pytest

from app.config.settings import settings
from app.services.player_store import PlayerStore, get_player_store
from app.services.proxy_notifier import get_proxy_notifier


@pytest.fixture
def store(tmp_path):
    path = tmp_path / "players.json"
    path.write_text("[]", encoding="utf-8")
    return PlayerStore(path)


@pytest.fixture
def notifier_stub():
    return Mock(notify_ready=Mock(return_value=None))


@pytest.fixture
def client(store, notifier_stub):
    from fastapi.testclient import TestClient

    from app.main import app

    app.dependency_overrides[get_player_store] = lambda: store
    app.dependency_overrides[get_proxy_notifier] = lambda: notifier_stub
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    return {settings.API_KEY_HEADER: settings.API_KEY}
