import pytest

pytest.importorskip("httpx", reason="httpx is required for the FastAPI test client")


def test_health_is_public(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["ok"] is True


def test_health_storage_reports_player_count(client, store, auth_headers):
    client.get("/players/abc", headers=auth_headers)

    response = client.get("/health/storage")

    assert response.json() == {"ok": True, "path": str(store.path), "players": 1}


def test_health_storage_reports_corruption(client, store):
    store.path.write_text("[1, 2", encoding="utf-8")

    response = client.get("/health/storage")

    assert response.status_code == 200
    assert response.json()["ok"] is False
