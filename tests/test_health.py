# tests/test_health.py
from fastapi import status


def test_health_endpoint(client) -> None:
    response = client.get("/health")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"status": "ok"}


def test_root_describes_the_service(client, test_settings) -> None:
    response = client.get("/")
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["name"] == test_settings.app_name
    assert data["version"] == test_settings.app_version


def test_app_state_carries_settings(app, test_settings) -> None:
    assert app.state.settings is test_settings
    assert app.state.token_codec.ttl.total_seconds() == 3600
