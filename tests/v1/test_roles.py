# tests/v1/test_roles.py
"""Tests for role endpoints."""

from fastapi import status

ROLE_URL = "/v1/role"


def test_create_role(client) -> None:
    response = client.post(ROLE_URL, json={"name": "Community Admin"})
    assert response.status_code == status.HTTP_200_OK
    data = response.json()["content"]["data"]
    assert data["name"] == "Community Admin"
    assert data["id"]


def test_create_duplicate_role(client, member_role) -> None:
    response = client.post(ROLE_URL, json={"name": member_role.name})
    assert response.status_code == status.HTTP_409_CONFLICT
    assert response.json()["errors"][0]["field"] == "name"


def test_create_role_name_too_short(client) -> None:
    response = client.post(ROLE_URL, json={"name": "x"})
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["errors"][0]["field"] == "name"


def test_list_roles_paginates(client, make_role) -> None:
    for i in range(12):
        make_role(f"Role {i:02d}")

    first = client.get(ROLE_URL).json()["content"]
    second = client.get(ROLE_URL, params={"page": 2}).json()["content"]

    assert len(first["data"]) == 10
    assert [r["name"] for r in second["data"]] == ["Role 10", "Role 11"]
    assert first["meta"] == {"total": 12, "pages": 2, "page": 1}
    assert second["meta"]["page"] == 2


def test_list_roles_when_empty(client) -> None:
    content = client.get(ROLE_URL).json()["content"]
    assert content["data"] == []
    assert content["meta"] == {"total": 0, "pages": 0, "page": 1}
