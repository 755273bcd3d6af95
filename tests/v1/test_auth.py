# tests/v1/test_auth.py
"""Tests for sign-up, sign-in and the current-account endpoint."""

from fastapi import status

from memberhub.models import User

SIGNUP_URL = "/v1/auth/signup"
SIGNIN_URL = "/v1/auth/signin"
ME_URL = "/v1/auth/me"


def test_signup_returns_user_and_token(client, codec, db_session) -> None:
    """Registering returns the new account and a token naming it."""
    response = client.post(
        SIGNUP_URL,
        json={"name": "Ada Lovelace", "email": "ada@example.com", "password": "analytical"},
    )
    assert response.status_code == status.HTTP_200_OK
    body = response.json()
    assert body["status"] is True
    user = body["content"]["data"]
    assert user["email"] == "ada@example.com"
    assert user["name"] == "Ada Lovelace"
    assert "password" not in user
    assert codec.verify(body["content"]["meta"]["access_token"]) == user["id"]
    assert db_session.get(User, user["id"]).password_hash != "analytical"


def test_signup_without_name(client) -> None:
    response = client.post(SIGNUP_URL, json={"email": "anon@example.com", "password": "secret1"})
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["content"]["data"]["name"] is None


def test_signup_duplicate_email(client, test_user) -> None:
    """A second sign-up with a registered email is refused."""
    response = client.post(SIGNUP_URL, json={"email": test_user.email, "password": "secret1"})
    assert response.status_code == status.HTTP_409_CONFLICT
    body = response.json()
    assert body["status"] is False
    assert body["errors"] == [
        {
            "code": "RESOURCE_EXISTS",
            "message": "User with this email address already exists.",
            "field": "email",
        }
    ]


def test_signup_invalid_input(client) -> None:
    response = client.post(SIGNUP_URL, json={"name": "A", "email": "not-an-email", "password": "123"})
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    errors = response.json()["errors"]
    assert {e["field"] for e in errors} == {"name", "email", "password"}
    assert all(e["code"] == "INVALID_INPUT" for e in errors)


def test_signin_token_round_trip(client, test_user) -> None:
    """A token from sign-in authenticates the same user on /me."""
    response = client.post(SIGNIN_URL, json={"email": test_user.email, "password": "correct-horse"})
    assert response.status_code == status.HTTP_200_OK
    token = response.json()["content"]["meta"]["access_token"]

    me = client.get(ME_URL, headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == status.HTTP_200_OK
    assert me.json()["content"]["data"]["id"] == test_user.id


def test_signin_wrong_password(client, test_user) -> None:
    response = client.post(SIGNIN_URL, json={"email": test_user.email, "password": "wrong-horse"})
    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json()["errors"][0]["code"] == "INVALID_CREDENTIALS"


def test_signin_unknown_email_looks_like_wrong_password(client, test_user) -> None:
    unknown = client.post(SIGNIN_URL, json={"email": "nobody@example.com", "password": "correct-horse"})
    wrong = client.post(SIGNIN_URL, json={"email": test_user.email, "password": "wrong-horse"})
    assert unknown.status_code == wrong.status_code == status.HTTP_401_UNAUTHORIZED
    assert unknown.json() == wrong.json()


def test_me_requires_token(client) -> None:
    response = client.get(ME_URL)
    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json()["errors"][0]["code"] == "NOT_SIGNEDIN"


def test_me_rejects_garbage_token(client) -> None:
    response = client.get(ME_URL, headers={"Authorization": "Bearer garbage"})
    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json()["errors"][0]["code"] == "INVALID_TOKEN"


def test_me_with_token_for_deleted_user(client, codec) -> None:
    response = client.get(ME_URL, headers={"Authorization": f"Bearer {codec.issue('404')}"})
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_me_returns_current_user(client, test_user, auth_token) -> None:
    response = client.get(ME_URL, headers=auth_token)
    assert response.status_code == status.HTTP_200_OK
    data = response.json()["content"]["data"]
    assert data["email"] == test_user.email
    assert data["name"] == test_user.name
