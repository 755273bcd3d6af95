# tests/conftest.py
from __future__ import annotations

from collections.abc import Callable, Generator, Iterator
from itertools import count

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from memberhub.core.settings import Settings
from memberhub.core.tokens import TokenCodec
from memberhub.db.session import create_tables, drop_tables
from memberhub.db.session import get_db as app_get_session
from memberhub.main import create_app
from memberhub.models import Community, Role, User
from memberhub.repositories.community_repo import CommunityRepository
from memberhub.repositories.member_repo import MemberRepository
from memberhub.repositories.role_repo import RoleRepository
from memberhub.repositories.user_repo import UserRepository

TEST_DB_URL = "sqlite://"
TEST_PASSWORD = "correct-horse"

_EMAIL_COUNTER = count(1)


def _build_settings(**overrides: object) -> Settings:
    values: dict[str, object] = {
        "DATABASE_URL": TEST_DB_URL,
        "PORT": 8000,
        "SECRET_KEY": "test-secret-key",
        "BCRYPT_ROUNDS": 4,
        "LOG_LEVEL": "WARNING",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)  # type: ignore[arg-type]


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """Provide the Settings instance the test application is built with."""
    return _build_settings()


@pytest.fixture()
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_tables(engine)
    try:
        yield engine
    finally:
        drop_tables(engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    SessionLocal = sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


def _make_app(settings: Settings, db_session: Session) -> FastAPI:
    app = create_app(settings)

    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    return app


@pytest.fixture()
def app(test_settings: Settings, db_session: Session) -> FastAPI:
    return _make_app(test_settings, db_session)


@pytest.fixture()
def app_factory(db_session: Session) -> Callable[..., FastAPI]:
    """Build an application with settings overrides, sharing the test session."""

    def _factory(**overrides: object) -> FastAPI:
        return _make_app(_build_settings(**overrides), db_session)

    return _factory


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture()
def codec(test_settings: Settings) -> TokenCodec:
    return TokenCodec.from_settings(test_settings)


@pytest.fixture()
def make_user(db_session: Session) -> Callable[..., User]:
    """Return a factory persisting users with a known password."""

    def _make_user(
        name: str | None = "Test User",
        email: str | None = None,
        password: str = TEST_PASSWORD,
    ) -> User:
        email = email or f"user{next(_EMAIL_COUNTER)}@example.com"
        user = UserRepository(db_session, bcrypt_rounds=4).create(
            email=email, password=password, name=name
        )
        db_session.commit()
        return user

    return _make_user


@pytest.fixture()
def make_role(db_session: Session) -> Callable[[str], Role]:
    def _make_role(name: str) -> Role:
        role = RoleRepository(db_session).create(name)
        db_session.commit()
        return role

    return _make_role


@pytest.fixture()
def make_community(db_session: Session) -> Callable[[str, User], Community]:
    def _make_community(name: str, owner: User) -> Community:
        community = CommunityRepository(db_session).create(name, owner_id=owner.id)
        db_session.commit()
        return community

    return _make_community


@pytest.fixture()
def add_member(db_session: Session) -> Callable[[Community, User, Role], object]:
    def _add_member(community: Community, user: User, role: Role):
        member = MemberRepository(db_session).add(community.id, user.id, role.id)
        db_session.commit()
        return member

    return _add_member


@pytest.fixture()
def test_user(make_user: Callable[..., User]) -> User:
    """Create and return the primary persisted test user."""
    return make_user(name="Test User", email="test@example.com")


@pytest.fixture()
def other_user(make_user: Callable[..., User]) -> User:
    """Create and return a second persisted user."""
    return make_user(name="Other User", email="other@example.com")


@pytest.fixture()
def auth_token(test_user: User, codec: TokenCodec) -> dict[str, str]:
    """Return authorization headers for the primary test user."""
    return {"Authorization": f"Bearer {codec.issue(test_user.id)}"}


@pytest.fixture()
def other_auth_token(other_user: User, codec: TokenCodec) -> dict[str, str]:
    """Return authorization headers for the secondary test user."""
    return {"Authorization": f"Bearer {codec.issue(other_user.id)}"}


@pytest.fixture()
def community(make_community: Callable[[str, User], Community], test_user: User) -> Community:
    """Create a community owned by the primary test user."""
    return make_community("Test Club", test_user)


@pytest.fixture()
def member_role(make_role: Callable[[str], Role]) -> Role:
    return make_role("Member")


@pytest.fixture()
def admin_role(make_role: Callable[[str], Role]) -> Role:
    return make_role("Community Admin")


@pytest.fixture()
def moderator_role(make_role: Callable[[str], Role]) -> Role:
    return make_role("Community Moderator")
