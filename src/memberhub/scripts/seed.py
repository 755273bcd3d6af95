"""Populate a development database with users, communities, roles and members.

The three built-in roles are created if missing. Every seeded user gets the
same password so the accounts can be used to sign in.
"""
from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass, field

from faker import Faker
from sqlalchemy.orm import Session

from memberhub.core.errors import AlreadyMember, DuplicateEmail, DuplicateSlug
from memberhub.core.logging_config import configure_logging
from memberhub.core.settings import get_settings
from memberhub.db.session import create_db_engine, create_session_factory, create_tables
from memberhub.models import Community, Role, User
from memberhub.models.role import ADMIN_ROLE_NAME, MEMBER_ROLE_NAME, MODERATOR_ROLE_NAME
from memberhub.repositories.community_repo import CommunityRepository
from memberhub.repositories.member_repo import MemberRepository
from memberhub.repositories.role_repo import RoleRepository
from memberhub.repositories.user_repo import UserRepository

logger = logging.getLogger(__name__)

DEFAULT_ROLES = (ADMIN_ROLE_NAME, MODERATOR_ROLE_NAME, MEMBER_ROLE_NAME)


@dataclass
class SeedResult:
    roles: list[Role] = field(default_factory=list)
    users: list[User] = field(default_factory=list)
    communities: list[Community] = field(default_factory=list)
    members: int = 0


def seed_roles(session: Session) -> list[Role]:
    """Ensure the built-in roles exist and return them in a fixed order."""
    repo = RoleRepository(session)
    roles = []
    for name in DEFAULT_ROLES:
        role, created = repo.get_or_create(name)
        if created:
            logger.info("Created role %s", name)
        roles.append(role)
    return roles


def seed(
    session: Session,
    *,
    users: int = 10,
    communities: int = 5,
    members_per_community: int = 3,
    password: str = "password123",
    bcrypt_rounds: int = 10,
    fake: Faker | None = None,
) -> SeedResult:
    """Insert sample data generated by ``fake`` and commit it."""
    fake = fake or Faker()
    result = SeedResult(roles=seed_roles(session))
    session.commit()

    user_repo = UserRepository(session, bcrypt_rounds=bcrypt_rounds)
    for _ in range(users):
        email = fake.unique.email()
        try:
            result.users.append(user_repo.create(email=email, password=password, name=fake.name()))
        except DuplicateEmail:
            logger.debug("Skipping duplicate seed email %s", email)
            continue
        session.commit()

    community_repo = CommunityRepository(session)
    for i in range(min(communities, len(result.users))):
        name = fake.unique.company()
        try:
            community = community_repo.create(name, owner_id=result.users[i].id)
        except DuplicateSlug:
            logger.debug("Skipping duplicate seed community %s", name)
            continue
        session.commit()
        result.communities.append(community)

    member_repo = MemberRepository(session)
    for community in result.communities:
        for j, user in enumerate(result.users[:members_per_community]):
            role = result.roles[j % len(result.roles)]
            try:
                member_repo.add(community.id, user.id, role.id)
            except AlreadyMember:
                continue
            session.commit()
            result.members += 1

    return result


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Seed the configured database with sample data")
    parser.add_argument("--users", type=int, default=10, help="Number of users to create")
    parser.add_argument("--communities", type=int, default=5, help="Number of communities to create")
    parser.add_argument(
        "--members-per-community",
        type=int,
        default=3,
        help="Number of seeded users placed in each community",
    )
    parser.add_argument("--password", default="password123", help="Password shared by seeded users")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible data")
    args = parser.parse_args(argv)

    fake = Faker()
    if args.seed is not None:
        fake.seed_instance(args.seed)

    settings = get_settings()
    configure_logging(settings.log_level)
    engine = create_db_engine(settings)
    create_tables(engine)
    session = create_session_factory(engine)()
    try:
        result = seed(
            session,
            users=args.users,
            communities=args.communities,
            members_per_community=args.members_per_community,
            password=args.password,
            bcrypt_rounds=settings.bcrypt_rounds,
            fake=fake,
        )
    finally:
        session.close()
        engine.dispose()

    logger.info(
        "Seeded %d roles, %d users, %d communities, %d members",
        len(result.roles),
        len(result.users),
        len(result.communities),
        result.members,
    )


if __name__ == "__main__":
    main()
