# tests/test_authorization.py
"""Tests for ownership and admin/moderator checks."""

import pytest

from memberhub.core.errors import CommunityNotFound, NotAllowedAccess
from memberhub.services.authorization import AuthorizationGate


def test_owner_check(db_session, community, test_user, other_user) -> None:
    gate = AuthorizationGate(db_session)
    assert gate.is_owner(test_user.id, community.id)
    assert not gate.is_owner(other_user.id, community.id)
    assert not gate.is_owner(test_user.id, "missing")


def test_require_owner(db_session, community, test_user, other_user) -> None:
    gate = AuthorizationGate(db_session)
    assert gate.require_owner(test_user.id, community.id).id == community.id
    with pytest.raises(NotAllowedAccess):
        gate.require_owner(other_user.id, community.id)
    with pytest.raises(CommunityNotFound):
        gate.require_owner(test_user.id, "missing")


@pytest.mark.parametrize("role_fixture", ["admin_role", "moderator_role"])
def test_privileged_roles(request, db_session, community, other_user, add_member, role_fixture) -> None:
    role = request.getfixturevalue(role_fixture)
    add_member(community, other_user, role)
    assert AuthorizationGate(db_session).is_admin_or_moderator(other_user.id)


def test_ordinary_member_is_not_privileged(db_session, community, other_user, add_member, member_role) -> None:
    add_member(community, other_user, member_role)
    assert not AuthorizationGate(db_session).is_admin_or_moderator(other_user.id)


def test_ownership_alone_is_not_privileged(db_session, community, test_user) -> None:
    assert not AuthorizationGate(db_session).is_admin_or_moderator(test_user.id)


class TestRemovalScope:
    """A privileged role elsewhere counts only under the global scope."""

    @pytest.fixture()
    def scenario(self, db_session, make_user, make_community, add_member, community, admin_role, member_role):
        moderator = make_user(name="Elsewhere Admin")
        elsewhere = make_community("Elsewhere", moderator)
        add_member(elsewhere, moderator, admin_role)
        target = add_member(community, make_user(name="Target"), member_role)
        return moderator, target

    def test_global_scope_accepts_role_in_any_community(self, db_session, scenario) -> None:
        moderator, target = scenario
        gate = AuthorizationGate(db_session, removal_scope="global")
        assert gate.can_remove_member(moderator.id, target)
        gate.require_member_removal(moderator.id, target)

    def test_community_scope_requires_role_in_target_community(self, db_session, scenario) -> None:
        moderator, target = scenario
        gate = AuthorizationGate(db_session, removal_scope="community")
        assert not gate.can_remove_member(moderator.id, target)
        with pytest.raises(NotAllowedAccess):
            gate.require_member_removal(moderator.id, target)

    def test_community_scope_accepts_role_in_target_community(
        self, db_session, scenario, community, add_member, moderator_role
    ) -> None:
        moderator, target = scenario
        add_member(community, moderator, moderator_role)
        gate = AuthorizationGate(db_session, removal_scope="community")
        assert gate.can_remove_member(moderator.id, target)
