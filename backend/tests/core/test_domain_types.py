"""Domain Types — verifies role ranking and the single role-capability check.

Tests:
    - UserId wraps UUID
    - role_allows is monotone in rank: higher roles carry lower capabilities
    - is_admin_like covers exactly Admin and SuperAdmin
    - has_role matches one role only, never its superiors
    - Raw DB strings accepted wherever a role is expected
"""

from uuid import uuid4

import pytest

from editfolio.core.domain_types import (
    UserId, UserRole, has_role, role_allows, is_admin_like,
)


def test_user_id_wraps_uuid():
    uid = uuid4()
    assert UserId(uid) == uid


def test_user_role_has_three_roles():
    assert {r.value for r in UserRole} == {"customer", "admin", "super_admin"}


def test_every_role_allows_its_own_capability():
    for role in UserRole:
        assert role_allows(role, role)


def test_super_admin_allows_admin_and_customer():
    assert role_allows(UserRole.SUPER_ADMIN, UserRole.ADMIN)
    assert role_allows(UserRole.SUPER_ADMIN, UserRole.CUSTOMER)


def test_admin_does_not_allow_super_admin():
    assert not role_allows(UserRole.ADMIN, UserRole.SUPER_ADMIN)


def test_customer_allows_nothing_above_customer():
    assert not role_allows(UserRole.CUSTOMER, UserRole.ADMIN)
    assert not role_allows(UserRole.CUSTOMER, UserRole.SUPER_ADMIN)


def test_is_admin_like():
    assert is_admin_like(UserRole.ADMIN)
    assert is_admin_like(UserRole.SUPER_ADMIN)
    assert not is_admin_like(UserRole.CUSTOMER)


def test_role_allows_accepts_stored_string():
    assert role_allows("admin", UserRole.ADMIN)
    assert not role_allows("customer", UserRole.ADMIN)


def test_unknown_role_string_is_rejected():
    with pytest.raises(ValueError):
        role_allows("root", UserRole.ADMIN)


def test_has_role_is_exact():
    assert has_role(UserRole.ADMIN, UserRole.ADMIN)
    assert has_role("customer", UserRole.CUSTOMER)
    assert not has_role(UserRole.SUPER_ADMIN, UserRole.ADMIN)
    assert not has_role(UserRole.ADMIN, UserRole.CUSTOMER)


def test_has_role_rejects_unknown_role_string():
    with pytest.raises(ValueError):
        has_role("owner", UserRole.ADMIN)
