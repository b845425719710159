"""User/Manager entities — verifies credential handling, role predicates and soft delete.

Tests:
    - User.create assigns an id before any flush
    - Password is stored hashed; compare succeeds only for the current password
    - is_admin_like follows role_allows
    - soft_delete is the only lifecycle transition
    - Manager mirrors its user's id/username; apply_profile updates all three fields
"""

from editfolio.core.credentials import (
    hash_password, verify_password, verify_password_decoy,
)
from editfolio.core.domain_types import UserRole
from editfolio.models.manager import Manager
from editfolio.models.user import User


def test_create_assigns_id_and_role():
    user = User.create(UserRole.ADMIN, "a@b.com")
    assert user.id is not None
    assert user.role == UserRole.ADMIN
    assert user.username == "a@b.com"
    assert not user.is_deleted


def test_password_is_never_stored_plain():
    user = User.create(UserRole.CUSTOMER, "c@d.com")
    user.update_password("01012345678")
    assert user.password_hash != "01012345678"
    assert "01012345678" not in user.password_hash


def test_compare_password_after_update():
    user = User.create(UserRole.ADMIN, "a@b.com")
    user.update_password("old-secret")
    user.update_password("new-secret")
    assert user.compare_password("new-secret")
    assert not user.compare_password("old-secret")


def test_compare_password_without_credential_is_false():
    user = User.create(UserRole.ADMIN, "a@b.com")
    assert not user.compare_password("")
    assert not user.compare_password("anything")


def test_admin_like_predicate():
    assert User.create(UserRole.ADMIN, "a@x.com").is_admin_like
    assert User.create(UserRole.SUPER_ADMIN, "s@x.com").is_admin_like
    assert not User.create(UserRole.CUSTOMER, "c@x.com").is_admin_like


def test_has_capability_uses_rank():
    super_admin = User.create(UserRole.SUPER_ADMIN, "s@x.com")
    admin = User.create(UserRole.ADMIN, "a@x.com")
    assert super_admin.has_capability(UserRole.SUPER_ADMIN)
    assert not admin.has_capability(UserRole.SUPER_ADMIN)


def test_soft_delete_sets_timestamp():
    user = User.create(UserRole.CUSTOMER, "c@d.com")
    user.soft_delete()
    assert user.is_deleted
    assert user.deleted_at is not None


def test_manager_mirrors_user():
    user = User.create(UserRole.ADMIN, "a@b.com")
    manager = Manager.create(user, name="Kim", nickname="K")
    assert manager.id == user.id
    assert manager.username == "a@b.com"
    assert manager.nickname == "K"


def test_manager_apply_profile():
    user = User.create(UserRole.ADMIN, "a@b.com")
    manager = Manager.create(user, name="Kim", nickname="K")
    manager.apply_profile(username="new@b.com", name="Lee", nickname="L")
    assert (manager.username, manager.name, manager.nickname) == (
        "new@b.com", "Lee", "L",
    )


def test_verify_password_rejects_malformed_hash():
    assert not verify_password("secret", "not-a-real-hash")
    assert verify_password("secret", hash_password("secret"))


def test_decoy_verify_checks_against_a_real_hash(monkeypatch):
    import editfolio.core.credentials as credentials

    checked = []
    monkeypatch.setattr(
        credentials, "verify_password",
        lambda pw, hashed: checked.append((pw, hashed)) or False,
    )

    verify_password_decoy("guess")

    assert checked == [("guess", credentials._DECOY_HASH)]
    assert credentials._DECOY_HASH.startswith("$pbkdf2-sha256$")
