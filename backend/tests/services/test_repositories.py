"""SQLAlchemy repositories — session scoping, upsert and transaction binding.

Invariants:
    - Unbound save() commits immediately
    - Writes through transaction()/with_tx() are invisible until the block exits
      and discarded when it raises
    - A unique username collision surfaces as ItemAlreadyExistsError
"""

import pytest

from editfolio.core.domain_types import UserRole
from editfolio.core.errors import ItemAlreadyExistsError
from editfolio.models.manager import Manager
from editfolio.models.user import User


def _user(username="u@b.com", role=UserRole.CUSTOMER):
    user = User.create(role, username)
    user.update_password("secret")
    return user


async def test_save_then_lookup_by_id_and_username(user_repo):
    user = _user()
    await user_repo.save(user)

    by_id = await user_repo.get_by_id(user.id)
    by_name = await user_repo.get_by_username("u@b.com")
    assert by_id.id == by_name.id == user.id
    assert by_id.compare_password("secret")


async def test_lookup_of_missing_user_returns_none(user_repo):
    assert await user_repo.get_by_username("nobody@b.com") is None


async def test_save_existing_user_updates_row(user_repo):
    user = _user()
    await user_repo.save(user)

    loaded = await user_repo.get_by_id(user.id)
    loaded.soft_delete()
    await user_repo.save(loaded)

    assert (await user_repo.get_by_id(user.id)).is_deleted


async def test_duplicate_username_raises_already_exists(user_repo):
    await user_repo.save(_user())

    with pytest.raises(ItemAlreadyExistsError) as exc_info:
        await user_repo.save(_user())
    assert exc_info.value.key == "u@b.com"


async def test_transaction_commits_both_repositories(user_repo, manager_repo):
    user = _user(role=UserRole.ADMIN)
    manager = Manager.create(user, name="Kim", nickname="K")

    async with user_repo.transaction() as users:
        managers = manager_repo.with_tx(users.tx)
        assert managers.tx is users.tx
        await users.save(user)
        await managers.save(manager)

    assert await user_repo.get_by_id(user.id) is not None
    assert (await manager_repo.get_by_id(user.id)).nickname == "K"


async def test_transaction_rolls_back_on_error(user_repo):
    user = _user()

    with pytest.raises(RuntimeError):
        async with user_repo.transaction() as users:
            await users.save(user)
            raise RuntimeError("abort")

    assert await user_repo.get_by_id(user.id) is None


async def test_with_tx_returns_same_repository_type(user_repo, manager_repo):
    async with user_repo.transaction() as users:
        assert type(users) is type(user_repo)
        assert type(manager_repo.with_tx(users.tx)) is type(manager_repo)
    assert user_repo.tx is None
