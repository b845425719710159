"""User Use Case — account lifecycle and authentication for customers and managers.

Invariants:
    - Every operation runs under one fixed time budget; expiry -> UseCaseTimeoutError
    - A soft-deleted user is treated as absent by every flow except the
      create-admin duplicate check (usernames stay reserved after deletion)
    - Admin User and its Manager are written in ONE transaction, both saves
      issued concurrently; a failure of either leaves neither persisted
    - Admin info updates (plain and forced) run in one transaction as well
    - Token generator is called only after the credential matched
    - Sign-in hashes the supplied password even when the username is unknown

Design Decisions:
    - Repositories and token adapter injected as Protocols (ADR: no singletons)
    - Role checks go through User.has_capability / has_role only;
      "admin-like" means role_allows(role, ADMIN)
    - Wrapping update-admin-info in a transaction closes the partial-write gap
      that independent concurrent saves would leave open
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from editfolio.core.credentials import verify_password_decoy
from editfolio.core.domain_types import UserId, UserRole, has_role, is_admin_like
from editfolio.core.errors import (
    ItemAlreadyExistsError, ItemNotFoundError, UseCaseTimeoutError,
    WrongPasswordError,
)
from editfolio.core.repository_protocols import (
    ManagerRepository, TokenGenerator, UserRepository,
)
from editfolio.core.user_commands import (
    CreateAdminUser, CreateCustomerUser, ForceUpdateAdminInfo, SignInUser,
    UpdateAdminInfo, UpdateAdminPassword,
)
from editfolio.models.manager import Manager
from editfolio.models.user import User
from editfolio.services.concurrency import run_concurrently

logger = logging.getLogger(__name__)


def _is_active(user: User | None) -> bool:
    return user is not None and not user.is_deleted


def _is_active_with_role(user: User | None, role: UserRole) -> bool:
    return _is_active(user) and has_role(user.role, role)


class UserUseCase:
    """Orchestrates create / update / delete / sign-in flows."""

    def __init__(
        self,
        user_repo: UserRepository,
        manager_repo: ManagerRepository,
        token_generator: TokenGenerator,
        timeout_seconds: float,
    ):
        self._user_repo = user_repo
        self._manager_repo = manager_repo
        self._tokens = token_generator
        self._timeout = timeout_seconds

    @asynccontextmanager
    async def _deadline(self, operation: str) -> AsyncGenerator[None, None]:
        try:
            async with asyncio.timeout(self._timeout):
                yield
        except TimeoutError as e:
            logger.error(
                f"Use case timed out after {self._timeout}s",
                extra={"operation": operation},
            )
            raise UseCaseTimeoutError(operation, self._timeout) from e

    # ─── Create ─────────────────────────────────────────────────

    async def create_customer_user(self, cmd: CreateCustomerUser) -> UserId:
        """Customer login is the email; the mobile number is the first password."""
        async with self._deadline("create_customer_user"):
            user = User.create(UserRole.CUSTOMER, cmd.email)
            user.update_password(cmd.mobile)
            async with self._user_repo.transaction() as users:
                await users.save(user)
            logger.info("Customer created", extra={"user_id": user.id})
            return UserId(user.id)

    async def create_admin_user(
        self, cmd: CreateAdminUser, role: UserRole = UserRole.ADMIN,
    ) -> UserId:
        """Admin user + Manager profile, atomically."""
        if not is_admin_like(role):
            raise ValueError(f"create_admin_user cannot create role '{role.value}'")
        async with self._deadline("create_admin_user"):
            if await self._user_repo.get_by_username(cmd.email) is not None:
                raise ItemAlreadyExistsError("User", cmd.email)

            user = User.create(role, cmd.email)
            user.update_password(cmd.password)
            manager = Manager.create(user, name=cmd.name, nickname=cmd.nickname)

            async with self._user_repo.transaction() as users:
                managers = self._manager_repo.with_tx(users.tx)
                await run_concurrently(users.save(user), managers.save(manager))
            logger.info(
                f"{role.value} created", extra={"user_id": user.id},
            )
            return UserId(user.id)

    # ─── Authenticate ───────────────────────────────────────────

    async def sign_in(self, cmd: SignInUser) -> str:
        async with self._deadline("sign_in"):
            user = await self._user_repo.get_by_username(cmd.username)
            if not _is_active(user):
                verify_password_decoy(cmd.password)
                raise ItemNotFoundError("User", cmd.username)
            if not user.compare_password(cmd.password):
                raise WrongPasswordError()
            return self._tokens.generate(user)

    # ─── Update ─────────────────────────────────────────────────

    async def update_admin_password(self, cmd: UpdateAdminPassword) -> None:
        async with self._deadline("update_admin_password"):
            user = await self._user_repo.get_by_id(cmd.user_id)
            if not _is_active(user) or not user.is_admin_like:
                raise ItemNotFoundError("Admin", str(cmd.user_id))
            if not user.compare_password(cmd.old_password):
                raise WrongPasswordError()
            user.update_password(cmd.new_password)
            await self._user_repo.save(user)

    async def update_admin_info(self, cmd: UpdateAdminInfo) -> None:
        async with self._deadline("update_admin_info"):
            await self._apply_admin_info(cmd, new_password=None)

    async def force_update_admin_info(self, cmd: ForceUpdateAdminInfo) -> None:
        """Privileged variant: also resets the password without the old one."""
        async with self._deadline("force_update_admin_info"):
            await self._apply_admin_info(cmd, new_password=cmd.password)

    async def _apply_admin_info(
        self, cmd: UpdateAdminInfo, new_password: str | None,
    ) -> None:
        async with self._user_repo.transaction() as users:
            managers = self._manager_repo.with_tx(users.tx)

            owner = await users.get_by_username(cmd.username)
            if owner is not None and owner.id != cmd.user_id:
                raise ItemAlreadyExistsError("User", cmd.username)

            user, manager = await run_concurrently(
                users.get_by_id(cmd.user_id), managers.get_by_id(cmd.user_id),
            )
            if not _is_active(user) or not user.is_admin_like or manager is None:
                raise ItemNotFoundError("Admin", str(cmd.user_id))

            user.username = cmd.username
            if new_password is not None:
                user.update_password(new_password)
            manager.apply_profile(
                username=cmd.username, name=cmd.name, nickname=cmd.nickname,
            )
            await run_concurrently(users.save(user), managers.save(manager))
        logger.info("Admin info updated", extra={"user_id": cmd.user_id})

    # ─── Delete ─────────────────────────────────────────────────

    async def delete_customer_user(self, user_id: UserId) -> None:
        async with self._deadline("delete_customer_user"):
            await self._soft_delete(user_id, UserRole.CUSTOMER, "Customer")

    async def delete_admin_user(self, user_id: UserId) -> None:
        async with self._deadline("delete_admin_user"):
            await self._soft_delete(user_id, UserRole.ADMIN, "Admin")

    async def _soft_delete(
        self, user_id: UserId, role: UserRole, resource_type: str,
    ) -> None:
        user = await self._user_repo.get_by_id(user_id)
        if not _is_active_with_role(user, role):
            raise ItemNotFoundError(resource_type, str(user_id))
        user.soft_delete()
        await self._user_repo.save(user)
        logger.info(f"{resource_type} soft-deleted", extra={"user_id": user_id})
