"""Boundary Protocols — contracts between the use-case layer and persistence/token adapters.

Invariants:
    - Use cases NEVER import concrete repositories — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by the shell via dependency injection
    - A tx-scoped repository has the same shape as the plain one

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - transaction() is an async context manager: commit on normal exit, rollback on exception
    - with_tx() binds a second repository to an already-open transaction (Manager joins User's tx)
"""

from contextlib import AbstractAsyncContextManager
from datetime import datetime
from typing import Any, Protocol

from editfolio.core.domain_types import TokenClaims, UserId


class UserLike(Protocol):
    """Structural contract for User entities crossing the boundary."""
    id: UserId
    username: str
    role: str
    deleted_at: datetime | None


class UserRepository(Protocol):
    """Contract for user persistence — implemented by shell."""

    @property
    def tx(self) -> Any: ...

    async def get_by_id(self, user_id: UserId) -> Any | None: ...
    async def get_by_username(self, username: str) -> Any | None: ...
    async def save(self, user: Any) -> None: ...
    def transaction(self) -> AbstractAsyncContextManager["UserRepository"]: ...
    def with_tx(self, tx: Any) -> "UserRepository": ...


class ManagerRepository(Protocol):
    """Contract for manager profile persistence — implemented by shell."""

    @property
    def tx(self) -> Any: ...

    async def get_by_id(self, user_id: UserId) -> Any | None: ...
    async def save(self, manager: Any) -> None: ...
    def transaction(self) -> AbstractAsyncContextManager["ManagerRepository"]: ...
    def with_tx(self, tx: Any) -> "ManagerRepository": ...


class TokenGenerator(Protocol):
    """Contract for session token minting/verification — implemented by shell."""
    def generate(self, user: UserLike) -> str: ...
    def decode(self, token: str) -> TokenClaims: ...
