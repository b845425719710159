"""User Repository — SQLAlchemy adapter for the UserRepository protocol.

Invariants:
    - Lookups return soft-deleted rows too; filtering is a use-case rule
    - get_by_username matches the exact stored username
"""

from sqlalchemy import select

from editfolio.core.domain_types import UserId
from editfolio.infrastructure.sql_repository import SqlRepository
from editfolio.models.user import User


class SqlAlchemyUserRepository(SqlRepository):
    """Persists User entities."""

    resource_type = "User"

    async def get_by_id(self, user_id: UserId) -> User | None:
        async with self._scope() as session:
            return await session.get(User, user_id)

    async def get_by_username(self, username: str) -> User | None:
        async with self._scope() as session:
            result = await session.execute(
                select(User).where(User.username == username),
            )
            return result.scalar_one_or_none()

    async def save(self, user: User) -> None:
        await self._upsert(user, user.username)
