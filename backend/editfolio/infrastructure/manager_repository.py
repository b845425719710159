"""Manager Repository — SQLAlchemy adapter for the ManagerRepository protocol."""

from editfolio.core.domain_types import UserId
from editfolio.infrastructure.sql_repository import SqlRepository
from editfolio.models.manager import Manager


class SqlAlchemyManagerRepository(SqlRepository):
    """Persists Manager profiles keyed by their user's id."""

    resource_type = "Manager"

    async def get_by_id(self, user_id: UserId) -> Manager | None:
        async with self._scope() as session:
            return await session.get(Manager, user_id)

    async def save(self, manager: Manager) -> None:
        await self._upsert(manager, str(manager.id))
