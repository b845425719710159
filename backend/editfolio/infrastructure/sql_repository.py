"""SQL Repository Base — session scoping shared by all SQLAlchemy repositories.

Invariants:
    - Unbound repository: every call runs in its own short-lived session
      (writes commit before returning)
    - Bound repository (tx set): every call runs on the transaction's session,
      holding its lock; nothing commits until the transaction block exits
    - with_tx() and transaction() return instances of the SAME class

Design Decisions:
    - Short-lived sessions outside a transaction: independent lookups can
      run truly concurrently on separate pooled connections
    - save() = merge + flush: upsert by primary key; a unique-key violation
      surfaces as ItemAlreadyExistsError instead of a generic DatabaseError
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Self

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from editfolio.core.errors import ItemAlreadyExistsError
from editfolio.infrastructure.database import DatabaseSessionManager, SqlTransaction


class SqlRepository:
    """Base for repositories that may be bound to an open SqlTransaction."""

    resource_type = "Item"

    def __init__(
        self, db: DatabaseSessionManager, tx: SqlTransaction | None = None,
    ):
        self._db = db
        self._tx = tx

    @property
    def tx(self) -> SqlTransaction | None:
        return self._tx

    def with_tx(self, tx: SqlTransaction) -> Self:
        return type(self)(self._db, tx)

    @asynccontextmanager
    async def transaction(self) -> AsyncGenerator[Self, None]:
        async with self._db.transaction() as tx:
            yield self.with_tx(tx)

    @asynccontextmanager
    async def _scope(self, write: bool = False) -> AsyncGenerator[AsyncSession, None]:
        if self._tx is not None:
            async with self._tx.lock:
                yield self._tx.session
            return
        async with self._db.session() as session:
            yield session
            if write:
                await session.commit()

    async def _upsert(self, entity, key: str) -> None:
        async with self._scope(write=True) as session:
            await session.merge(entity)
            try:
                await session.flush()
            except IntegrityError as e:
                raise ItemAlreadyExistsError(self.resource_type, key) from e
