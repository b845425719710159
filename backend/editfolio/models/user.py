"""User ORM — persists an account: identity, credential, role and soft-delete state.

Invariants:
    - id is a UUID primary key assigned eagerly by User.create (known before flush)
    - username is unique across ALL rows, soft-deleted ones included
    - password_hash is never exposed; only compare_password/update_password touch it
    - role is fixed at creation (no transition operation exists)
    - Lifecycle: active -> soft-deleted (deleted_at set); there is no way back

Design Decisions:
    - Entity behaviour lives on the ORM class: the use case mutates loaded
      entities and hands them back to the repository unchanged
    - role stored as String(20) holding UserRole values (str Enum compares equal)
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from editfolio.core.credentials import hash_password, verify_password
from editfolio.core.domain_types import UserId, UserRole, role_allows
from editfolio.db.base import Base


class User(Base):
    """User entity — login identity for customers and managers."""
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    username: Mapped[str] = mapped_column(
        String(255), nullable=False, unique=True, index=True,
    )
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(
        String(20), nullable=False, default=UserRole.CUSTOMER.value,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
    deleted_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )

    @classmethod
    def create(cls, role: UserRole, username: str) -> "User":
        """New active user with its id already assigned."""
        return cls(
            id=UserId(uuid.uuid4()), username=username, role=role.value,
            password_hash="",
        )

    def update_password(self, password: str) -> None:
        self.password_hash = hash_password(password)

    def compare_password(self, password: str) -> bool:
        return verify_password(password, self.password_hash)

    def has_capability(self, required: UserRole) -> bool:
        return role_allows(self.role, required)

    @property
    def is_admin_like(self) -> bool:
        return self.has_capability(UserRole.ADMIN)

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def soft_delete(self) -> None:
        self.deleted_at = datetime.now(timezone.utc)

    def __repr__(self) -> str:
        return f"User(id={self.id!s}, role={self.role}, deleted={self.is_deleted})"
