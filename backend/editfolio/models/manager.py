"""Manager ORM — profile record for Admin/SuperAdmin users.

Invariants:
    - id is BOTH primary key and FK to users.id (strict 1:1)
    - Exists iff the associated User is admin-like
    - username mirrors User.username; apply_profile keeps them in step
    - FK checked at commit: User and Manager rows may flush in either order

Design Decisions:
    - No ORM relationship to User: the use case loads both sides with two
      independent lookups keyed by the same id and merges them itself
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from editfolio.db.base import Base


class Manager(Base):
    """Manager entity — display profile of an administrator."""
    __tablename__ = "managers"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey(
            "users.id", ondelete="CASCADE",
            deferrable=True, initially="DEFERRED",
        ),
        primary_key=True,
    )
    name: Mapped[str] = mapped_column(String(60), nullable=False)
    nickname: Mapped[str] = mapped_column(String(60), nullable=False)
    username: Mapped[str] = mapped_column(String(255), nullable=False)
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

    @classmethod
    def create(cls, user, name: str, nickname: str) -> "Manager":
        """Profile for `user`, sharing its id and username."""
        return cls(
            id=user.id, name=name, nickname=nickname, username=user.username,
        )

    def apply_profile(self, username: str, name: str, nickname: str) -> None:
        self.username = username
        self.name = name
        self.nickname = nickname
