"""ORM Models — SQLAlchemy declarative models for the account domain.

Invariants:
    - All models inherit from Base (db/base.py)
    - User is the aggregate root; Manager shares its primary key

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before
      create_all / alembic autogenerate run
"""

from editfolio.models.user import User  # noqa: F401
from editfolio.models.manager import Manager  # noqa: F401
