"""Domain Types — identity and role types shared across the account domain.

Invariants:
    - UserId wraps UUID — never use bare UUID in use-case signatures
    - Roles are ranked Customer < Admin < SuperAdmin
    - role_allows() and has_role() are the ONLY places role decisions are made

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum for roles: stored as plain strings in the DB and in JWT claims
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", UUID)


# ─── Enums ───────────────────────────────────────────────────────

class UserRole(str, Enum):
    """Account roles — maps to DB `role` column and the `role` token claim."""
    CUSTOMER = "customer"
    ADMIN = "admin"
    SUPER_ADMIN = "super_admin"


_ROLE_RANK: dict[UserRole, int] = {
    UserRole.CUSTOMER: 0,
    UserRole.ADMIN: 1,
    UserRole.SUPER_ADMIN: 2,
}


def role_allows(role: UserRole | str, required: UserRole) -> bool:
    """True when `role` carries every capability of `required`."""
    return _ROLE_RANK[UserRole(role)] >= _ROLE_RANK[required]


def is_admin_like(role: UserRole | str) -> bool:
    """Admin or SuperAdmin — the roles that own a Manager profile."""
    return role_allows(role, UserRole.ADMIN)


def has_role(role: UserRole | str, expected: UserRole) -> bool:
    """Exact role match, for flows restricted to one role and not its superiors."""
    return UserRole(role) == expected


# ─── Identity Claims ─────────────────────────────────────────────

@dataclass(frozen=True)
class TokenClaims:
    """Verified identity carried by a session token."""
    user_id: UserId
    username: str
    role: UserRole
