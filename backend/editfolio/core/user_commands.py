"""User Commands — immutable inputs for the user use-case operations.

Invariants:
    - Commands are built at the HTTP boundary (or CLI) after validation
    - Secret fields are excluded from repr so commands are safe to log
"""

from dataclasses import dataclass, field

from editfolio.core.domain_types import UserId


@dataclass(frozen=True)
class CreateCustomerUser:
    name: str
    email: str
    mobile: str = field(repr=False)


@dataclass(frozen=True)
class CreateAdminUser:
    name: str
    email: str
    password: str = field(repr=False)
    nickname: str


@dataclass(frozen=True)
class SignInUser:
    username: str
    password: str = field(repr=False)


@dataclass(frozen=True)
class UpdateAdminPassword:
    user_id: UserId
    old_password: str = field(repr=False)
    new_password: str = field(repr=False)


@dataclass(frozen=True)
class UpdateAdminInfo:
    """Profile change requested by the admin themself."""
    user_id: UserId
    username: str
    name: str
    nickname: str


@dataclass(frozen=True)
class ForceUpdateAdminInfo(UpdateAdminInfo):
    """Privileged profile change — also resets the password, no old-password check."""
    password: str = field(repr=False)
