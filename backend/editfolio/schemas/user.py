"""User Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - Names are stripped and 2-60 chars; nicknames 1-60 chars
    - Emails double as usernames and are stripped + lower-cased before validation
    - Mobile format: 010XXXXXXXX (10-11 digits, leading 01)
    - Password fields are never echoed back in any response model

Design Decisions:
    - camelCase aliases (oldPassword/newPassword) kept for existing clients;
      populate_by_name lets tests and internal callers use snake_case
    - Annotated Email type over repeated validators: one definition, reused per field
"""

from typing import Annotated
from uuid import UUID

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"
MOBILE_PATTERN = r"^01\d{8,9}$"


def _normalize_email(v: object) -> object:
    return v.strip().lower() if isinstance(v, str) else v


Email = Annotated[
    str,
    BeforeValidator(_normalize_email),
    Field(max_length=255, pattern=EMAIL_PATTERN),
]
Password = Annotated[str, Field(min_length=4, max_length=128)]
Nickname = Annotated[str, Field(min_length=1, max_length=60)]


class _NamedProfile(BaseModel):
    name: str = Field(min_length=2, max_length=60)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if len(v) < 2:
            raise ValueError("name must have at least 2 non-blank characters")
        return v


class CreateCustomerRequest(_NamedProfile):
    """Customer sign-up — mobile becomes the initial password."""
    email: Email
    mobile: str = Field(pattern=MOBILE_PATTERN)


class CreateAdminRequest(_NamedProfile):
    """Admin creation by a super admin."""
    email: Email
    password: Password
    nickname: Nickname


class SignInRequest(BaseModel):
    username: Annotated[
        str, BeforeValidator(_normalize_email), Field(min_length=1, max_length=255),
    ]
    password: str = Field(min_length=1, max_length=128)


class UpdatePasswordRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    old_password: str = Field(alias="oldPassword", min_length=1, max_length=128)
    new_password: Password = Field(alias="newPassword")


class UpdateAdminInfoRequest(_NamedProfile):
    """Profile change; username is the new login email."""
    username: Email
    nickname: Nickname


class ForceUpdateAdminInfoRequest(UpdateAdminInfoRequest):
    password: Password


class CreatedUserResponse(BaseModel):
    id: UUID


class SignInResponse(BaseModel):
    token: str
