"""User request schemas — normalization and field limits at the API boundary.

Invariants:
    - Emails are stripped and lower-cased
    - Mobile must match 01 + 8-9 digits
    - Password update accepts camelCase aliases and snake_case names
"""

import pytest
from pydantic import ValidationError

from editfolio.schemas.user import (
    CreateAdminRequest, CreateCustomerRequest, ForceUpdateAdminInfoRequest,
    SignInRequest, UpdatePasswordRequest,
)


def test_customer_email_normalized():
    req = CreateCustomerRequest(name=" ljs ", email=" LJS@Mail.com ", mobile="01012345678")
    assert req.email == "ljs@mail.com"
    assert req.name == "ljs"


@pytest.mark.parametrize("mobile", ["0101234567", "01012345678"])
def test_customer_accepts_10_and_11_digit_mobiles(mobile):
    assert CreateCustomerRequest(name="ljs", email="a@b.com", mobile=mobile).mobile == mobile


@pytest.mark.parametrize("mobile", ["12345678901", "010-1234-5678", "010123"])
def test_customer_rejects_malformed_mobile(mobile):
    with pytest.raises(ValidationError):
        CreateCustomerRequest(name="ljs", email="a@b.com", mobile=mobile)


def test_blank_name_rejected():
    with pytest.raises(ValidationError):
        CreateAdminRequest(name="   ", email="a@b.com", password="Pw1!", nickname="K")


def test_admin_requires_nickname():
    with pytest.raises(ValidationError):
        CreateAdminRequest(name="Kim", email="a@b.com", password="Pw1!", nickname="")


def test_invalid_email_rejected():
    with pytest.raises(ValidationError):
        CreateAdminRequest(name="Kim", email="not-an-email", password="Pw1!", nickname="K")


def test_sign_in_username_lower_cased():
    assert SignInRequest(username="A@B.com", password="x").username == "a@b.com"


def test_update_password_accepts_aliases_and_field_names():
    by_alias = UpdatePasswordRequest.model_validate(
        {"oldPassword": "old1", "newPassword": "new1"},
    )
    by_name = UpdatePasswordRequest(old_password="old1", new_password="new1")
    assert by_alias == by_name


def test_force_update_requires_password():
    with pytest.raises(ValidationError):
        ForceUpdateAdminInfoRequest(name="Kim", username="a@b.com", nickname="K")
