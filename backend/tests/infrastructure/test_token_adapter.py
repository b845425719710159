"""JWT token adapter — claims round-trip and rejection of bad tokens."""

import jwt
import pytest

from editfolio.core.domain_types import UserRole
from editfolio.core.errors import AuthenticationError
from editfolio.infrastructure.token_adapter import JwtTokenGenerator
from editfolio.models.user import User

SECRET = "unit-test-secret"


@pytest.fixture
def admin():
    return User.create(UserRole.ADMIN, "a@b.com")


def test_generated_token_decodes_to_user_claims(admin):
    tokens = JwtTokenGenerator(SECRET)

    claims = tokens.decode(tokens.generate(admin))

    assert claims.user_id == admin.id
    assert claims.username == "a@b.com"
    assert claims.role == UserRole.ADMIN


def test_expired_token_rejected(admin):
    tokens = JwtTokenGenerator(SECRET, expires_in_seconds=-60)

    with pytest.raises(AuthenticationError, match="expired"):
        tokens.decode(tokens.generate(admin))


def test_token_signed_with_other_secret_rejected(admin):
    token = JwtTokenGenerator("other-secret").generate(admin)

    with pytest.raises(AuthenticationError, match="Invalid token"):
        JwtTokenGenerator(SECRET).decode(token)


def test_token_with_unknown_role_rejected(admin):
    token = jwt.encode(
        {"sub": str(admin.id), "role": "owner", "exp": 4_102_444_800},
        SECRET, algorithm="HS256",
    )
    with pytest.raises(AuthenticationError):
        JwtTokenGenerator(SECRET).decode(token)


def test_token_missing_subject_rejected():
    token = jwt.encode({"role": "admin", "exp": 4_102_444_800}, SECRET, algorithm="HS256")
    with pytest.raises(AuthenticationError):
        JwtTokenGenerator(SECRET).decode(token)
