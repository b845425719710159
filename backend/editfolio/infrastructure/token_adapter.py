"""JWT Token Adapter — mints and verifies session tokens for signed-in users.

Invariants:
    - Claims: sub (user id), username, role, iat, exp
    - decode() never returns unverified claims; expired/invalid -> AuthenticationError
    - Secrets and raw tokens are never logged

Design Decisions:
    - PyJWT HS256 with a shared secret from settings: single service, no key rotation yet
"""

import logging
from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt

from editfolio.core.domain_types import TokenClaims, UserId, UserRole
from editfolio.core.errors import AuthenticationError
from editfolio.core.repository_protocols import UserLike

logger = logging.getLogger(__name__)


class JwtTokenGenerator:
    """TokenGenerator implementation backed by PyJWT."""

    def __init__(
        self, secret: str, algorithm: str = "HS256", expires_in_seconds: int = 86_400,
    ):
        self._secret = secret
        self._algorithm = algorithm
        self._expires_in = timedelta(seconds=expires_in_seconds)

    def generate(self, user: UserLike) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "sub": str(user.id),
            "username": user.username,
            "role": UserRole(user.role).value,
            "iat": int(now.timestamp()),
            "exp": int((now + self._expires_in).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def decode(self, token: str) -> TokenClaims:
        try:
            payload = jwt.decode(
                token, self._secret, algorithms=[self._algorithm],
                options={"require": ["sub", "role", "exp"]},
            )
        except jwt.ExpiredSignatureError:
            raise AuthenticationError("Token has expired")
        except jwt.InvalidTokenError as e:
            logger.warning(f"Rejected session token: {type(e).__name__}")
            raise AuthenticationError("Invalid token")
        try:
            return TokenClaims(
                user_id=UserId(UUID(payload["sub"])),
                username=payload.get("username", ""),
                role=UserRole(payload["role"]),
            )
        except ValueError:
            raise AuthenticationError("Invalid token")
