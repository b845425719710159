"""API Dependencies — wiring of use cases, token adapter and role guards.

Invariants:
    - Use cases are built per request from the process-wide db manager
    - Guards accept only a verified bearer token of an active account;
      role checked against the stored user via User.has_capability()
    - Guards raise EditfolioError subclasses so the global handler shapes the response

Design Decisions:
    - FastAPI Depends over a DI container: tests swap pieces via dependency_overrides
"""

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from editfolio.config import Settings, get_settings
from editfolio.core.domain_types import TokenClaims, UserId, UserRole
from editfolio.core.errors import AuthenticationError, PermissionDeniedError
from editfolio.infrastructure.database import DatabaseSessionManager, get_db_manager
from editfolio.infrastructure.manager_repository import SqlAlchemyManagerRepository
from editfolio.infrastructure.token_adapter import JwtTokenGenerator
from editfolio.infrastructure.user_repository import SqlAlchemyUserRepository
from editfolio.services.user_use_case import UserUseCase

bearer_scheme = HTTPBearer(auto_error=False)


def get_token_generator(
    settings: Settings = Depends(get_settings),
) -> JwtTokenGenerator:
    return JwtTokenGenerator(
        settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        expires_in_seconds=settings.jwt_expires_in_seconds,
    )


def get_user_use_case(
    db: DatabaseSessionManager = Depends(get_db_manager),
    tokens: JwtTokenGenerator = Depends(get_token_generator),
    settings: Settings = Depends(get_settings),
) -> UserUseCase:
    return UserUseCase(
        SqlAlchemyUserRepository(db),
        SqlAlchemyManagerRepository(db),
        tokens,
        timeout_seconds=settings.use_case_timeout_seconds,
    )


def get_user_repository(
    db: DatabaseSessionManager = Depends(get_db_manager),
) -> SqlAlchemyUserRepository:
    return SqlAlchemyUserRepository(db)


async def get_current_claims(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    tokens: JwtTokenGenerator = Depends(get_token_generator),
) -> TokenClaims:
    if credentials is None:
        raise AuthenticationError("Not authenticated")
    return tokens.decode(credentials.credentials)


def require_role(required: UserRole):
    """Dependency factory: claims of an active caller holding at least `required`.

    The caller is reloaded, so a soft-deleted account or a changed role takes
    effect before the token expires. Returned claims carry the stored role.
    """

    async def guard(
        claims: TokenClaims = Depends(get_current_claims),
        users: SqlAlchemyUserRepository = Depends(get_user_repository),
    ) -> TokenClaims:
        user = await users.get_by_id(claims.user_id)
        if user is None or user.is_deleted:
            raise AuthenticationError("Account no longer available")
        if not user.has_capability(required):
            raise PermissionDeniedError(required.value)
        return TokenClaims(
            user_id=UserId(user.id), username=user.username, role=UserRole(user.role),
        )

    return guard


require_admin = require_role(UserRole.ADMIN)
require_super_admin = require_role(UserRole.SUPER_ADMIN)
