"""User Routes — HTTP boundary for customer/admin account flows.

Invariants:
    - Request bodies validated by Pydantic before reaching the handler
    - Acting user for self-service admin routes comes from the token, never the body
    - Sign-in never reveals whether the username or the password was wrong

Design Decisions:
    - Thin handlers: build command → call use case → map result to status code
    - Domain errors propagate to the global handler except where a route
      deliberately reshapes them (sign-in, own-password update)
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from editfolio.api.dependencies import (
    get_user_use_case, require_admin, require_super_admin,
)
from editfolio.core.domain_types import TokenClaims, UserId
from editfolio.core.errors import (
    AuthenticationError, ItemNotFoundError, WrongPasswordError,
)
from editfolio.core.user_commands import (
    CreateAdminUser, CreateCustomerUser, ForceUpdateAdminInfo, SignInUser,
    UpdateAdminInfo, UpdateAdminPassword,
)
from editfolio.schemas.user import (
    CreateAdminRequest, CreateCustomerRequest, CreatedUserResponse,
    ForceUpdateAdminInfoRequest, SignInRequest, SignInResponse,
    UpdateAdminInfoRequest, UpdatePasswordRequest,
)
from editfolio.services.user_use_case import UserUseCase

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/user", tags=["user"])


@router.post(
    "/customer", response_model=CreatedUserResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_customer(
    body: CreateCustomerRequest,
    use_case: UserUseCase = Depends(get_user_use_case),
):
    """Create a customer user; the mobile number is the initial password."""
    new_id = await use_case.create_customer_user(CreateCustomerUser(
        name=body.name, email=body.email, mobile=body.mobile,
    ))
    return CreatedUserResponse(id=new_id)


@router.post("/sign", response_model=SignInResponse)
async def sign_in(
    body: SignInRequest,
    use_case: UserUseCase = Depends(get_user_use_case),
):
    """Exchange username/password for a session token."""
    try:
        token = await use_case.sign_in(
            SignInUser(username=body.username, password=body.password),
        )
    except (ItemNotFoundError, WrongPasswordError):
        raise AuthenticationError("Invalid username or password")
    return SignInResponse(token=token)


@router.post(
    "/admin", response_model=CreatedUserResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_admin(
    body: CreateAdminRequest,
    claims: TokenClaims = Depends(require_super_admin),
    use_case: UserUseCase = Depends(get_user_use_case),
):
    """Create an admin user together with its manager profile."""
    new_id = await use_case.create_admin_user(CreateAdminUser(
        name=body.name, email=body.email,
        password=body.password, nickname=body.nickname,
    ))
    logger.info("Admin created by super admin", extra={"user_id": claims.user_id})
    return CreatedUserResponse(id=new_id)


@router.patch("/admin/pw", status_code=status.HTTP_204_NO_CONTENT)
async def update_admin_password(
    body: UpdatePasswordRequest,
    claims: TokenClaims = Depends(require_admin),
    use_case: UserUseCase = Depends(get_user_use_case),
):
    """Change the calling admin's own password."""
    try:
        await use_case.update_admin_password(UpdateAdminPassword(
            user_id=claims.user_id,
            old_password=body.old_password,
            new_password=body.new_password,
        ))
    except ItemNotFoundError:
        raise AuthenticationError("Account no longer available")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/admin", status_code=status.HTTP_204_NO_CONTENT)
async def update_admin_info(
    body: UpdateAdminInfoRequest,
    claims: TokenClaims = Depends(require_admin),
    use_case: UserUseCase = Depends(get_user_use_case),
):
    """Change the calling admin's username, name and nickname."""
    await use_case.update_admin_info(UpdateAdminInfo(
        user_id=claims.user_id, username=body.username,
        name=body.name, nickname=body.nickname,
    ))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/admin/{user_id}/force", status_code=status.HTTP_204_NO_CONTENT)
async def force_update_admin_info(
    user_id: UUID,
    body: ForceUpdateAdminInfoRequest,
    claims: TokenClaims = Depends(require_super_admin),
    use_case: UserUseCase = Depends(get_user_use_case),
):
    """Overwrite another admin's profile and password."""
    await use_case.force_update_admin_info(ForceUpdateAdminInfo(
        user_id=UserId(user_id), username=body.username,
        name=body.name, nickname=body.nickname, password=body.password,
    ))
    logger.info("Admin info force-updated", extra={"user_id": claims.user_id})
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/customer/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_customer(
    user_id: UUID,
    claims: TokenClaims = Depends(require_admin),
    use_case: UserUseCase = Depends(get_user_use_case),
):
    """Soft-delete a customer."""
    await use_case.delete_customer_user(UserId(user_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/admin/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_admin(
    user_id: UUID,
    claims: TokenClaims = Depends(require_super_admin),
    use_case: UserUseCase = Depends(get_user_use_case),
):
    """Soft-delete an admin."""
    await use_case.delete_admin_user(UserId(user_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
