"""
User API endpoints.

All routes require authentication. Role and ownership rules live in the
service.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_auth_service, get_user_service
from api.middleware.auth import get_current_user
from api.models.responses import DataResponse
from shared.models import AuthenticatedUser
from modules.auth.interfaces import IAuthService

from .interfaces import IUserService
from .models import UserUpdateRequest

router = APIRouter()


@router.get("/me", response_model=DataResponse)
async def get_current_user_profile(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> DataResponse:
    """Get the caller's own profile."""
    profile = await service.require_user(user.email)
    return DataResponse(message="success", data=profile.to_public())


@router.get("/{user_id}", response_model=DataResponse)
async def get_single_user(
    user_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> DataResponse:
    """Get a user by ID. The password hash is never returned."""
    found = await service.get_user(user_id)
    return DataResponse(message="success", data=found.to_public())


@router.put("", response_model=DataResponse)
async def update_user(
    request: UserUpdateRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
    auth: IAuthService = Depends(get_auth_service),
) -> DataResponse:
    """
    Partially update a user.

    Only fields present in the body are changed. Without an `id` the
    caller's own record is updated. Changing one's own email returns a
    new token, since the old one names the previous address.
    """
    updated = await service.update_user(user, request)
    token = None
    if updated.id == user.id and updated.email != user.email:
        token = auth.issue_token(updated)
    return DataResponse(message="success", data=updated.to_public(), token=token)
