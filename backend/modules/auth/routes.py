"""
Registration and login endpoints.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_auth_service
from api.models.responses import DataResponse, TokenResponse

from .interfaces import IAuthService
from .models import LoginRequest, RegisterRequest

router = APIRouter()


@router.post("/register", response_model=DataResponse, status_code=201)
async def register_user(
    request: RegisterRequest,
    service: IAuthService = Depends(get_auth_service),
) -> DataResponse:
    """
    Register a user after email verification.

    Returns the new user and a token so the client is logged in at once.
    """
    result = await service.register(
        name=request.name,
        email=request.email,
        phone=request.phone,
        password=request.password,
    )
    return DataResponse(message="Registration successful", data=result.user, token=result.token)


@router.post("/login", response_model=TokenResponse)
async def login(
    request: LoginRequest,
    service: IAuthService = Depends(get_auth_service),
) -> TokenResponse:
    """Exchange email and password for a token."""
    result = await service.login(request.email, request.password)
    return TokenResponse(message="Login successful", token=result.token)
