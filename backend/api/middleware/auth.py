"""
JWT authentication gate.

Validates bearer tokens on protected routes and exposes the caller's
identity. The gate establishes identity only; role checks are done by
services against the stored user record.
"""

from typing import Optional
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from modules.auth.exceptions import MissingTokenError
from modules.auth.interfaces import IAuthService
from shared.models import AuthenticatedUser

from ..dependencies import get_auth_service

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth: IAuthService = Depends(get_auth_service),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Stores the identity on request.state.user for downstream code.
    Raises an AuthenticationError subclass (rendered as 401) when the
    token is missing, malformed, wrongly signed or expired.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"email": user.email}
    """
    if credentials is None:
        raise MissingTokenError("Missing authorization header")

    user = await auth.validate_token(credentials.credentials)
    request.state.user = user
    return user
