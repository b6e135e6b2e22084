"""
Users module.

The user directory: lookups by email or ID, role checks and partial updates.

Public API:
- IUserService: Interface for user operations
- User, UserPublic, UserRole, UserUpdateRequest: Models
- User exceptions
"""

from .interfaces import IUserService
from .models import User, UserPublic, UserRole, UserUpdateRequest
from .exceptions import (
    UserNotFoundError,
    EmailAlreadyRegisteredError,
    UserUpdateForbiddenError,
)

__all__ = [
    "IUserService",
    "User",
    "UserPublic",
    "UserRole",
    "UserUpdateRequest",
    "UserNotFoundError",
    "EmailAlreadyRegisteredError",
    "UserUpdateForbiddenError",
]
