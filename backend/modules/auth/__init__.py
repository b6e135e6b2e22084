"""
Authentication module.

Handles password hashing, JWT issuing and validation, registration and login.

Public API:
- IAuthService: Interface for auth operations
- TokenClaims: Decoded token claims
- Auth exceptions: InvalidTokenError, ExpiredTokenError, etc.
"""

from .interfaces import IAuthService
from .models import TokenClaims, RegisterRequest, LoginRequest
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    AuthConfigurationError,
    TokenSigningError,
    CredentialHashError,
    UserNotRegisteredError,
    PasswordMismatchError,
    EmailNotVerifiedError,
    InsufficientPermissionsError,
    PasswordTooLongError,
)

__all__ = [
    # Interface
    "IAuthService",
    # Models
    "TokenClaims",
    "RegisterRequest",
    "LoginRequest",
    # Exceptions
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "AuthConfigurationError",
    "TokenSigningError",
    "CredentialHashError",
    "UserNotRegisteredError",
    "PasswordMismatchError",
    "EmailNotVerifiedError",
    "InsufficientPermissionsError",
    "PasswordTooLongError",
]
