"""
Authentication module exceptions.

These exceptions are raised by the auth module and caught by the API
error handler to return the matching HTTP response.
"""

from shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    StorefrontError,
    ValidationError,
)


class InvalidTokenError(AuthenticationError):
    """Raised when a JWT token is invalid or malformed."""

    def __init__(self, message: str = "Invalid authentication token"):
        super().__init__(message, code="INVALID_TOKEN")


class ExpiredTokenError(AuthenticationError):
    """Raised when a JWT token has expired."""

    def __init__(self, message: str = "Authentication token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class MissingTokenError(AuthenticationError):
    """Raised when no authentication token is provided."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="MISSING_TOKEN")


class AuthConfigurationError(AuthenticationError):
    """Raised when tokens cannot be validated because no secret is configured."""

    def __init__(self):
        super().__init__(
            "Server authentication not configured",
            code="AUTH_NOT_CONFIGURED",
        )


class TokenSigningError(StorefrontError):
    """Raised when a token cannot be signed."""

    def __init__(self, reason: str):
        super().__init__(
            f"Could not sign token: {reason}",
            code="TOKEN_SIGNING_FAILED",
        )


class CredentialHashError(StorefrontError):
    """Raised when a password could not be hashed."""

    def __init__(self):
        super().__init__(
            "Could not hash password",
            code="CREDENTIAL_HASH_FAILED",
        )


class UserNotRegisteredError(NotFoundError):
    """Raised when logging in with an email that has no account."""

    def __init__(self, email: str):
        super().__init__(
            "user is not registered",
            code="USER_NOT_REGISTERED",
            details={"email": email},
        )


class PasswordMismatchError(AuthenticationError):
    """Raised when the supplied password does not match the stored hash."""

    def __init__(self):
        super().__init__("password does not match", code="PASSWORD_MISMATCH")


class EmailNotVerifiedError(ValidationError):
    """Raised when registering with an email that has not been verified."""

    def __init__(self, email: str):
        super().__init__(
            "email is not verified",
            code="EMAIL_NOT_VERIFIED",
            details={"email": email},
        )


class InsufficientPermissionsError(AuthorizationError):
    """Raised when user lacks required permissions."""

    def __init__(self, required_role: str, user_role: str):
        super().__init__(
            f"Insufficient permissions. Required: {required_role}, has: {user_role}",
            code="INSUFFICIENT_PERMISSIONS",
            details={"required_role": required_role, "user_role": user_role},
        )


class PasswordTooLongError(ValidationError):
    """Raised when a new password exceeds what bcrypt can hash."""

    def __init__(self, max_bytes: int):
        super().__init__(
            f"password can't be longer than {max_bytes} bytes",
            code="PASSWORD_TOO_LONG",
            details={"max_bytes": max_bytes},
        )
