"""
User module exceptions.
"""

from shared.exceptions import ConflictError, NotFoundError, AuthorizationError


class UserNotFoundError(NotFoundError):
    """Raised when a user record does not exist."""

    def __init__(self, identifier: str):
        super().__init__(
            "user does not exist",
            code="USER_NOT_FOUND",
            details={"user": identifier},
        )


class EmailAlreadyRegisteredError(ConflictError):
    """Raised when a user with this email already exists."""

    def __init__(self, email: str):
        super().__init__(
            "user already registered with this email",
            code="EMAIL_ALREADY_REGISTERED",
            details={"email": email},
        )


class UserUpdateForbiddenError(AuthorizationError):
    """Raised when a non-admin tries to update someone else's record."""

    def __init__(self, target_id: str):
        super().__init__(
            "not authorized to update this user",
            code="USER_UPDATE_FORBIDDEN",
            details={"user_id": target_id},
        )
