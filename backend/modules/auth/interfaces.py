"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
This enables testing with mocks.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import AuthenticatedUser
from modules.users.models import User
from .models import LoginResult, RegistrationResult


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    This protocol defines the contract that the auth module exposes
    to other modules. Implementations must provide all these methods.
    """

    async def register(
        self,
        name: str,
        email: str,
        phone: str,
        password: str,
    ) -> RegistrationResult:
        """
        Register a user whose email has been verified.

        Returns:
            The created user (without password) and a token

        Raises:
            ValidationError: If a required field is empty
            EmailNotVerifiedError: If the email is not verified
            EmailAlreadyRegisteredError: If the email is taken
            CredentialHashError: If the password could not be hashed
            TokenSigningError: If the token could not be signed
        """
        ...

    async def login(self, email: str, password: str) -> LoginResult:
        """
        Check credentials and issue a token.

        Raises:
            UserNotRegisteredError: If no user has this email
            PasswordMismatchError: If the password is wrong
        """
        ...

    def issue_token(self, user: User) -> str:
        """
        Sign a token for a stored user.

        Raises:
            TokenSigningError: If the token could not be signed
        """
        ...

    async def validate_token(self, token: Optional[str]) -> AuthenticatedUser:
        """
        Validate a JWT token and return the authenticated user.

        Raises:
            AuthenticationError: If token is missing, invalid or expired
        """
        ...
