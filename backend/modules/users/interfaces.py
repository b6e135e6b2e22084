"""
User module interface.

Other modules should depend on IUserService, not the concrete implementation.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import AuthenticatedUser
from .models import User, UserUpdateRequest


@runtime_checkable
class IUserService(Protocol):
    """
    Interface for the user directory.

    Lookups return None for missing users; operations that require the
    user to exist raise UserNotFoundError instead.
    """

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get a user by email, or None."""
        ...

    async def get_user(self, user_id: str) -> User:
        """
        Get a user by ID.

        Raises:
            UserNotFoundError: If no user has this ID
        """
        ...

    async def require_user(self, email: str) -> User:
        """
        Get the user behind an authenticated email.

        Raises:
            UserNotFoundError: If the email no longer maps to a user
        """
        ...

    async def require_admin(self, email: str) -> User:
        """
        Get the user behind an email and check the admin role.

        Raises:
            UserNotFoundError: If the email no longer maps to a user
            InsufficientPermissionsError: If the user is not an admin
        """
        ...

    async def update_user(
        self,
        caller: AuthenticatedUser,
        request: UserUpdateRequest,
    ) -> User:
        """
        Apply a partial update to a user.

        Raises:
            UserNotFoundError: If the target user does not exist
            UserUpdateForbiddenError: If a non-admin targets another user
            EmailAlreadyRegisteredError: If the new email is taken
        """
        ...
