"""
User directory service.

Wraps the user repository with the lookups and role checks the rest of
the application needs, and implements the partial-update operation.
"""

import logging
import time
from typing import Optional

from modules.auth.exceptions import (
    CredentialHashError,
    InsufficientPermissionsError,
    PasswordTooLongError,
)
from modules.auth.hashing import MAX_PASSWORD_BYTES, PasswordHasher, password_too_long
from shared.models import AuthenticatedUser

from .exceptions import (
    EmailAlreadyRegisteredError,
    UserNotFoundError,
    UserUpdateForbiddenError,
)
from .interfaces import IUserService
from .models import User, UserRole, UserUpdateRequest
from .repository import UserRepository

logger = logging.getLogger(__name__)


class UserService(IUserService):
    """User directory backed by the users table."""

    def __init__(self, repository: UserRepository, hasher: PasswordHasher):
        self._repo = repository
        self._hasher = hasher

    async def get_by_email(self, email: str) -> Optional[User]:
        return self._repo.get_by_email(email)

    async def get_user(self, user_id: str) -> User:
        user = self._repo.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    async def require_user(self, email: str) -> User:
        user = self._repo.get_by_email(email)
        if user is None:
            raise UserNotFoundError(email)
        return user

    async def require_admin(self, email: str) -> User:
        user = await self.require_user(email)
        if not user.is_admin:
            raise InsufficientPermissionsError(
                required_role=UserRole.ADMIN.value,
                user_role=user.user_type.value,
            )
        return user

    async def update_user(
        self,
        caller: AuthenticatedUser,
        request: UserUpdateRequest,
    ) -> User:
        """
        Merge the explicitly sent fields over the stored record.

        The target defaults to the caller. Only admins may update other
        users. A new password is hashed before it is stored.
        """
        acting = await self.require_user(caller.email)
        target_id = request.id or acting.id
        if target_id != acting.id and not acting.is_admin:
            raise UserUpdateForbiddenError(target_id)

        existing = acting if target_id == acting.id else await self.get_user(target_id)
        changes = request.changes()

        new_email = changes.get("email")
        if new_email and new_email != existing.email:
            if self._repo.get_by_email(new_email) is not None:
                raise EmailAlreadyRegisteredError(new_email)

        if "password" in changes:
            if password_too_long(changes["password"]):
                raise PasswordTooLongError(MAX_PASSWORD_BYTES)
            hashed = self._hasher.hash(changes["password"])
            if not hashed:
                raise CredentialHashError()
            changes["password"] = hashed

        changes["updated_at"] = int(time.time())
        merged = existing.model_copy(update=changes)
        updated = self._repo.update(merged)
        logger.info(f"Updated user {updated.id} fields: {sorted(k for k in changes if k != 'updated_at')}")
        return updated
