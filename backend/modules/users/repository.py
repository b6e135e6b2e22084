"""
User repository for database access.

Encapsulates the Supabase queries for the `users` table. Lookups return
None when the row is absent. The table carries a unique index on email;
violations surface as EmailAlreadyRegisteredError.
"""

from typing import Any, Optional

from postgrest.exceptions import APIError

from shared.models import is_unique_violation
from shared.repository import BaseRepository
from .exceptions import EmailAlreadyRegisteredError
from .models import User, UserRole


class UserRepository(BaseRepository[User]):
    """
    Repository for user data access.

    Note: This repository does NOT perform authorization checks.
    The service layer is responsible for role and ownership rules.
    """

    table_name = "users"

    def insert(
        self,
        name: str,
        email: str,
        phone: str,
        password_hash: str,
        user_type: UserRole = UserRole.NORMAL,
    ) -> User:
        """
        Insert a new user record.

        Returns:
            The stored user with its generated ID.

        Raises:
            EmailAlreadyRegisteredError: If the email is already taken.
        """
        now = self._now()
        data = {
            "name": name,
            "email": email,
            "phone": phone,
            "password": password_hash,
            "user_type": user_type.value,
            "created_at": now,
            "updated_at": now,
        }
        try:
            result = self._table().insert(data).execute()
        except APIError as e:
            if is_unique_violation(e):
                raise EmailAlreadyRegisteredError(email) from e
            raise
        return self._map_to_user(result.data[0])

    def get_by_email(self, email: str) -> Optional[User]:
        """Get a user by email, or None if not found."""
        result = self._table().select("*").eq("email", email).execute()
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def get_by_id(self, user_id: str) -> Optional[User]:
        """Get a user by ID, or None if not found."""
        if not self._is_valid_id(user_id):
            return None
        result = self._table().select("*").eq("id", user_id).execute()
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def update(self, user: User) -> User:
        """
        Persist a full user record over the stored one.

        Raises:
            EmailAlreadyRegisteredError: If the new email is already taken.
        """
        data = user.model_dump(exclude={"id"}, mode="json")
        try:
            self._table().update(data).eq("id", user.id).execute()
        except APIError as e:
            if is_unique_violation(e):
                raise EmailAlreadyRegisteredError(user.email) from e
            raise
        return user

    def _map_to_user(self, data: dict[str, Any]) -> User:
        """Map database row to User model."""
        return User(
            id=str(data["id"]),
            name=data.get("name", ""),
            email=data["email"],
            phone=data.get("phone", ""),
            password=data.get("password", ""),
            user_type=UserRole(data.get("user_type", UserRole.NORMAL.value)),
            created_at=data.get("created_at", 0),
            updated_at=data.get("updated_at", 0),
        )
