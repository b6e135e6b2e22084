"""
User module data models.

The stored User carries the password hash; UserPublic is what leaves the
API. UserUpdateRequest is a sparse patch: only fields the client actually
sent are applied, so an explicit value is never confused with an absent one.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, field_validator


class UserRole(str, Enum):
    """Coarse permission level attached to a user."""
    NORMAL = "normal"
    ADMIN = "admin"


class User(BaseModel):
    """A stored user record."""

    id: str
    name: str
    email: str
    phone: str
    password: str = Field(..., description="bcrypt hash, never plaintext")
    user_type: UserRole = UserRole.NORMAL
    created_at: int = 0
    updated_at: int = 0

    @property
    def is_admin(self) -> bool:
        return self.user_type == UserRole.ADMIN

    def to_public(self) -> "UserPublic":
        return UserPublic(**self.model_dump(exclude={"password"}))


class UserPublic(BaseModel):
    """User as returned to clients."""

    id: str
    name: str
    email: str
    phone: str
    user_type: UserRole
    created_at: int
    updated_at: int


class UserUpdateRequest(BaseModel):
    """Partial update of a user. Omitted fields keep their stored value."""

    id: Optional[str] = Field(None, description="Target user; defaults to the caller")
    name: Optional[str] = Field(None, min_length=1)
    email: Optional[str] = Field(None, min_length=3)
    phone: Optional[str] = Field(None, min_length=1)
    password: Optional[str] = Field(None, min_length=1)

    @field_validator("name", "email", "phone", "password", mode="before")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("may be omitted but not null")
        return value

    def changes(self) -> dict:
        """Fields explicitly present in the request, excluding the target id."""
        return self.model_dump(exclude_unset=True, exclude={"id"})
