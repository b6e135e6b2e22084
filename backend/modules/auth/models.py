"""
Authentication module data models.
"""

from typing import Optional
from pydantic import BaseModel, Field

from modules.users.models import UserPublic


class TokenClaims(BaseModel):
    """Decoded and verified JWT claims."""

    sub: str = Field(..., description="Subject (user ID)")
    email: str = Field(..., description="User's email")
    role: str = Field(default="normal", description="User role")
    iss: str = Field(..., description="Issuer")
    iat: int = Field(..., description="Issued at timestamp")
    exp: int = Field(..., description="Expiration timestamp")


class RegisterRequest(BaseModel):
    """Registration payload. Emptiness is checked by the service."""

    name: str = ""
    email: str = ""
    phone: str = ""
    password: str = ""


class LoginRequest(BaseModel):
    """Login payload."""

    email: str = ""
    password: str = ""


class RegistrationResult(BaseModel):
    """A newly registered user and their first token."""

    user: UserPublic
    token: str


class LoginResult(BaseModel):
    """Token issued on login."""

    user_id: str
    token: str
    role: Optional[str] = None
