"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from pydantic import BaseModel, Field


class AuthenticatedUser(BaseModel):
    """
    Represents an authenticated caller.

    Populated from verified token claims by the auth gate and made
    available to route handlers via dependency injection. Carries identity
    only; role checks re-read the user record.
    """

    id: str = Field(..., description="User ID")
    email: str = Field(..., description="User's email address")
    role: str = Field(default="normal", description="Role claimed by the token")

    model_config = {
        "frozen": True,
        "extra": "ignore",
    }


def is_unique_violation(error: Exception) -> bool:
    """Whether a storage error reports a unique-constraint violation."""
    code = getattr(error, "code", None)
    return code == "23505" or "duplicate key" in str(error)


def mask_email(email: str) -> str:
    """Log-safe form of an address: first character of the local part and the domain."""
    local, sep, domain = email.partition("@")
    if not sep:
        return "***"
    return f"{local[:1]}***@{domain}"
