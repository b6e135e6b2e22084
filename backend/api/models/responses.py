"""
Response envelope models.

Every endpoint answers with `error` and `message`; successful calls may
add `data` and/or `token`.
"""

from typing import Any, Optional
from pydantic import BaseModel


class APIResponse(BaseModel):
    """Minimal response envelope."""

    error: bool = False
    message: str


class DataResponse(APIResponse):
    """Envelope carrying a payload and, for registration, a token."""

    data: Any = None
    token: Optional[str] = None


class TokenResponse(APIResponse):
    """Envelope carrying a freshly issued token."""

    token: str
