"""
Error response models.

Standardized error responses for the API.
"""

from typing import Any, Optional
from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response format."""

    error: bool = True
    message: str
    code: Optional[str] = None
    details: dict[str, Any] = Field(default_factory=dict)
