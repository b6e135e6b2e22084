"""API models package."""

from .errors import ErrorResponse
from .responses import APIResponse, DataResponse, TokenResponse

__all__ = [
    "ErrorResponse",
    "APIResponse",
    "DataResponse",
    "TokenResponse",
]
