"""
Shared infrastructure for the Storefront backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: Base exception classes
- repository: Base repository

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import create_supabase_client, get_supabase_client, ping_database, reset_client_cache
from .exceptions import (
    StorefrontError,
    NotFoundError,
    ValidationError,
    ConflictError,
    AuthenticationError,
    AuthorizationError,
    ExternalServiceError,
)
from .models import AuthenticatedUser, mask_email

__all__ = [
    "Settings",
    "get_settings",
    "create_supabase_client",
    "get_supabase_client",
    "ping_database",
    "reset_client_cache",
    "StorefrontError",
    "NotFoundError",
    "ValidationError",
    "ConflictError",
    "AuthenticationError",
    "AuthorizationError",
    "ExternalServiceError",
    "AuthenticatedUser",
    "mask_email",
]
