"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from datetime import datetime, timezone, timedelta
from typing import Optional
from unittest.mock import MagicMock

from api.dependencies import reset_container
from shared.database import reset_client_cache
from modules.auth.tokens import TokenIssuer
from modules.users.models import User, UserRole


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"
TEST_JWT_ISSUER = "storefront"

TEST_USER_ID = "5f0c2a8e-1b7d-4c3a-9e21-0d6f4b8a7c11"
TEST_ADMIN_ID = "9a3e7d10-64b2-4f8e-b5c9-2e1d0f7a6b44"


def create_test_token(
    user_id: str = TEST_USER_ID,
    email: str = "test@example.com",
    role: str = "normal",
    expired: bool = False,
    secret: str = TEST_JWT_SECRET,
) -> str:
    """
    Create a test JWT token for authentication.

    Args:
        user_id: User ID to include in the token
        email: Email to include in the token
        role: Role claim
        expired: If True, creates a token issued 49 hours ago
        secret: Signing secret

    Returns:
        JWT token string
    """
    issued_at: Optional[datetime] = None
    if expired:
        issued_at = datetime.now(timezone.utc) - timedelta(hours=49)
    issuer = TokenIssuer(secret=secret, issuer=TEST_JWT_ISSUER, expiration_hours=48)
    return issuer.issue(user_id, email, role, issued_at=issued_at)


def make_user(
    user_id: str = TEST_USER_ID,
    email: str = "test@example.com",
    role: UserRole = UserRole.NORMAL,
    password: str = "$2b$04$notarealhashnotarealhashnotarealhashnotarealhashnotr",
) -> User:
    """Build a stored user record."""
    return User(
        id=user_id,
        name="Test User",
        email=email,
        phone="5551234",
        password=password,
        user_type=role,
        created_at=1700000000,
        updated_at=1700000000,
    )


@pytest.fixture(autouse=True)
def reset_container_singleton():
    """Reset the service container and cached client before and after each test."""
    reset_container()
    reset_client_cache()
    yield
    reset_container()
    reset_client_cache()


@pytest.fixture
def mock_db() -> MagicMock:
    """Mock Supabase client."""
    return MagicMock()


@pytest.fixture
def test_user_id() -> str:
    """Provide a consistent test user ID."""
    return TEST_USER_ID


@pytest.fixture
def test_user_email() -> str:
    """Provide a consistent test user email."""
    return "test@example.com"


@pytest.fixture
def auth_token(test_user_id: str, test_user_email: str) -> str:
    """Create a valid auth token for testing."""
    return create_test_token(user_id=test_user_id, email=test_user_email)


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}
