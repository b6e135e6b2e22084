"""
JWT issuing and validation.

Tokens are HS256-signed and carry the user id (sub), email, role, issuer,
issued-at and expiry. The secret and issuer are process-wide; changing
either invalidates every token issued before.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from .exceptions import (
    AuthConfigurationError,
    ExpiredTokenError,
    InvalidTokenError,
    MissingTokenError,
    TokenSigningError,
)
from .models import TokenClaims

ALGORITHM = "HS256"


class TokenIssuer:
    """Mints and validates signed identity tokens."""

    def __init__(self, secret: str, issuer: str, expiration_hours: int = 48):
        self._secret = secret
        self._issuer = issuer
        self._lifetime = timedelta(hours=expiration_hours)

    def issue(
        self,
        user_id: str,
        email: str,
        role: str,
        issued_at: Optional[datetime] = None,
    ) -> str:
        """
        Sign a token for a user.

        Args:
            user_id: Subject of the token
            email: User's email
            role: User's role at issuing time
            issued_at: Issue time, defaults to now

        Raises:
            TokenSigningError: If no secret is configured or signing fails
        """
        if not self._secret:
            raise TokenSigningError("signing secret is not configured")

        iat = issued_at or datetime.now(timezone.utc)
        payload = {
            "sub": user_id,
            "email": email,
            "role": role,
            "iss": self._issuer,
            "iat": int(iat.timestamp()),
            "exp": int((iat + self._lifetime).timestamp()),
        }
        try:
            return jwt.encode(payload, self._secret, algorithm=ALGORITHM)
        except (jwt.PyJWTError, TypeError, ValueError) as e:
            raise TokenSigningError(str(e)) from e

    def decode(self, token: Optional[str]) -> TokenClaims:
        """
        Verify a token's signature, issuer and expiry.

        Raises:
            MissingTokenError: If the token is empty
            AuthConfigurationError: If no secret is configured
            ExpiredTokenError: If the token has expired
            InvalidTokenError: For any other validation failure
        """
        if not token:
            raise MissingTokenError()
        if not self._secret:
            raise AuthConfigurationError()

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[ALGORITHM],
                issuer=self._issuer,
                options={"require": ["exp", "iat", "sub", "iss"]},
            )
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}")

        return TokenClaims(**payload)
