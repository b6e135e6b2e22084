"""
Authentication service implementation.

Registration, password login and token validation.
"""

import logging
from typing import Optional

from shared.exceptions import ValidationError
from shared.models import AuthenticatedUser
from modules.users.exceptions import EmailAlreadyRegisteredError
from modules.users.models import User, UserRole
from modules.users.repository import UserRepository
from modules.verification.interfaces import IVerificationService

from .exceptions import (
    CredentialHashError,
    EmailNotVerifiedError,
    PasswordMismatchError,
    PasswordTooLongError,
    UserNotRegisteredError,
)
from .hashing import MAX_PASSWORD_BYTES, PasswordHasher, password_too_long
from .interfaces import IAuthService
from .models import LoginResult, RegistrationResult
from .tokens import TokenIssuer

logger = logging.getLogger(__name__)

REQUIRED_REGISTRATION_FIELDS = ("email", "name", "phone", "password")


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Users are looked up through the user repository; tokens are
    self-issued HS256 JWTs.
    """

    def __init__(
        self,
        users: UserRepository,
        verification: IVerificationService,
        hasher: PasswordHasher,
        issuer: TokenIssuer,
    ):
        self._users = users
        self._verification = verification
        self._hasher = hasher
        self._issuer = issuer

    async def register(
        self,
        name: str,
        email: str,
        phone: str,
        password: str,
    ) -> RegistrationResult:
        fields = {"email": email, "name": name, "phone": phone, "password": password}
        for field in REQUIRED_REGISTRATION_FIELDS:
            if not fields[field]:
                raise ValidationError(f"{field} can't be empty", code="FIELD_REQUIRED",
                                      details={"field": field})
        if password_too_long(password):
            raise PasswordTooLongError(MAX_PASSWORD_BYTES)

        if not await self._verification.is_verified(email):
            raise EmailNotVerifiedError(email)

        if self._users.get_by_email(email) is not None:
            raise EmailAlreadyRegisteredError(email)

        password_hash = self._hasher.hash(password)
        if not password_hash:
            raise CredentialHashError()

        user = self._users.insert(
            name=name,
            email=email,
            phone=phone,
            password_hash=password_hash,
            user_type=UserRole.NORMAL,
        )
        token = self.issue_token(user)
        logger.info(f"Registered user {user.id}")
        return RegistrationResult(user=user.to_public(), token=token)

    async def login(self, email: str, password: str) -> LoginResult:
        user = self._users.get_by_email(email) if email else None
        if user is None:
            self._hasher.verify_dummy(password)
            logger.warning("Login rejected: unknown email")
            raise UserNotRegisteredError(email)

        if not self._hasher.verify(user.password, password):
            logger.warning(f"Login rejected for user {user.id}: password mismatch")
            raise PasswordMismatchError()

        token = self.issue_token(user)
        logger.info(f"User {user.id} logged in")
        return LoginResult(user_id=user.id, token=token, role=user.user_type.value)

    def issue_token(self, user: User) -> str:
        return self._issuer.issue(user.id, user.email, user.user_type.value)

    async def validate_token(self, token: Optional[str]) -> AuthenticatedUser:
        claims = self._issuer.decode(token)
        return AuthenticatedUser(id=claims.sub, email=claims.email, role=claims.role)
