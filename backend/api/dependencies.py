"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. The container receives the storage client in its
constructor; every repository is built on that one handle.
"""

import logging
from typing import TYPE_CHECKING, Optional

from supabase import Client

from shared.config import Settings, get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.hashing import PasswordHasher
    from modules.auth.interfaces import IAuthService
    from modules.auth.tokens import TokenIssuer
    from modules.cart.service import CartService
    from modules.products.service import ProductService
    from modules.users.interfaces import IUserService
    from modules.users.repository import UserRepository
    from modules.verification.interfaces import IVerificationService

logger = logging.getLogger(__name__)


class ServiceContainer:
    """
    Container for all service instances.

    Services are created lazily on first access and cached as
    singletons within the container.
    """

    def __init__(self, db: Client, settings: Settings) -> None:
        self._db = db
        self._settings = settings
        self._hasher: "PasswordHasher | None" = None
        self._token_issuer: "TokenIssuer | None" = None
        self._user_repository: "UserRepository | None" = None
        self._user_service: "IUserService | None" = None
        self._verification_service: "IVerificationService | None" = None
        self._auth_service: "IAuthService | None" = None
        self._product_service: "ProductService | None" = None
        self._cart_service: "CartService | None" = None

    @property
    def db(self) -> Client:
        return self._db

    @property
    def hasher(self) -> "PasswordHasher":
        if self._hasher is None:
            from modules.auth.hashing import PasswordHasher
            self._hasher = PasswordHasher(rounds=self._settings.password_hash_rounds)
        return self._hasher

    @property
    def token_issuer(self) -> "TokenIssuer":
        if self._token_issuer is None:
            from modules.auth.tokens import TokenIssuer
            self._token_issuer = TokenIssuer(
                secret=self._settings.jwt_secret,
                issuer=self._settings.jwt_issuer,
                expiration_hours=self._settings.jwt_expiration_hours,
            )
        return self._token_issuer

    @property
    def user_repository(self) -> "UserRepository":
        if self._user_repository is None:
            from modules.users.repository import UserRepository
            self._user_repository = UserRepository(self._db)
        return self._user_repository

    @property
    def users(self) -> "IUserService":
        """Get the user directory service."""
        if self._user_service is None:
            from modules.users.service import UserService
            self._user_service = UserService(self.user_repository, self.hasher)
        return self._user_service

    @property
    def verification(self) -> "IVerificationService":
        """Get the email verification service."""
        if self._verification_service is None:
            from modules.verification.mailer import build_mailer
            from modules.verification.repository import VerificationRepository
            from modules.verification.service import VerificationService
            self._verification_service = VerificationService(
                repository=VerificationRepository(self._db),
                mailer=build_mailer(
                    self._settings.email_backend,
                    self._settings.sendgrid_api_key,
                    self._settings.email_sender,
                ),
                validity_seconds=self._settings.otp_validity_seconds,
            )
        return self._verification_service

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(
                users=self.user_repository,
                verification=self.verification,
                hasher=self.hasher,
                issuer=self.token_issuer,
            )
        return self._auth_service

    @property
    def products(self) -> "ProductService":
        """Get the product catalogue service."""
        if self._product_service is None:
            from modules.products.repository import ProductRepository
            from modules.products.service import ProductService
            self._product_service = ProductService(ProductRepository(self._db), self.users)
        return self._product_service

    @property
    def cart(self) -> "CartService":
        """Get the cart service."""
        if self._cart_service is None:
            from modules.cart.repository import AddressRepository, CartRepository
            from modules.cart.service import CartService
            from modules.products.repository import ProductRepository
            self._cart_service = CartService(
                carts=CartRepository(self._db),
                addresses=AddressRepository(self._db),
                products=ProductRepository(self._db),
                users=self.users,
            )
        return self._cart_service

    def seed_admin(self) -> None:
        """
        Create the configured administrator if it does not exist yet.

        Skipped when no admin credentials are configured. Any storage error
        propagates so that an unreachable database stops startup.
        """
        from modules.auth.exceptions import CredentialHashError
        from modules.users.models import UserRole

        email = self._settings.admin_email
        password = self._settings.admin_password
        if not email or not password:
            return

        if self.user_repository.get_by_email(email) is not None:
            return

        password_hash = self.hasher.hash(password)
        if not password_hash:
            raise CredentialHashError()
        admin = self.user_repository.insert(
            name="Admin",
            email=email,
            phone="",
            password_hash=password_hash,
            user_type=UserRole.ADMIN,
        )
        logger.info(f"Seeded admin user {admin.id}")


# Module-level container singleton
_container: Optional[ServiceContainer] = None


def init_container(db: Client, settings: Settings) -> ServiceContainer:
    """Create the process container around an explicitly built client."""
    global _container
    _container = ServiceContainer(db, settings)
    return _container


def get_container() -> ServiceContainer:
    """
    Get the service container.

    Falls back to the cached Supabase client when the application
    lifespan has not initialized the container.
    """
    global _container
    if _container is None:
        from shared.database import get_supabase_client
        _container = ServiceContainer(get_supabase_client(), get_settings())
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    The next call to get_container() creates a fresh container.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_user_service() -> "IUserService":
    """FastAPI dependency for the user directory."""
    return get_container().users


def get_verification_service() -> "IVerificationService":
    """FastAPI dependency for email verification."""
    return get_container().verification


def get_product_service() -> "ProductService":
    """FastAPI dependency for the product catalogue."""
    return get_container().products


def get_cart_service() -> "CartService":
    """FastAPI dependency for carts and addresses."""
    return get_container().cart
