"""
Cart service.

Addresses, cart items and checkout for the authenticated caller.
"""

import logging

from shared.models import AuthenticatedUser
from modules.products.exceptions import ProductNotFoundError
from modules.products.repository import ProductRepository
from modules.users.interfaces import IUserService

from .exceptions import AddressRequiredError
from .models import AddAddressRequest, Address, CartItem, CheckoutResult
from .repository import AddressRepository, CartRepository

logger = logging.getLogger(__name__)


class CartService:
    """Per-user cart and address operations."""

    def __init__(
        self,
        carts: CartRepository,
        addresses: AddressRepository,
        products: ProductRepository,
        users: IUserService,
    ):
        self._carts = carts
        self._addresses = addresses
        self._products = products
        self._users = users

    async def add_address(self, caller: AuthenticatedUser, request: AddAddressRequest) -> Address:
        user = await self._users.require_user(caller.email)
        return self._addresses.create(
            user_id=user.id,
            address_1=request.address_1,
            city=request.city,
            country=request.country,
        )

    async def add_to_cart(self, caller: AuthenticatedUser, product_id: str) -> CartItem:
        user = await self._users.require_user(caller.email)
        if self._addresses.get_for_user(user.id) is None:
            raise AddressRequiredError(user.id)
        if self._products.get_by_id(product_id) is None:
            raise ProductNotFoundError(product_id)
        return self._carts.add(user.id, product_id)

    async def list_cart(self, caller: AuthenticatedUser) -> list[CartItem]:
        user = await self._users.require_user(caller.email)
        return self._carts.list_for_user(user.id)

    async def checkout(self, caller: AuthenticatedUser) -> CheckoutResult:
        user = await self._users.require_user(caller.email)
        count = self._carts.checkout_all(user.id)
        logger.info(f"User {user.id} checked out {count} item(s)")
        return CheckoutResult(checked_out=count)
