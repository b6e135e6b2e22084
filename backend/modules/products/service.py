"""
Product catalogue service.

Listing and search are public. Mutations require the caller to be an
admin, checked against the stored user record rather than the token.
"""

import logging
import time

from shared.exceptions import ValidationError
from shared.models import AuthenticatedUser
from modules.users.interfaces import IUserService

from .exceptions import ProductNotFoundError
from .models import CreateProductRequest, Product, ProductPage, UpdateProductRequest
from .repository import ProductRepository

logger = logging.getLogger(__name__)


class ProductService:
    """Catalogue operations."""

    def __init__(self, repository: ProductRepository, users: IUserService):
        self._repo = repository
        self._users = users

    async def list_products(self, page: int = 1, limit: int = 10, offset: int = 0) -> ProductPage:
        return self._repo.list(page, limit, offset)

    async def search_products(
        self,
        search: str,
        page: int = 1,
        limit: int = 10,
        offset: int = 0,
    ) -> ProductPage:
        return self._repo.search(search, page, limit, offset)

    async def create_product(
        self,
        caller: AuthenticatedUser,
        request: CreateProductRequest,
    ) -> Product:
        await self._users.require_admin(caller.email)
        for field in ("name", "description", "image_url"):
            if not getattr(request, field):
                raise ValidationError(f"{field} of product can't be empty",
                                      code="FIELD_REQUIRED", details={"field": field})

        product = self._repo.create(request.model_dump())
        logger.info(f"Product {product.id} created by user {caller.id}")
        return product

    async def update_product(
        self,
        caller: AuthenticatedUser,
        product_id: str,
        request: UpdateProductRequest,
    ) -> Product:
        await self._users.require_admin(caller.email)
        existing = self._repo.get_by_id(product_id)
        if existing is None:
            raise ProductNotFoundError(product_id)

        changes = request.changes()
        changes["updated_at"] = int(time.time())
        return self._repo.update(existing.model_copy(update=changes))

    async def delete_product(self, caller: AuthenticatedUser, product_id: str) -> None:
        await self._users.require_admin(caller.email)
        if self._repo.get_by_id(product_id) is None:
            raise ProductNotFoundError(product_id)
        self._repo.delete(product_id)
        logger.info(f"Product {product_id} deleted by user {caller.id}")

    async def get_product(self, product_id: str) -> Product:
        product = self._repo.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product
