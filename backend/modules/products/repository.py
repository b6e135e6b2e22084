"""
Product repository for database access.

Encapsulates Supabase queries for the `products` table, including the
paginated listing and the case-insensitive search.
"""

import re
from typing import Any, Optional

from shared.repository import BaseRepository
from .models import Product, ProductPage

MIN_SEARCH_LENGTH = 3

# Characters that delimit PostgREST filter expressions.
_FILTER_SPECIALS = re.compile(r"[,()%*\\]")


def page_offset(page: int, limit: int, offset: int) -> int:
    """Rows to skip: an explicit offset wins over the page number."""
    if offset > 0:
        return offset
    return max(page - 1, 0) * limit


class ProductRepository(BaseRepository[Product]):
    """Repository for catalogue products."""

    table_name = "products"

    def create(self, data: dict[str, Any]) -> Product:
        """Insert a product and return it with its generated ID."""
        now = self._now()
        row = {**data, "created_at": now, "updated_at": now}
        result = self._table().insert(row).execute()
        return self._map_to_product(result.data[0])

    def get_by_id(self, product_id: str) -> Optional[Product]:
        """Get a product by ID, or None if not found."""
        if not self._is_valid_id(product_id):
            return None
        result = self._table().select("*").eq("id", product_id).execute()
        if not result.data:
            return None
        return self._map_to_product(result.data[0])

    def list(self, page: int = 1, limit: int = 10, offset: int = 0) -> ProductPage:
        """List products with pagination."""
        start = page_offset(page, limit, offset)
        result = (
            self._table()
            .select("*", count="exact")
            .order("created_at", desc=True)
            .range(start, start + limit - 1)
            .execute()
        )
        return ProductPage(
            products=[self._map_to_product(p) for p in result.data],
            totalcount=result.count or 0,
        )

    def search(
        self,
        term: str,
        page: int = 1,
        limit: int = 10,
        offset: int = 0,
    ) -> ProductPage:
        """
        Search products by name or description.

        Terms shorter than three characters do not filter.
        """
        start = page_offset(page, limit, offset)
        query = self._table().select("*", count="exact")

        cleaned = _FILTER_SPECIALS.sub(" ", term or "").strip()
        if len(cleaned) >= MIN_SEARCH_LENGTH:
            pattern = f"*{cleaned}*"
            query = query.or_(f"name.ilike.{pattern},description.ilike.{pattern}")

        result = query.order("created_at", desc=True).range(start, start + limit - 1).execute()
        return ProductPage(
            products=[self._map_to_product(p) for p in result.data],
            totalcount=result.count or 0,
        )

    def update(self, product: Product) -> Product:
        """Persist a full product record over the stored one."""
        data = product.model_dump(exclude={"id"})
        self._table().update(data).eq("id", product.id).execute()
        return product

    def delete(self, product_id: str) -> None:
        """Delete a product."""
        self._table().delete().eq("id", product_id).execute()

    def _map_to_product(self, data: dict[str, Any]) -> Product:
        """Map database row to Product model."""
        return Product(
            id=str(data["id"]),
            name=data["name"],
            description=data.get("description", ""),
            price=float(data.get("price", 0)),
            image_url=data.get("image_url", ""),
            meta_info=data.get("meta_info") or {},
            created_at=data.get("created_at", 0),
            updated_at=data.get("updated_at", 0),
        )
