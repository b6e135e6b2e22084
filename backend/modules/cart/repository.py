"""
Cart and address repositories.

`addresses` and `carts` are keyed by user ID. No foreign keys are
enforced; the service checks that referenced rows exist.
"""

from typing import Any, Optional

from shared.repository import BaseRepository
from .models import Address, CartItem


class AddressRepository(BaseRepository[Address]):
    """Repository for user addresses."""

    table_name = "addresses"

    def create(self, user_id: str, address_1: str, city: str, country: str) -> Address:
        data = {
            "user_id": user_id,
            "address_1": address_1,
            "city": city,
            "country": country,
        }
        result = self._table().insert(data).execute()
        return self._map_to_address(result.data[0])

    def get_for_user(self, user_id: str) -> Optional[Address]:
        """First address of a user, or None."""
        result = self._table().select("*").eq("user_id", user_id).limit(1).execute()
        if not result.data:
            return None
        return self._map_to_address(result.data[0])

    def _map_to_address(self, data: dict[str, Any]) -> Address:
        return Address(
            id=str(data["id"]),
            user_id=str(data["user_id"]),
            address_1=data["address_1"],
            city=data.get("city", ""),
            country=data.get("country", ""),
        )


class CartRepository(BaseRepository[CartItem]):
    """Repository for cart items."""

    table_name = "carts"

    def add(self, user_id: str, product_id: str) -> CartItem:
        data = {"user_id": user_id, "product_id": product_id, "checkout": False}
        result = self._table().insert(data).execute()
        return self._map_to_item(result.data[0])

    def list_for_user(self, user_id: str, include_checked_out: bool = False) -> list[CartItem]:
        query = self._table().select("*").eq("user_id", user_id)
        if not include_checked_out:
            query = query.eq("checkout", False)
        result = query.execute()
        return [self._map_to_item(row) for row in result.data]

    def checkout_all(self, user_id: str) -> int:
        """Mark every open cart item of a user as checked out."""
        result = (
            self._table()
            .update({"checkout": True})
            .eq("user_id", user_id)
            .eq("checkout", False)
            .execute()
        )
        return len(result.data or [])

    def _map_to_item(self, data: dict[str, Any]) -> CartItem:
        return CartItem(
            id=str(data["id"]),
            user_id=str(data["user_id"]),
            product_id=str(data["product_id"]),
            checkout=bool(data.get("checkout", False)),
        )
