"""
Cart, address and checkout models.
"""

from pydantic import BaseModel, Field


class Address(BaseModel):
    """A shipping address owned by a user."""

    id: str
    user_id: str
    address_1: str
    city: str
    country: str


class AddAddressRequest(BaseModel):
    """Request to store an address for the caller."""

    address_1: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    country: str = Field(..., min_length=1)


class CartItem(BaseModel):
    """One product placed in a user's cart."""

    id: str
    user_id: str
    product_id: str
    checkout: bool = False


class AddToCartRequest(BaseModel):
    """Request to put a product in the caller's cart."""

    product_id: str = Field(..., min_length=1)


class CheckoutResult(BaseModel):
    """Outcome of a checkout."""

    checked_out: int
