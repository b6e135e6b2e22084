"""
Cart module.

Addresses, cart items and checkout.
"""

from .models import Address, CartItem, CheckoutResult
from .exceptions import AddressRequiredError

__all__ = ["Address", "CartItem", "CheckoutResult", "AddressRequiredError"]
