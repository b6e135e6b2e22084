"""
Products module.

Public catalogue listing and search, admin-only mutations.
"""

from .models import Product, ProductPage, CreateProductRequest, UpdateProductRequest
from .exceptions import ProductNotFoundError

__all__ = [
    "Product",
    "ProductPage",
    "CreateProductRequest",
    "UpdateProductRequest",
    "ProductNotFoundError",
]
