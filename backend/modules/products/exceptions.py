"""
Product catalogue exceptions.
"""

from shared.exceptions import NotFoundError


class ProductNotFoundError(NotFoundError):
    """Raised when a product does not exist."""

    def __init__(self, product_id: str):
        super().__init__(
            "no product available",
            code="PRODUCT_NOT_FOUND",
            details={"product_id": product_id},
        )
