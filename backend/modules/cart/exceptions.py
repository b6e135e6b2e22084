"""
Cart module exceptions.
"""

from shared.exceptions import ValidationError


class AddressRequiredError(ValidationError):
    """Raised when adding to the cart before any address is stored."""

    def __init__(self, user_id: str):
        super().__init__(
            "address does not exist, add an address first",
            code="ADDRESS_REQUIRED",
            details={"user_id": user_id},
        )
