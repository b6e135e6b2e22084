"""
Product catalogue models.
"""

from typing import Any, Optional
from pydantic import BaseModel, Field, field_validator


class Product(BaseModel):
    """A catalogue product."""

    id: str
    name: str
    description: str
    price: float
    image_url: str
    meta_info: dict[str, Any] = Field(default_factory=dict)
    created_at: int = 0
    updated_at: int = 0


class CreateProductRequest(BaseModel):
    """Request to add a product. Emptiness is checked by the service."""

    name: str = ""
    description: str = ""
    price: float = Field(0, ge=0)
    image_url: str = ""
    meta_info: dict[str, Any] = Field(default_factory=dict)


class UpdateProductRequest(BaseModel):
    """
    Partial product update.

    Only fields present in the body are applied, so a price of 0 or an
    empty meta_info can be written deliberately.
    """

    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = Field(None, min_length=1)
    price: Optional[float] = Field(None, ge=0)
    image_url: Optional[str] = Field(None, min_length=1)
    meta_info: Optional[dict[str, Any]] = None

    @field_validator("name", "description", "price", "image_url", "meta_info", mode="before")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("may be omitted but not null")
        return value

    def changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class ProductPage(BaseModel):
    """One page of products with the total size of the result set."""

    products: list[Product]
    totalcount: int
