"""
Product catalogue endpoints.
"""

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_product_service
from api.middleware.auth import get_current_user
from api.models.responses import APIResponse, DataResponse
from shared.models import AuthenticatedUser

from .models import CreateProductRequest, UpdateProductRequest
from .service import ProductService

router = APIRouter()


@router.get("", response_model=DataResponse)
async def list_products(
    page: int = Query(default=1, ge=1, description="Page number (1-indexed)"),
    limit: int = Query(default=10, ge=1, le=100, description="Items per page"),
    offset: int = Query(default=0, ge=0, description="Rows to skip; overrides page"),
    service: ProductService = Depends(get_product_service),
) -> DataResponse:
    """List products, most recent first."""
    result = await service.list_products(page, limit, offset)
    return DataResponse(message="success", data=result)


@router.get("/search", response_model=DataResponse)
async def search_products(
    search: str = Query(default="", description="Matched against name and description"),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    service: ProductService = Depends(get_product_service),
) -> DataResponse:
    """Search products. Terms shorter than three characters list everything."""
    result = await service.search_products(search, page, limit, offset)
    return DataResponse(message="success", data=result)


@router.post("", response_model=DataResponse, status_code=201)
async def create_product(
    request: CreateProductRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ProductService = Depends(get_product_service),
) -> DataResponse:
    """Add a product. Admin only."""
    product = await service.create_product(user, request)
    return DataResponse(message="success", data=product)


@router.put("/{product_id}", response_model=DataResponse)
async def update_product(
    product_id: str,
    request: UpdateProductRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ProductService = Depends(get_product_service),
) -> DataResponse:
    """Partially update a product. Admin only."""
    product = await service.update_product(user, product_id, request)
    return DataResponse(message="success", data=product)


@router.delete("/{product_id}", response_model=APIResponse)
async def delete_product(
    product_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ProductService = Depends(get_product_service),
) -> APIResponse:
    """Delete a product. Admin only."""
    await service.delete_product(user, product_id)
    return APIResponse(message="success")
