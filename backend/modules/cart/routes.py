"""
Cart, address and checkout endpoints.

All routes act on the authenticated caller.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_cart_service
from api.middleware.auth import get_current_user
from api.models.responses import DataResponse
from shared.models import AuthenticatedUser

from .models import AddAddressRequest, AddToCartRequest
from .service import CartService

router = APIRouter()
address_router = APIRouter()


@router.post("", response_model=DataResponse, status_code=201)
async def add_to_cart(
    request: AddToCartRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: CartService = Depends(get_cart_service),
) -> DataResponse:
    """Put a product in the cart. Requires a stored address."""
    item = await service.add_to_cart(user, request.product_id)
    return DataResponse(message="success", data=item)


@router.get("", response_model=DataResponse)
async def get_cart(
    user: AuthenticatedUser = Depends(get_current_user),
    service: CartService = Depends(get_cart_service),
) -> DataResponse:
    """List the open items in the cart."""
    items = await service.list_cart(user)
    return DataResponse(message="success", data=items)


@router.put("/checkout", response_model=DataResponse)
async def checkout(
    user: AuthenticatedUser = Depends(get_current_user),
    service: CartService = Depends(get_cart_service),
) -> DataResponse:
    """Check out every open item in the cart."""
    result = await service.checkout(user)
    return DataResponse(message="success", data=result)


@address_router.post("", response_model=DataResponse, status_code=201)
async def add_address(
    request: AddAddressRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: CartService = Depends(get_cart_service),
) -> DataResponse:
    """Store an address for the caller."""
    address = await service.add_address(user, request)
    return DataResponse(message="success", data=address)
