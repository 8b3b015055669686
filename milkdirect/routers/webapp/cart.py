"""
WebApp Cart Router

Shopping cart endpoints. Every response is the cart as re-read from the
store after the change.
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from milkdirect.auth import Session, get_optional_session
from milkdirect.cart import CartManager
from milkdirect.catalog import get_seller
from milkdirect.errors import (
    ERROR_ADD_TO_CART,
    ERROR_CLEAR_CART,
    ERROR_REMOVE_ITEM,
    ERROR_SELLER_NOT_FOUND,
    ERROR_UPDATE_QUANTITY,
    MarketplaceError,
)
from milkdirect.logging import get_logger

from ..deps import get_cart_manager, to_http_exception
from .models import AddToCartRequest, UpdateCartItemRequest

logger = get_logger(__name__)

router = APIRouter(tags=["webapp-cart"])


@router.get("/cart")
async def get_webapp_cart(
    session: Optional[Session] = Depends(get_optional_session),
    cart_manager: CartManager = Depends(get_cart_manager),
):
    """Get the caller's cart. Anonymous callers get an empty cart."""
    cart = await cart_manager.get_cart(session)
    return cart.to_dict()


@router.post("/cart/add")
async def add_to_cart(
    request: AddToCartRequest,
    session: Optional[Session] = Depends(get_optional_session),
    cart_manager: CartManager = Depends(get_cart_manager),
):
    """Add one unit of a seller's listing."""
    seller = get_seller(request.seller_id)
    if seller is None:
        raise HTTPException(status_code=404, detail=ERROR_SELLER_NOT_FOUND)

    try:
        cart = await cart_manager.add_item(
            session,
            seller_id=seller.id,
            seller_name=seller.name,
            milk_type=seller.milk_type,
            price=seller.price,
        )
    except MarketplaceError as e:
        raise to_http_exception(e, ERROR_ADD_TO_CART)

    return {**cart.to_dict(), "message": f"Added {seller.milk_type} to cart!"}


@router.patch("/cart/item")
async def update_cart_item(
    request: UpdateCartItemRequest,
    session: Optional[Session] = Depends(get_optional_session),
    cart_manager: CartManager = Depends(get_cart_manager),
):
    """Update cart line quantity (below 1 = remove)."""
    try:
        cart = await cart_manager.update_quantity(session, request.line_id, request.quantity)
    except MarketplaceError as e:
        raise to_http_exception(e, ERROR_UPDATE_QUANTITY)
    return cart.to_dict()


@router.delete("/cart/item")
async def remove_cart_item(
    line_id: str,
    session: Optional[Session] = Depends(get_optional_session),
    cart_manager: CartManager = Depends(get_cart_manager),
):
    """Remove a cart line."""
    try:
        cart = await cart_manager.remove_item(session, line_id)
    except MarketplaceError as e:
        raise to_http_exception(e, ERROR_REMOVE_ITEM)
    return cart.to_dict()


@router.delete("/cart")
async def clear_cart(
    session: Optional[Session] = Depends(get_optional_session),
    cart_manager: CartManager = Depends(get_cart_manager),
):
    try:
        cart = await cart_manager.clear(session)
    except MarketplaceError as e:
        raise to_http_exception(e, ERROR_CLEAR_CART)
    return cart.to_dict()
