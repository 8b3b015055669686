"""
WebApp Orders Router

Checkout and order history.
"""
from typing import Optional

from fastapi import APIRouter, Depends

from milkdirect.auth import Session, get_optional_session
from milkdirect.errors import ERROR_LOAD_ORDERS, ERROR_PLACE_ORDER, CartNotCleared, MarketplaceError
from milkdirect.logging import get_logger
from milkdirect.orders import OrderService, build_order_payload
from milkdirect.services.money import to_float

from ..deps import get_order_service, to_http_exception

logger = get_logger(__name__)

router = APIRouter(tags=["webapp-orders"])


@router.post("/orders/checkout")
async def checkout(
    session: Optional[Session] = Depends(get_optional_session),
    order_service: OrderService = Depends(get_order_service),
):
    """
    Place orders for everything in the cart.

    401 means the client should send the buyer to login; 400 means the cart
    was empty. On a failed write the cart is left as it was. If the orders
    were saved but the cart could not be emptied, the orders are still
    confirmed and `warning` tells the buyer to clear the cart.
    """
    warning = None
    try:
        orders = await order_service.checkout(session)
    except CartNotCleared as e:
        orders = e.orders
        warning = e.message
    except MarketplaceError as e:
        raise to_http_exception(e, ERROR_PLACE_ORDER)

    return {
        "orders": [build_order_payload(order) for order in orders],
        "total": to_float(sum(order.total for order in orders)),
        "message": "Order placed successfully!",
        "warning": warning,
    }


@router.get("/orders")
async def get_orders(
    session: Optional[Session] = Depends(get_optional_session),
    order_service: OrderService = Depends(get_order_service),
):
    """Get the caller's orders, newest first."""
    try:
        orders = await order_service.list_orders(session)
    except MarketplaceError as e:
        raise to_http_exception(e, ERROR_LOAD_ORDERS)

    return {
        "orders": [build_order_payload(order) for order in orders],
        "count": len(orders),
    }
