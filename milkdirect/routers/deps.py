"""
Shared Dependencies for Routers

Services are built per request on top of the database singleton; tests
swap them through `app.dependency_overrides`.
"""
from typing import Optional

from fastapi import HTTPException

from milkdirect.assistant import ChatStreamClient
from milkdirect.cart import CartManager
from milkdirect.errors import (
    CartNotCleared,
    EmptyCart,
    MarketplaceError,
    RemoteReadFailed,
    RemoteWriteFailed,
    Unauthenticated,
)
from milkdirect.logging import get_logger
from milkdirect.orders import OrderService
from milkdirect.profile import ProfileService
from milkdirect.services.database import get_database

logger = get_logger(__name__)


def get_cart_manager() -> CartManager:
    return CartManager(get_database().cart)


def get_order_service() -> OrderService:
    db = get_database()
    return OrderService(db.orders, CartManager(db.cart))


def get_profile_service() -> ProfileService:
    db = get_database()
    return ProfileService(db.profiles, db)


_chat_client: Optional[ChatStreamClient] = None


def get_chat_client() -> Optional[ChatStreamClient]:
    """
    Get or create ChatStreamClient singleton (lazy loaded).

    Returns None while no assistant endpoint is configured; the next call
    tries again.
    """
    global _chat_client
    if _chat_client is None:
        try:
            _chat_client = ChatStreamClient()
        except ValueError as e:
            logger.warning("Assistant not configured: %s", e)
            return None
    return _chat_client


async def shutdown_services() -> None:
    """Close the chat client's connection pool."""
    global _chat_client
    if _chat_client is not None:
        await _chat_client.aclose()
        _chat_client = None


# ==================== ERROR MAPPING ====================

_STATUS_CODES = {
    Unauthenticated: 401,
    EmptyCart: 400,
    RemoteWriteFailed: 502,
    CartNotCleared: 502,
    RemoteReadFailed: 502,
}


def to_http_exception(error: MarketplaceError, detail: Optional[str] = None) -> HTTPException:
    """
    Turn a marketplace error into the notification the buyer sees.

    `detail` replaces the message of store failures so the buyer reads what
    failed ("Failed to add to cart") instead of which table rejected it.
    Auth and empty-cart errors keep their own message.
    """
    status_code = _STATUS_CODES.get(type(error), 500)
    if detail and isinstance(error, (RemoteWriteFailed, RemoteReadFailed)):
        return HTTPException(status_code=status_code, detail=detail)
    return HTTPException(status_code=status_code, detail=error.message)
