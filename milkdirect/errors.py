"""
Error types and shared error messages.

Messages are the user-facing texts shown when an operation fails; routers
pass them through as the HTTP `detail`.
"""

# Auth errors
ERROR_LOGIN_REQUIRED = "Please login to continue"
ERROR_LOGIN_TO_ADD = "Please login to add items to cart"
ERROR_LOGIN_TO_ORDER = "Please login to place order"
ERROR_INVALID_SESSION = "Invalid session token"

# Cart errors
ERROR_CART_EMPTY = "Your cart is empty"
ERROR_ADD_TO_CART = "Failed to add to cart"
ERROR_UPDATE_QUANTITY = "Failed to update quantity"
ERROR_REMOVE_ITEM = "Failed to remove item"
ERROR_CLEAR_CART = "Failed to clear cart"

# Order errors
ERROR_PLACE_ORDER = "Failed to place order"
ERROR_LOAD_ORDERS = "Failed to load orders"
ERROR_INVALID_ORDER_STATUS = "Invalid order status"

# Profile errors
ERROR_UPDATE_PROFILE = "Failed to update profile"

# Catalog errors
ERROR_SELLER_NOT_FOUND = "Seller not found"


class MarketplaceError(Exception):
    """Base class for errors surfaced to the buyer as a notification."""

    default_message = "Something went wrong"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class Unauthenticated(MarketplaceError):
    """No active session where one is required."""

    default_message = ERROR_LOGIN_REQUIRED


class EmptyCart(MarketplaceError):
    """Checkout attempted with no cart lines."""

    default_message = ERROR_CART_EMPTY


class RemoteWriteFailed(MarketplaceError):
    """The remote store rejected an insert, update or delete."""

    default_message = "Remote store rejected the write"


class CartNotCleared(RemoteWriteFailed):
    """Orders were saved but emptying the cart afterwards failed.

    Carries the orders that were created so the caller can still confirm
    them; resubmitting the cart would duplicate them.
    """

    default_message = ERROR_CLEAR_CART

    def __init__(self, orders: list, message: str | None = None):
        super().__init__(message)
        self.orders = orders


class RemoteReadFailed(MarketplaceError):
    """A select against the remote store failed."""

    default_message = "Remote store read failed"


__all__ = [
    "MarketplaceError",
    "Unauthenticated",
    "EmptyCart",
    "RemoteWriteFailed",
    "CartNotCleared",
    "RemoteReadFailed",
]
