"""Cart package: models and manager."""
from .models import Cart, CartSummary, DELIVERY_FEE, SAVINGS_PERCENT
from .service import CartManager

__all__ = [
    "Cart",
    "CartSummary",
    "CartManager",
    "DELIVERY_FEE",
    "SAVINGS_PERCENT",
]
