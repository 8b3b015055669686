# Services Module
from .database import Database, get_database, init_database
from .models import CartLine, Order, OrderStatus, Profile

__all__ = [
    "Database",
    "get_database",
    "init_database",
    "CartLine",
    "Order",
    "OrderStatus",
    "Profile",
]
