"""
Repository Pattern for Database Operations

One repository per table, exposing only the CRUD shapes the marketplace uses:
- CartRepository: cart_items (select by user, insert, update by id, delete)
- OrderRepository: orders (batch insert, select by user, status update)
- ProfileRepository: profiles (select by user, upsert)
"""
from .cart_repo import CartRepository
from .order_repo import OrderRepository
from .profile_repo import ProfileRepository

__all__ = [
    "CartRepository",
    "OrderRepository",
    "ProfileRepository",
]
