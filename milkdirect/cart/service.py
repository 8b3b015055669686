"""Cart manager service backed by the `cart_items` table."""
from decimal import Decimal
from typing import Optional

from milkdirect.auth.session import Session, require_session
from milkdirect.errors import ERROR_LOGIN_TO_ADD, RemoteReadFailed
from milkdirect.logging import get_logger, sanitize_id_for_logging
from milkdirect.services.money import to_decimal
from milkdirect.services.repositories import CartRepository

from .models import Cart

logger = get_logger(__name__)


class CartManager:
    """
    Manages the authenticated user's cart in the remote store.

    Every mutation is written to the store first and the whole cart is
    re-read afterwards; there is no local state and no optimistic patching.
    Store rejections propagate as RemoteWriteFailed.
    """

    def __init__(self, repo: CartRepository):
        self.repo = repo

    async def get_cart(self, session: Optional[Session]) -> Cart:
        """
        Get the session's cart.

        A failed read is treated as an empty cart rather than an error.
        """
        if session is None:
            return Cart(user_id=None)
        try:
            lines = await self.repo.list_for_user(session.user_id)
        except RemoteReadFailed as e:
            logger.warning(
                "Cart read failed for user %s, showing empty cart: %s",
                sanitize_id_for_logging(session.user_id),
                e,
            )
            return Cart(user_id=session.user_id)
        return Cart(user_id=session.user_id, lines=lines)

    async def add_item(
        self,
        session: Optional[Session],
        seller_id: int,
        seller_name: str,
        milk_type: str,
        price,
    ) -> Cart:
        """
        Add one unit from a seller.

        Lines are keyed on seller: adding again from the same seller bumps
        that line's quantity even if the milk type differs.
        """
        session = require_session(session, ERROR_LOGIN_TO_ADD)
        unit_price = to_decimal(price)
        if unit_price < Decimal("0"):
            raise ValueError("price must be non-negative")

        cart = await self.get_cart(session)
        existing = cart.find_by_seller(seller_id)
        if existing is not None:
            return await self.update_quantity(session, existing.id, existing.quantity + 1)

        await self.repo.insert(
            user_id=session.user_id,
            seller_id=seller_id,
            seller_name=seller_name,
            milk_type=milk_type,
            price=unit_price,
            quantity=1,
        )
        logger.info(
            "Added %s from seller %s for user %s",
            milk_type,
            seller_id,
            sanitize_id_for_logging(session.user_id),
        )
        return await self.get_cart(session)

    async def update_quantity(
        self,
        session: Optional[Session],
        line_id: str,
        new_quantity: int,
    ) -> Cart:
        """Set a line's quantity; anything below 1 removes the line."""
        session = require_session(session)
        if new_quantity < 1:
            return await self.remove_item(session, line_id)

        await self.repo.update_quantity(session.user_id, line_id, new_quantity)
        return await self.get_cart(session)

    async def remove_item(self, session: Optional[Session], line_id: str) -> Cart:
        """Delete a line. Removing a line that is already gone is a no-op."""
        session = require_session(session)
        await self.repo.delete(session.user_id, line_id)
        return await self.get_cart(session)

    async def clear(self, session: Optional[Session]) -> Cart:
        """Delete every line belonging to the user."""
        session = require_session(session)
        await self.repo.delete_for_user(session.user_id)
        logger.info("Cleared cart for user %s", sanitize_id_for_logging(session.user_id))
        return Cart(user_id=session.user_id)
