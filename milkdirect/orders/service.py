"""
Order Submission Service

Turns the current cart into order rows and empties the cart.
"""
from typing import Any, Optional

from milkdirect.auth.session import Session, require_session
from milkdirect.cart import Cart, CartManager
from milkdirect.errors import ERROR_LOGIN_TO_ORDER, CartNotCleared, EmptyCart, RemoteWriteFailed
from milkdirect.logging import get_logger, sanitize_id_for_logging
from milkdirect.services.models import CartLine, Order, OrderStatus
from milkdirect.services.money import multiply, round_money, to_float
from milkdirect.services.repositories import OrderRepository

logger = get_logger(__name__)


def build_order_row(user_id: str, line: CartLine) -> dict[str, Any]:
    """Snapshot one cart line as a pending order row."""
    return {
        "user_id": user_id,
        "seller_id": line.seller_id,
        "seller_name": line.seller_name,
        "milk_type": line.milk_type,
        "price": to_float(line.price),
        "quantity": line.quantity,
        "total": to_float(round_money(multiply(line.price, line.quantity))),
        "status": OrderStatus.PENDING.value,
    }


class OrderService:
    """Checkout and order history."""

    def __init__(self, repo: OrderRepository, cart_manager: CartManager):
        self.repo = repo
        self.cart_manager = cart_manager

    async def place_order(self, session: Optional[Session], cart: Cart) -> list[Order]:
        """
        Convert every cart line into a pending order.

        All rows go out in one batch insert. The cart is cleared only after
        that insert succeeds; a failed insert leaves the cart as it was. If
        the clear itself fails the orders already exist, so `CartNotCleared`
        is raised with them attached instead of a plain write failure.
        """
        session = require_session(session, ERROR_LOGIN_TO_ORDER)
        if cart.is_empty:
            raise EmptyCart()

        rows = [build_order_row(session.user_id, line) for line in cart.lines]
        orders = await self.repo.insert_many(rows)
        logger.info(
            "Placed %d orders for user %s",
            len(rows),
            sanitize_id_for_logging(session.user_id),
        )

        try:
            await self.cart_manager.clear(session)
        except RemoteWriteFailed as e:
            logger.error(
                "Orders placed but cart not cleared for user %s",
                sanitize_id_for_logging(session.user_id),
            )
            raise CartNotCleared(orders) from e
        return orders

    async def checkout(self, session: Optional[Session]) -> list[Order]:
        """Read the current cart and place orders for it."""
        session = require_session(session, ERROR_LOGIN_TO_ORDER)
        cart = await self.cart_manager.get_cart(session)
        return await self.place_order(session, cart)

    async def list_orders(self, session: Optional[Session]) -> list[Order]:
        session = require_session(session)
        return await self.repo.list_for_user(session.user_id)

    async def update_status(self, order_id: str, status: str | OrderStatus) -> OrderStatus:
        """Set fulfillment status. Raises ValueError for unknown statuses."""
        new_status = status if isinstance(status, OrderStatus) else OrderStatus.parse(status)
        await self.repo.update_status(order_id, new_status)
        logger.info("Order %s -> %s", sanitize_id_for_logging(order_id), new_status.value)
        return new_status
