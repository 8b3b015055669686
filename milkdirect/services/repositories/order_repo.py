"""Order Repository - `orders` table."""
from typing import Any

from milkdirect.services.models import Order, OrderStatus

from .base import BaseRepository


class OrderRepository(BaseRepository):
    """Order database operations."""

    table_name = "orders"

    async def insert_many(self, rows: list[dict[str, Any]]) -> list[Order]:
        """Insert all rows in a single batch call.

        PostgREST applies a bulk insert as one statement, so either every
        row is created or none is.
        """
        data = await self._write(self.table().insert(rows))
        return [Order(**row) for row in data]

    async def list_for_user(self, user_id: str) -> list[Order]:
        """Get user's orders, newest first."""
        rows = await self._read(
            self.table().select("*").eq("user_id", user_id).order("created_at", desc=True)
        )
        return [Order(**row) for row in rows]

    async def update_status(self, order_id: str, status: OrderStatus) -> None:
        await self._write(self.table().update({"status": status.value}).eq("id", order_id))
