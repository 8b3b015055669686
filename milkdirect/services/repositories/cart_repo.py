"""Cart Repository - `cart_items` table."""
from decimal import Decimal

from milkdirect.services.models import CartLine
from milkdirect.services.money import to_float

from .base import BaseRepository


class CartRepository(BaseRepository):
    """Cart line database operations."""

    table_name = "cart_items"

    async def list_for_user(self, user_id: str) -> list[CartLine]:
        """Select all lines owned by the user, oldest first."""
        rows = await self._read(
            self.table().select("*").eq("user_id", user_id).order("created_at")
        )
        return [CartLine(**row) for row in rows]

    async def insert(
        self,
        user_id: str,
        seller_id: int,
        seller_name: str,
        milk_type: str,
        price: Decimal,
        quantity: int = 1,
    ) -> None:
        data = {
            "user_id": user_id,
            "seller_id": seller_id,
            "seller_name": seller_name,
            "milk_type": milk_type,
            "price": to_float(price),
            "quantity": quantity,
        }
        await self._write(self.table().insert(data))

    async def update_quantity(self, user_id: str, line_id: str, quantity: int) -> None:
        await self._write(
            self.table().update({"quantity": quantity}).eq("id", line_id).eq("user_id", user_id)
        )

    async def delete(self, user_id: str, line_id: str) -> None:
        """Delete one line. Deleting an absent line is not an error."""
        await self._write(self.table().delete().eq("id", line_id).eq("user_id", user_id))

    async def delete_for_user(self, user_id: str) -> None:
        await self._write(self.table().delete().eq("user_id", user_id))
