"""Profile Repository - `profiles` table."""
from typing import Optional

from milkdirect.services.models import Profile

from .base import BaseRepository


class ProfileRepository(BaseRepository):
    """Profile database operations."""

    table_name = "profiles"

    async def get(self, user_id: str) -> Optional[Profile]:
        rows = await self._read(self.table().select("*").eq("user_id", user_id).limit(1))
        return Profile(**rows[0]) if rows else None

    async def upsert(self, user_id: str, name: str, phone: str, address: str) -> Profile:
        data = {"user_id": user_id, "name": name, "phone": phone, "address": address}
        rows = await self._write(self.table().upsert(data, on_conflict="user_id"))
        return Profile(**rows[0]) if rows else Profile(**data)
