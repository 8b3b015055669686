"""
Supabase Database Service

Owns the async Supabase client and the per-table repositories.

Usage:
    from milkdirect.services.database import get_database

    # At FastAPI startup (lifespan):
    await init_database()

    # In request handlers:
    db = get_database()
    lines = await db.cart.list_for_user(session.user_id)
"""

import asyncio
from typing import Any, Optional

from supabase._async.client import AsyncClient
from supabase._async.client import create_client as acreate_client

from milkdirect.config import get_supabase_credentials
from milkdirect.logging import get_logger
from milkdirect.services.repositories import (
    CartRepository,
    OrderRepository,
    ProfileRepository,
)

logger = get_logger(__name__)


class Database:
    """
    Supabase database client.

    IMPORTANT: Must be initialized via async factory method `create()` or
    `init_database()`; the constructor takes an already-built AsyncClient.
    """

    def __init__(self, client: AsyncClient):
        self.client = client
        self.cart = CartRepository(client)
        self.orders = OrderRepository(client)
        self.profiles = ProfileRepository(client)

    @classmethod
    async def create(cls) -> "Database":
        """Async factory method to create Database instance."""
        url, key = get_supabase_credentials()
        client = await acreate_client(url, key)
        return cls(client)

    # ==================== AUTH ====================

    async def get_auth_user(self, access_token: str) -> Optional[Any]:
        """Resolve a user access token (JWT) to the auth user, or None."""
        response = await self.client.auth.get_user(access_token)
        return response.user if response else None

    async def sign_out(self, access_token: str) -> None:
        """Revoke every refresh token issued for the token's user."""
        await self.client.auth.admin.sign_out(access_token)


# ==================== SINGLETON ====================

_db: Optional[Database] = None
_lock: Optional[asyncio.Lock] = None


def _get_lock() -> asyncio.Lock:
    global _lock
    if _lock is None:
        _lock = asyncio.Lock()
    return _lock


async def init_database() -> Database:
    """Initialize database singleton. Call once at startup."""
    global _db
    if _db is not None:
        return _db

    async with _get_lock():
        # Double-check after acquiring lock
        if _db is None:
            logger.info("Initializing async Supabase client...")
            _db = await Database.create()
            logger.info("Async Supabase client initialized successfully")
    return _db


async def close_database() -> None:
    """Drop the singleton. Should be called at FastAPI shutdown."""
    global _db
    if _db is not None:
        _db = None
        logger.info("Supabase client closed")


def get_database() -> Database:
    """Get database instance.

    Raises:
        RuntimeError: If init_database() has not been awaited yet
    """
    if _db is None:
        raise RuntimeError(
            "Database not initialized. Call 'await init_database()' at startup."
        )
    return _db


def set_database(db: Optional[Database]) -> None:
    """Install a prepared Database (scripts and tests)."""
    global _db
    _db = db


def is_database_initialized() -> bool:
    return _db is not None
