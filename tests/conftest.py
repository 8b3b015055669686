"""Pytest configuration and fixtures"""
import os
import itertools
from decimal import Decimal
from typing import Optional
from unittest.mock import Mock, AsyncMock

import pytest

# Set test environment variables
os.environ.setdefault("SUPABASE_URL", "https://test.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test_key")
os.environ.setdefault("AI_ASSISTANT_URL", "https://assistant.test/chat")
os.environ.setdefault("AI_ASSISTANT_KEY", "test_assistant_key")

from milkdirect.auth import Session
from milkdirect.cart import CartManager
from milkdirect.errors import RemoteReadFailed, RemoteWriteFailed
from milkdirect.orders import OrderService
from milkdirect.profile import ProfileService
from milkdirect.services.models import CartLine, Order, OrderStatus, Profile


# ==================== IN-MEMORY REPOSITORIES ====================

class FakeCartRepository:
    """In-memory stand-in for CartRepository."""

    def __init__(self):
        self.rows: dict[str, dict] = {}
        self.writes: list[tuple] = []
        self.fail_reads = False
        self.fail_writes = False
        self.fail_clear = False
        self._ids = itertools.count(1)

    def _check_write(self):
        if self.fail_writes:
            raise RemoteWriteFailed("Failed to write cart_items")

    async def list_for_user(self, user_id: str) -> list[CartLine]:
        if self.fail_reads:
            raise RemoteReadFailed("Failed to read cart_items")
        return [CartLine(**row) for row in self.rows.values() if row["user_id"] == user_id]

    async def insert(self, user_id, seller_id, seller_name, milk_type, price, quantity=1):
        self._check_write()
        line_id = f"line-{next(self._ids)}"
        self.rows[line_id] = {
            "id": line_id,
            "user_id": user_id,
            "seller_id": seller_id,
            "seller_name": seller_name,
            "milk_type": milk_type,
            "price": price,
            "quantity": quantity,
        }
        self.writes.append(("insert", line_id))

    async def update_quantity(self, user_id, line_id, quantity):
        self._check_write()
        row = self.rows.get(line_id)
        if row and row["user_id"] == user_id:
            row["quantity"] = quantity
        self.writes.append(("update", line_id))

    async def delete(self, user_id, line_id):
        self._check_write()
        row = self.rows.get(line_id)
        if row and row["user_id"] == user_id:
            del self.rows[line_id]
        self.writes.append(("delete", line_id))

    async def delete_for_user(self, user_id):
        if self.fail_writes or self.fail_clear:
            raise RemoteWriteFailed("Failed to write cart_items")
        for line_id in [k for k, v in self.rows.items() if v["user_id"] == user_id]:
            del self.rows[line_id]
        self.writes.append(("delete_for_user", user_id))


class FakeOrderRepository:
    """In-memory stand-in for OrderRepository."""

    def __init__(self):
        self.rows: list[dict] = []
        self.batches: list[list[dict]] = []
        self.fail_writes = False
        self._ids = itertools.count(1)

    async def insert_many(self, rows):
        if self.fail_writes:
            raise RemoteWriteFailed("Failed to write orders")
        created = [{**row, "id": f"order-{next(self._ids)}"} for row in rows]
        self.batches.append(rows)
        self.rows.extend(created)
        return [Order(**row) for row in created]

    async def list_for_user(self, user_id):
        return [Order(**row) for row in reversed(self.rows) if row["user_id"] == user_id]

    async def update_status(self, order_id, status: OrderStatus):
        for row in self.rows:
            if row["id"] == order_id:
                row["status"] = status.value


class FakeProfileRepository:
    def __init__(self):
        self.rows: dict[str, dict] = {}

    async def get(self, user_id) -> Optional[Profile]:
        row = self.rows.get(user_id)
        return Profile(**row) if row else None

    async def upsert(self, user_id, name, phone, address):
        self.rows[user_id] = {"user_id": user_id, "name": name, "phone": phone, "address": address}
        return Profile(**self.rows[user_id])


# ==================== FIXTURES ====================

@pytest.fixture
def session():
    """Authenticated buyer session"""
    return Session(user_id="user-123", access_token="jwt-token", email="buyer@example.com")


@pytest.fixture
def cart_repo():
    return FakeCartRepository()


@pytest.fixture
def order_repo():
    return FakeOrderRepository()


@pytest.fixture
def profile_repo():
    return FakeProfileRepository()


@pytest.fixture
def cart_manager(cart_repo):
    return CartManager(cart_repo)


@pytest.fixture
def order_service(order_repo, cart_manager):
    return OrderService(order_repo, cart_manager)


@pytest.fixture
def mock_db():
    """Database double exposing the auth calls"""
    db = Mock()
    db.get_auth_user = AsyncMock(return_value=Mock(id="user-123", email="buyer@example.com"))
    db.sign_out = AsyncMock()
    return db


@pytest.fixture
def profile_service(profile_repo, mock_db):
    return ProfileService(profile_repo, mock_db)


@pytest.fixture
def mock_supabase_client():
    """Mock async Supabase client; every builder call returns the same mock"""
    client = Mock()

    table_mock = Mock()
    table_mock.select.return_value = table_mock
    table_mock.insert.return_value = table_mock
    table_mock.update.return_value = table_mock
    table_mock.delete.return_value = table_mock
    table_mock.upsert.return_value = table_mock
    table_mock.eq.return_value = table_mock
    table_mock.limit.return_value = table_mock
    table_mock.order.return_value = table_mock
    table_mock.execute = AsyncMock(return_value=Mock(data=[]))

    client.table.return_value = table_mock
    return client


@pytest.fixture
def sample_cart_row():
    """Sample cart_items row"""
    return {
        "id": "line-1",
        "user_id": "user-123",
        "seller_id": 2,
        "seller_name": "Krishna Dairy",
        "milk_type": "Buffalo Milk",
        "price": 70,
        "quantity": 2,
        "created_at": "2025-01-01T00:00:00Z",
    }


@pytest.fixture
def sample_order_row():
    """Sample orders row"""
    return {
        "id": "order-1",
        "user_id": "user-123",
        "seller_id": 2,
        "seller_name": "Krishna Dairy",
        "milk_type": "Buffalo Milk",
        "price": 70.0,
        "quantity": 2,
        "total": 140.0,
        "status": "pending",
        "created_at": "2025-01-01T00:00:00Z",
    }


def make_line(line_id, seller_id, seller_name, milk_type, price, quantity, user_id="user-123"):
    return CartLine(
        id=line_id,
        user_id=user_id,
        seller_id=seller_id,
        seller_name=seller_name,
        milk_type=milk_type,
        price=Decimal(str(price)),
        quantity=quantity,
    )


@pytest.fixture
def line_factory():
    """Build CartLine objects without touching a repository"""
    return make_line
