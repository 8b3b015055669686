"""Tests for API endpoints"""
import pytest
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock, Mock

import httpx

from api.index import app
from milkdirect.routers import deps
from milkdirect.assistant import FALLBACK_REPLY
from milkdirect.auth import get_optional_session
from milkdirect.routers.deps import (
    get_cart_manager,
    get_chat_client,
    get_order_service,
    get_profile_service,
)


@pytest.fixture
def client(cart_manager, order_service, profile_service):
    """Test client with in-memory services and no session"""
    app.dependency_overrides[get_optional_session] = lambda: None
    app.dependency_overrides[get_cart_manager] = lambda: cart_manager
    app.dependency_overrides[get_order_service] = lambda: order_service
    app.dependency_overrides[get_profile_service] = lambda: profile_service
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_client(client, session):
    """Test client with an authenticated buyer"""
    app.dependency_overrides[get_optional_session] = lambda: session
    return client


def test_health_check(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_list_sellers(client):
    response = client.get("/api/sellers")
    assert response.status_code == 200
    assert response.json()["count"] == 3


def test_search_sellers(client):
    response = client.get("/api/sellers", params={"q": "buffalo"})
    sellers = response.json()["sellers"]
    assert [s["name"] for s in sellers] == ["Krishna Dairy"]


def test_get_seller_not_found(client):
    response = client.get("/api/sellers/99")
    assert response.status_code == 404


def test_anonymous_cart_is_empty(client):
    response = client.get("/api/webapp/cart")
    assert response.status_code == 200
    assert response.json()["items"] == []
    assert response.json()["total_price"] == 0


def test_add_to_cart_unauthorized(client, cart_repo):
    response = client.post("/api/webapp/cart/add", json={"seller_id": 1})
    assert response.status_code == 401
    assert response.json()["detail"] == "Please login to add items to cart"
    assert cart_repo.writes == []


def test_add_to_cart_uses_catalog_price(auth_client):
    response = auth_client.post("/api/webapp/cart/add", json={"seller_id": 3})
    assert response.status_code == 200
    data = response.json()
    assert data["items"][0]["price"] == 85.0
    assert data["items"][0]["seller_name"] == "Sundar A2 Farms"
    assert data["message"] == "Added A2 Desi Cow Milk to cart!"


def test_add_unknown_seller(auth_client):
    response = auth_client.post("/api/webapp/cart/add", json={"seller_id": 42})
    assert response.status_code == 404


def test_add_to_cart_write_failure(auth_client, cart_repo):
    cart_repo.fail_writes = True
    response = auth_client.post("/api/webapp/cart/add", json={"seller_id": 1})
    assert response.status_code == 502
    assert response.json()["detail"] == "Failed to add to cart"


def test_update_and_remove_item(auth_client):
    added = auth_client.post("/api/webapp/cart/add", json={"seller_id": 1}).json()
    line_id = added["items"][0]["id"]

    updated = auth_client.patch("/api/webapp/cart/item", json={"line_id": line_id, "quantity": 4})
    assert updated.json()["total_items"] == 4

    removed = auth_client.delete("/api/webapp/cart/item", params={"line_id": line_id})
    assert removed.json()["items"] == []


def test_clear_cart(auth_client):
    auth_client.post("/api/webapp/cart/add", json={"seller_id": 1})
    auth_client.post("/api/webapp/cart/add", json={"seller_id": 2})

    response = auth_client.delete("/api/webapp/cart")

    assert response.status_code == 200
    assert response.json()["total_items"] == 0


def test_checkout_unauthorized(client):
    response = client.post("/api/webapp/orders/checkout")
    assert response.status_code == 401
    assert response.json()["detail"] == "Please login to place order"


def test_checkout_empty_cart(auth_client):
    response = auth_client.post("/api/webapp/orders/checkout")
    assert response.status_code == 400
    assert response.json()["detail"] == "Your cart is empty"


def test_checkout_and_history(auth_client):
    auth_client.post("/api/webapp/cart/add", json={"seller_id": 1})
    auth_client.post("/api/webapp/cart/add", json={"seller_id": 1})
    auth_client.post("/api/webapp/cart/add", json={"seller_id": 2})

    response = auth_client.post("/api/webapp/orders/checkout")

    assert response.status_code == 200
    data = response.json()
    assert [o["total"] for o in data["orders"]] == [130.0, 70.0]
    assert data["total"] == 200.0
    assert auth_client.get("/api/webapp/cart").json()["items"] == []

    history = auth_client.get("/api/webapp/orders").json()
    assert history["count"] == 2


def test_checkout_write_failure(auth_client, order_repo):
    auth_client.post("/api/webapp/cart/add", json={"seller_id": 1})
    order_repo.fail_writes = True

    response = auth_client.post("/api/webapp/orders/checkout")

    assert response.status_code == 502
    assert response.json()["detail"] == "Failed to place order"
    assert auth_client.get("/api/webapp/cart").json()["total_items"] == 1


def test_checkout_confirms_orders_when_cart_not_cleared(auth_client, cart_repo, order_repo):
    auth_client.post("/api/webapp/cart/add", json={"seller_id": 1})
    cart_repo.fail_clear = True

    response = auth_client.post("/api/webapp/orders/checkout")

    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Order placed successfully!"
    assert data["warning"] == "Failed to clear cart"
    assert len(data["orders"]) == 1
    assert len(order_repo.rows) == 1


def test_checkout_has_no_warning_on_success(auth_client):
    auth_client.post("/api/webapp/cart/add", json={"seller_id": 2})

    response = auth_client.post("/api/webapp/orders/checkout")

    assert response.json()["warning"] is None


def test_orders_unauthorized(client):
    response = client.get("/api/webapp/orders")
    assert response.status_code == 401


def test_profile_roundtrip(auth_client):
    empty = auth_client.get("/api/webapp/profile").json()
    assert empty["name"] == ""
    assert empty["email"] == "buyer@example.com"

    response = auth_client.put(
        "/api/webapp/profile",
        json={"name": " Asha ", "phone": "9876543210", "address": "Sector 5, Delhi"},
    )
    assert response.status_code == 200
    assert auth_client.get("/api/webapp/profile").json()["name"] == "Asha"


def test_profile_unauthorized(client):
    response = client.get("/api/webapp/profile")
    assert response.status_code == 401


def test_logout(auth_client, mock_db):
    response = auth_client.post("/api/webapp/auth/logout")
    assert response.status_code == 200
    mock_db.sign_out.assert_awaited_once_with("jwt-token")


def test_me_anonymous(client):
    assert client.get("/api/webapp/auth/me").json() == {"authenticated": False}


def test_ai_greeting(client):
    response = client.get("/api/webapp/ai/greeting")
    assert "MilkDirect" in response.json()["content"]


def test_ai_chat(client):
    chat_client = Mock()
    chat_client.complete = AsyncMock(return_value="Buffalo milk is ₹70/L nearby.")
    app.dependency_overrides[get_chat_client] = lambda: chat_client

    response = client.post(
        "/api/webapp/ai/chat",
        json={"messages": [{"role": "user", "content": "Price of buffalo milk?"}]},
    )

    assert response.status_code == 200
    assert response.json()["content"] == "Buffalo milk is ₹70/L nearby."
    assert response.json()["fallback"] is False


def test_ai_chat_connection_error(client):
    chat_client = Mock()
    chat_client.complete = AsyncMock(side_effect=httpx.ConnectError("unreachable"))
    app.dependency_overrides[get_chat_client] = lambda: chat_client

    response = client.post(
        "/api/webapp/ai/chat",
        json={"messages": [{"role": "user", "content": "hi"}]},
    )

    assert response.json()["content"] == FALLBACK_REPLY
    assert response.json()["fallback"] is True


def test_ai_chat_rejects_empty_conversation(client):
    response = client.post("/api/webapp/ai/chat", json={"messages": []})
    assert response.status_code == 422


def test_ai_chat_without_assistant_config(client, monkeypatch):
    monkeypatch.delenv("AI_ASSISTANT_URL", raising=False)
    monkeypatch.delenv("SUPABASE_URL", raising=False)
    monkeypatch.setattr(deps, "_chat_client", None)

    response = client.post(
        "/api/webapp/ai/chat",
        json={"messages": [{"role": "user", "content": "hi"}]},
    )

    assert response.status_code == 200
    assert response.json()["content"] == FALLBACK_REPLY
    assert response.json()["fallback"] is True
    assert deps._chat_client is None
