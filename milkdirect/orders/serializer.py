"""Order response serializers."""
from typing import Any

from milkdirect.services.models import Order, OrderStatus
from milkdirect.services.money import to_float

STATUS_LABELS = {
    OrderStatus.PENDING: "Pending",
    OrderStatus.PICKED_UP: "Picked Up",
    OrderStatus.DELIVERED: "Delivered",
}


def build_order_payload(order: Order) -> dict[str, Any]:
    return {
        "id": order.id,
        "seller_id": order.seller_id,
        "seller_name": order.seller_name,
        "milk_type": order.milk_type,
        "price": to_float(order.price),
        "quantity": order.quantity,
        "total": to_float(order.total),
        "status": order.status.value,
        "status_label": STATUS_LABELS[order.status],
        "created_at": order.created_at.isoformat() if order.created_at else None,
    }
