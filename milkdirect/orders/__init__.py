"""Order processing module."""
from .serializer import STATUS_LABELS, build_order_payload
from .service import OrderService, build_order_row

__all__ = [
    "OrderService",
    "STATUS_LABELS",
    "build_order_payload",
    "build_order_row",
]
