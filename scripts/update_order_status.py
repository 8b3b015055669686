#!/usr/bin/env python3
"""
Set the fulfillment status of an order.

Used by delivery staff tooling once milk is picked up or delivered:

    python scripts/update_order_status.py <order_id> picked_up
    python scripts/update_order_status.py <order_id> delivered
"""
import argparse
import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from milkdirect.cart import CartManager
from milkdirect.errors import MarketplaceError
from milkdirect.orders import OrderService
from milkdirect.services.database import init_database
from milkdirect.services.models import OrderStatus


async def run(order_id: str, status: str) -> int:
    db = await init_database()
    service = OrderService(db.orders, CartManager(db.cart))
    try:
        new_status = await service.update_status(order_id, status)
    except ValueError:
        valid = ", ".join(s.value for s in OrderStatus)
        print(f"Unknown status '{status}'. Expected one of: {valid}", file=sys.stderr)
        return 2
    except MarketplaceError as e:
        print(f"Failed to update order: {e.message}", file=sys.stderr)
        return 1
    print(f"Order {order_id} is now {new_status.value}")
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="Update an order's fulfillment status")
    parser.add_argument("order_id", help="Order UUID")
    parser.add_argument("status", help="pending | picked_up | delivered")
    args = parser.parse_args()
    return asyncio.run(run(args.order_id, args.status))


if __name__ == "__main__":
    sys.exit(main())
