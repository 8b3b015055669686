"""Cart models with Decimal-based pricing."""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional, List

from milkdirect.services.models import CartLine
from milkdirect.services.money import add, format_money, percent, round_money, subtract, to_float

# Checkout summary shown on the cart page
DELIVERY_FEE = Decimal("30")
SAVINGS_PERCENT = Decimal("20")


@dataclass
class CartSummary:
    """Price breakdown for the checkout screen."""
    subtotal: Decimal
    savings: Decimal
    delivery_fee: Decimal
    total: Decimal

    def to_dict(self) -> dict:
        return {
            "subtotal": to_float(self.subtotal),
            "savings": to_float(self.savings),
            "delivery_fee": to_float(self.delivery_fee),
            "total": to_float(self.total),
            # Rupee strings for the checkout screen, e.g. "₹1,250"
            "display": {
                "subtotal": format_money(self.subtotal),
                "savings": format_money(self.savings),
                "delivery_fee": format_money(self.delivery_fee),
                "total": format_money(self.total),
            },
        }


@dataclass
class Cart:
    """A user's cart as last read from the store."""
    user_id: Optional[str]
    lines: List[CartLine] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.lines

    @property
    def total_items(self) -> int:
        """Sum of quantities over all lines."""
        return sum(line.quantity for line in self.lines)

    @property
    def total_price(self) -> Decimal:
        """Sum of price x quantity over all lines."""
        return round_money(sum((line.price * line.quantity for line in self.lines), Decimal("0")))

    def by_id(self) -> dict[str, CartLine]:
        return {line.id: line for line in self.lines}

    def get_line(self, line_id: str) -> Optional[CartLine]:
        return self.by_id().get(line_id)

    def find_by_seller(self, seller_id: int) -> Optional[CartLine]:
        """First line for the seller; lines are merged per seller on add."""
        return next((line for line in self.lines if line.seller_id == seller_id), None)

    def summary(self) -> CartSummary:
        """
        Subtotal, flat 20% savings, and a delivery fee.

        An empty cart has no delivery fee, so every figure is zero.
        """
        subtotal = self.total_price
        if self.is_empty:
            zero = Decimal("0")
            return CartSummary(subtotal=zero, savings=zero, delivery_fee=zero, total=zero)
        savings = round_money(percent(subtotal, SAVINGS_PERCENT))
        total = round_money(add(subtract(subtotal, savings), DELIVERY_FEE))
        return CartSummary(
            subtotal=subtotal,
            savings=savings,
            delivery_fee=DELIVERY_FEE,
            total=total,
        )

    def to_dict(self) -> dict:
        """Serialize for API responses."""
        return {
            "items": [
                {
                    "id": line.id,
                    "seller_id": line.seller_id,
                    "seller_name": line.seller_name,
                    "milk_type": line.milk_type,
                    "price": to_float(line.price),
                    "quantity": line.quantity,
                    "line_total": to_float(line.line_total),
                }
                for line in self.lines
            ],
            "total_items": self.total_items,
            "total_price": to_float(self.total_price),
            "summary": self.summary().to_dict(),
        }
