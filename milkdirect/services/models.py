"""Database Models - Pydantic models for the marketplace tables."""
from decimal import Decimal
from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, field_validator

from milkdirect.services.money import to_decimal as _to_decimal, multiply, round_money


class OrderStatus(str, Enum):
    """Fulfillment status of an order. Only `pending` is set by checkout."""
    PENDING = "pending"
    PICKED_UP = "picked_up"
    DELIVERED = "delivered"

    @classmethod
    def parse(cls, value: str) -> "OrderStatus":
        """Accept the stored value or the human label ("Picked Up")."""
        normalized = value.strip().lower().replace(" ", "_")
        return cls(normalized)


class CartLine(BaseModel):
    """Row of `cart_items`: one seller selection with a quantity."""
    id: str
    user_id: Optional[str] = None
    seller_id: int
    seller_name: str
    milk_type: str
    price: Decimal
    quantity: int = 1
    created_at: Optional[datetime] = None

    class Config:
        extra = "ignore"  # Ignore unknown fields from DB

    @field_validator("price", mode="before")
    @classmethod
    def convert_price_to_decimal(cls, v):
        return _to_decimal(v)

    @property
    def line_total(self) -> Decimal:
        return round_money(multiply(self.price, self.quantity))


class Order(BaseModel):
    """Row of `orders`: immutable snapshot of a cart line at checkout."""
    id: str
    user_id: str
    seller_id: int
    seller_name: str
    milk_type: str
    price: Decimal
    quantity: int
    total: Decimal
    status: OrderStatus = OrderStatus.PENDING
    created_at: Optional[datetime] = None

    class Config:
        extra = "ignore"

    @field_validator("price", "total", mode="before")
    @classmethod
    def convert_amount_to_decimal(cls, v):
        return _to_decimal(v)

    @field_validator("status", mode="before")
    @classmethod
    def normalize_status(cls, v):
        if isinstance(v, str):
            return OrderStatus.parse(v)
        return v


class Profile(BaseModel):
    """Row of `profiles`. Missing values read back as empty strings."""
    user_id: str
    name: str = ""
    phone: str = ""
    address: str = ""

    class Config:
        extra = "ignore"

    @field_validator("name", "phone", "address", mode="before")
    @classmethod
    def none_to_empty(cls, v):
        return v or ""
