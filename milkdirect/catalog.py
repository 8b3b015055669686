"""
Seller Catalog

Static seller listings shown on the home screen. Prices are per liter.
"""
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from milkdirect.services.money import to_float


class SensorReading(BaseModel):
    """Latest cold-chain reading published for a listing."""
    temp: str
    quality: str
    updated: str


class Seller(BaseModel):
    id: int
    name: str
    distance: str
    milk_type: str
    description: str
    price: Decimal
    rating: float
    tags: list[str] = Field(default_factory=list)
    verified: bool = False
    sensor: Optional[SensorReading] = None

    def to_dict(self) -> dict:
        data = self.model_dump()
        data["price"] = to_float(self.price)
        return data


SELLERS: tuple[Seller, ...] = (
    Seller(
        id=1,
        name="Green Valley Farm",
        distance="2.5 km",
        milk_type="Organic Whole Milk",
        description="Fresh organic milk from grass-fed cows",
        price=Decimal("65"),
        rating=4.8,
        tags=["Organic", "Non-GMO"],
        verified=True,
        sensor=SensorReading(temp="4°C", quality="Excellent", updated="2 mins ago"),
    ),
    Seller(
        id=2,
        name="Krishna Dairy",
        distance="3.2 km",
        milk_type="Buffalo Milk",
        description="Rich and creamy buffalo milk, high fat content",
        price=Decimal("70"),
        rating=4.6,
        tags=["High Fat", "Fresh"],
        verified=True,
        sensor=SensorReading(temp="5°C", quality="Good", updated="5 mins ago"),
    ),
    Seller(
        id=3,
        name="Sundar A2 Farms",
        distance="5.0 km",
        milk_type="A2 Desi Cow Milk",
        description="Premium A2 milk from indigenous cow breeds",
        price=Decimal("85"),
        rating=4.9,
        tags=["A2 Protein", "Desi Cow", "Premium"],
        verified=True,
        sensor=SensorReading(temp="3°C", quality="Excellent", updated="1 min ago"),
    ),
)

_BY_ID = {seller.id: seller for seller in SELLERS}


def list_sellers(query: Optional[str] = None) -> list[Seller]:
    """All sellers, optionally filtered by a case-insensitive name/milk match."""
    if not query:
        return list(SELLERS)
    needle = query.strip().lower()
    return [
        seller
        for seller in SELLERS
        if needle in seller.name.lower() or needle in seller.milk_type.lower()
    ]


def get_seller(seller_id: int) -> Optional[Seller]:
    return _BY_ID.get(seller_id)
