"""
Public Router

Endpoints that don't require authentication.
"""
from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from milkdirect.catalog import get_seller, list_sellers
from milkdirect.errors import ERROR_SELLER_NOT_FOUND

router = APIRouter(prefix="/api", tags=["public"])


@router.get("/sellers")
async def get_sellers(
    q: Optional[str] = Query(None, description="Filter by farm name or milk type"),
):
    sellers = list_sellers(q)
    return {"sellers": [seller.to_dict() for seller in sellers], "count": len(sellers)}


@router.get("/sellers/{seller_id}")
async def get_seller_by_id(seller_id: int):
    seller = get_seller(seller_id)
    if seller is None:
        raise HTTPException(status_code=404, detail=ERROR_SELLER_NOT_FOUND)
    return seller.to_dict()
