"""
WebApp API Pydantic Models

Request bodies for the webapp endpoints.
"""
from typing import List

from pydantic import BaseModel, Field

from milkdirect.assistant import ChatMessage


# ==================== CART MODELS ====================

class AddToCartRequest(BaseModel):
    seller_id: int


class UpdateCartItemRequest(BaseModel):
    line_id: str
    quantity: int


# ==================== PROFILE MODELS ====================

class UpdateProfileRequest(BaseModel):
    name: str = Field(default="", max_length=120)
    phone: str = Field(default="", max_length=32)
    address: str = Field(default="", max_length=500)


# ==================== AI MODELS ====================

class ChatRequest(BaseModel):
    messages: List[ChatMessage] = Field(..., min_length=1, max_length=50)


class ChatResponse(BaseModel):
    role: str = "assistant"
    content: str
    fallback: bool = False
