"""
WebApp AI Chat Router

Forwards the conversation to the external assistant and returns the
assembled reply.
"""
from typing import Optional

import httpx
from fastapi import APIRouter, Depends

from milkdirect.assistant import FALLBACK_REPLY, GREETING, ChatStreamClient
from milkdirect.logging import get_logger

from ..deps import get_chat_client
from .models import ChatRequest, ChatResponse

logger = get_logger(__name__)

router = APIRouter(prefix="/ai", tags=["webapp-ai"])


@router.get("/greeting", response_model=ChatResponse)
async def get_greeting():
    """Opening assistant message for an empty conversation."""
    return ChatResponse(content=GREETING)


@router.post("/chat", response_model=ChatResponse)
async def send_chat_message(
    request: ChatRequest,
    chat_client: Optional[ChatStreamClient] = Depends(get_chat_client),
):
    """
    Send the conversation so far and get the assistant's reply.

    Connection failures and a missing assistant endpoint return the apology
    text instead of an error so the chat window always gets a message to show.
    """
    if chat_client is None:
        return ChatResponse(content=FALLBACK_REPLY, fallback=True)

    try:
        reply = await chat_client.complete(request.messages)
    except httpx.HTTPError as e:
        logger.error("Assistant request failed: %s", type(e).__name__, exc_info=True)
        return ChatResponse(content=FALLBACK_REPLY, fallback=True)

    if not reply:
        return ChatResponse(content=FALLBACK_REPLY, fallback=True)
    return ChatResponse(content=reply)
