"""Assistant chat client."""
from .client import ChatMessage, ChatStreamClient, parse_sse_line
from .prompts import FALLBACK_REPLY, GREETING

__all__ = [
    "ChatMessage",
    "ChatStreamClient",
    "FALLBACK_REPLY",
    "GREETING",
    "parse_sse_line",
]
