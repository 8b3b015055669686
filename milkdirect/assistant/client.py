"""
Streaming chat completion client.

The assistant endpoint answers a POSTed conversation with server-sent
events, one JSON chunk per line:

    data: {"choices": [{"delta": {"content": "Hel"}}]}
    data: {"choices": [{"delta": {"content": "lo"}}]}
    data: [DONE]

`ChatStreamClient` yields the content deltas and assembles them into the
running reply.
"""
import json
from typing import AsyncIterator, Iterable, Literal, Optional

import httpx
from pydantic import BaseModel, Field

from milkdirect.config import get_assistant_key, get_assistant_timeout, get_assistant_url
from milkdirect.logging import get_logger

logger = get_logger(__name__)

DATA_PREFIX = "data: "
DONE_SENTINEL = "[DONE]"


class ChatMessage(BaseModel):
    role: Literal["user", "assistant"]
    content: str = Field(..., max_length=4000)


def parse_sse_line(line: str) -> Optional[str]:
    """
    Extract the content delta from one SSE line.

    Returns None for lines that are not data lines, are the sentinel,
    are not valid JSON, or carry no content.
    """
    if not line.startswith(DATA_PREFIX):
        return None
    payload = line[len(DATA_PREFIX):].strip()
    if payload == DONE_SENTINEL:
        return None
    try:
        chunk = json.loads(payload)
    except json.JSONDecodeError:
        return None
    try:
        content = chunk["choices"][0]["delta"].get("content")
    except (KeyError, IndexError, TypeError, AttributeError):
        return None
    return content or None


def is_done(line: str) -> bool:
    return line.strip() == f"{DATA_PREFIX}{DONE_SENTINEL}"


class ChatStreamClient:
    """Client for the external streaming chat endpoint."""

    def __init__(
        self,
        url: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.url = url or get_assistant_url()
        self.api_key = api_key if api_key is not None else get_assistant_key()
        self._http_client = http_client
        self._owns_client = http_client is None
        self.timeout = timeout or get_assistant_timeout()

    def _get_client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=self.timeout)
        return self._http_client

    async def aclose(self) -> None:
        if self._http_client is not None and self._owns_client:
            await self._http_client.aclose()
            self._http_client = None

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    async def iter_deltas(self, messages: Iterable[ChatMessage]) -> AsyncIterator[str]:
        """Yield content deltas until the sentinel or end of stream."""
        body = {"messages": [m.model_dump() for m in messages]}
        client = self._get_client()
        async with client.stream("POST", self.url, json=body, headers=self._headers()) as response:
            response.raise_for_status()
            async for line in response.aiter_lines():
                if is_done(line):
                    break
                delta = parse_sse_line(line)
                if delta:
                    yield delta

    async def complete(self, messages: Iterable[ChatMessage]) -> str:
        """Assemble the full reply from the streamed deltas."""
        buffer = ""
        async for delta in self.iter_deltas(messages):
            buffer += delta
        logger.debug("Assistant reply assembled (%d chars)", len(buffer))
        return buffer
