"""Base repository with shared Supabase client."""

import httpx
from postgrest.exceptions import APIError
from supabase._async.client import AsyncClient

from milkdirect.errors import RemoteReadFailed, RemoteWriteFailed
from milkdirect.logging import get_logger

logger = get_logger(__name__)

# Anything the PostgREST builder can raise for a rejected or unreachable call
STORE_ERRORS = (APIError, httpx.HTTPError)


class BaseRepository:
    """Base class for all repositories.

    All methods should use await with the client. Store failures are
    re-raised as RemoteReadFailed / RemoteWriteFailed so callers never see
    driver exceptions.
    """

    table_name: str = ""

    def __init__(self, client: AsyncClient) -> None:
        self.client = client

    def table(self):
        return self.client.table(self.table_name)

    async def _read(self, query):
        try:
            result = await query.execute()
        except STORE_ERRORS as e:
            logger.error("Read from %s failed: %s", self.table_name, type(e).__name__)
            raise RemoteReadFailed(f"Failed to read {self.table_name}") from e
        return result.data or []

    async def _write(self, query):
        try:
            result = await query.execute()
        except STORE_ERRORS as e:
            logger.error(
                "Write to %s failed: %s", self.table_name, type(e).__name__, exc_info=True
            )
            raise RemoteWriteFailed(f"Failed to write {self.table_name}") from e
        return result.data or []
