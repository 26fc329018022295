"""
Key-value backends.

The service only needs two operations from its storage: read the string stored
under a key, and overwrite the string stored under a key. Anything offering
those, asynchronously, can back the record store and the ordered indexes.
"""
import logging
from typing import Dict, Optional, Protocol

from fastapi.concurrency import run_in_threadpool

from app.core.config import Settings
from app.db.supabase import create_supabase_client

logger = logging.getLogger(__name__)


class KeyValueBackend(Protocol):
    async def get(self, key: str) -> Optional[str]:
        ...

    async def put(self, key: str, value: str) -> None:
        ...


class InMemoryKV:
    """Process-local backend. Contents are lost on restart."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    async def put(self, key: str, value: str) -> None:
        self._data[key] = value

    def keys(self):
        return list(self._data.keys())


class SupabaseKV:
    """
    Backend storing each key as a row of a Supabase table.

    Expected table:

        create table kv_store (
            key   text primary key,
            value text not null
        );

    The supabase client is synchronous, so calls run in the threadpool.
    """

    def __init__(self, client, table: str = "kv_store"):
        self.client = client
        self.table = table

    def _get(self, key: str) -> Optional[str]:
        result = self.client.table(self.table).select("value").eq("key", key).limit(1).execute()
        if not result.data:
            return None
        return result.data[0].get("value")

    def _put(self, key: str, value: str) -> None:
        self.client.table(self.table).upsert({"key": key, "value": value}).execute()

    async def get(self, key: str) -> Optional[str]:
        return await run_in_threadpool(self._get, key)

    async def put(self, key: str, value: str) -> None:
        await run_in_threadpool(self._put, key, value)


def build_kv_backend(settings: Settings) -> Optional[KeyValueBackend]:
    """Select the backend named by KV_BACKEND. None means no backend is bound."""
    if settings.KV_BACKEND == "memory":
        logger.info("Using in-memory key-value backend")
        return InMemoryKV()

    if settings.KV_BACKEND == "supabase":
        client = create_supabase_client(settings)
        if client is None:
            return None
        logger.info("Using Supabase key-value backend (table %s)", settings.SUPABASE_KV_TABLE)
        return SupabaseKV(client, settings.SUPABASE_KV_TABLE)

    return None
