import asyncio
import json
import logging
from typing import Dict, List

from pydantic import TypeAdapter, ValidationError

from app.db.kv import KeyValueBackend

logger = logging.getLogger(__name__)

ASSIGNMENTS = "assignments"
SUBMISSIONS = "submissions"

_id_list = TypeAdapter(List[str])


def index_key(name: str) -> str:
    return f"index:{name}"


class OrderedIndex:
    """
    Insertion-ordered, duplicate-free list of record IDs per record type.

    The key-value backend has no query capability, so listing a record type
    means reading its index and fetching each ID. The whole list is stored as
    one JSON array under "index:{name}".

    append() is read-modify-write with no compare-and-swap against the
    backend. Appends within this process are serialized per index name, but
    two processes appending to the same index at once can still lose one of
    the updates (last writer wins). The record itself stays persisted and is
    then unreachable by listing.
    """

    def __init__(self, kv: KeyValueBackend):
        self.kv = kv
        self._locks: Dict[str, asyncio.Lock] = {}

    def _lock(self, name: str) -> asyncio.Lock:
        if name not in self._locks:
            self._locks[name] = asyncio.Lock()
        return self._locks[name]

    async def list(self, name: str) -> List[str]:
        """IDs in insertion order; empty if the index is missing or unreadable."""
        raw = await self.kv.get(index_key(name))
        if not raw:
            return []
        try:
            return _id_list.validate_json(raw)
        except ValidationError as e:
            logger.debug("Unreadable index %s treated as empty: %s", name, e)
            return []

    async def append(self, name: str, record_id: str) -> None:
        async with self._lock(name):
            ids = await self.list(name)
            if record_id not in ids:
                ids.append(record_id)
            await self.kv.put(index_key(name), json.dumps(ids))
