import asyncio
import logging
from typing import List, Optional, Sequence, Type, TypeVar

from pydantic import ValidationError

from app.db.kv import KeyValueBackend
from app.db.models import Record

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=Record)


def record_key(model: Type[Record], record_id: str) -> str:
    return f"{model.key_prefix}:{record_id}"


class RecordStore:
    """
    Single-record get/put over a key-value backend.

    Records live under "{type}:{id}", e.g. "assignment:abc123". Writes are
    unconditional overwrites; IDs are never reused so a record has one writer.
    """

    def __init__(self, kv: KeyValueBackend):
        self.kv = kv

    async def get(self, model: Type[R], record_id: str) -> Optional[R]:
        """
        Fetch a record, or None if it is missing.

        A stored value that is not valid JSON, or does not fit the model, is
        also reported as None.
        """
        key = record_key(model, record_id)
        raw = await self.kv.get(key)
        if not raw:
            return None
        try:
            return model.model_validate_json(raw)
        except ValidationError as e:
            logger.debug("Unreadable value at %s treated as missing: %s", key, e)
            return None

    async def put(self, record: Record) -> None:
        await self.kv.put(record_key(type(record), record.id), record.model_dump_json())

    async def get_many(self, model: Type[R], record_ids: Sequence[str]) -> List[R]:
        """Fetch records concurrently, keeping the order of record_ids and dropping missing ones."""
        results = await asyncio.gather(*(self.get(model, record_id) for record_id in record_ids))
        return [record for record in results if record is not None]
