from fastapi import Depends, HTTPException, Request, status

from app.db.index import OrderedIndex
from app.db.kv import KeyValueBackend
from app.db.store import RecordStore

MISSING_BACKEND_DETAIL = (
    "Key-value backend not configured. Set KV_BACKEND=memory, or set "
    "KV_BACKEND=supabase together with SUPABASE_URL and SUPABASE_SERVICE_KEY."
)


def get_kv(request: Request) -> KeyValueBackend:
    """
    Dependency returning the key-value backend bound to the app.
    Raises 500 naming the required configuration when none is bound.
    """
    kv = getattr(request.app.state, "kv", None)
    if kv is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=MISSING_BACKEND_DETAIL
        )
    return kv


def get_records(kv: KeyValueBackend = Depends(get_kv)) -> RecordStore:
    return RecordStore(kv)


def get_index(request: Request, kv: KeyValueBackend = Depends(get_kv)) -> OrderedIndex:
    # One OrderedIndex per app so its append locks are shared across requests
    index = getattr(request.app.state, "index", None)
    if index is None or index.kv is not kv:
        index = OrderedIndex(kv)
        request.app.state.index = index
    return index


async def read_json_body(request: Request) -> dict:
    """Decode the request body as a JSON object, or 400 "Invalid JSON body"."""
    try:
        body = await request.json()
    except (ValueError, RecursionError):
        body = None
    if not isinstance(body, dict):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid JSON body"
        )
    return body
