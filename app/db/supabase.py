import logging
from typing import Optional

from supabase import create_client, Client

from app.core.config import Settings

logger = logging.getLogger(__name__)


def create_supabase_client(settings: Settings) -> Optional[Client]:
    """
    Create the Supabase client used as the key-value backend.

    Returns:
        Client, or None when SUPABASE_URL / SUPABASE_SERVICE_KEY are missing

    Raises:
        RuntimeError: If the client cannot be created from the given settings
    """
    if not settings.SUPABASE_URL or not settings.SUPABASE_SERVICE_KEY:
        logger.warning("KV_BACKEND=supabase but SUPABASE_URL or SUPABASE_SERVICE_KEY is not set")
        return None

    try:
        # Service role key so reads and writes are not filtered by RLS
        return create_client(settings.SUPABASE_URL, settings.SUPABASE_SERVICE_KEY)
    except Exception as e:
        error_msg = f"Failed to create Supabase client: {str(e)}"
        logger.error(error_msg)
        raise RuntimeError(error_msg)
