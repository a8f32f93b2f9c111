"""
Supabase client initialization.
Single point of database connection.
"""

from supabase import create_client, Client
from supabase.lib.client_options import ClientOptions
import asyncio
import concurrent.futures
import logging
import threading
from functools import wraps
from typing import Optional

from config.settings import settings

logger = logging.getLogger(__name__)

_client: Optional[Client] = None
_client_lock = threading.Lock()


class SupabaseNotConfigured(RuntimeError):
    pass


def _check_credentials(key: str):
    if not settings.supabase_url or not key:
        logger.error(
            "Supabase credentials not configured! "
            f"SUPABASE_URL: {'set' if settings.supabase_url else 'MISSING'}, "
            f"key: {'set' if key else 'MISSING'}. Hint: check your .env"
        )
        raise SupabaseNotConfigured("SUPABASE_URL and SUPABASE_SERVICE_KEY (or SUPABASE_KEY) are required")


def get_supabase() -> Client:
    """
    Shared table-access client (service role key when available).
    Created on first use so importing repositories never opens a connection.
    """
    global _client
    if _client is not None:
        return _client
    with _client_lock:
        if _client is None:
            key = settings.supabase_service_key or settings.supabase_key
            _check_credentials(key)
            # Schema isolation: staging can live in its own schema, production uses public
            if settings.db_schema != "public":
                _client = create_client(
                    settings.supabase_url, key,
                    options=ClientOptions(schema=settings.db_schema)
                )
            else:
                _client = create_client(settings.supabase_url, key)
            logger.info(f"Supabase client ready (schema={settings.db_schema})")
    return _client


def create_auth_client() -> Client:
    """
    Fresh anon client for one auth call.
    The SDK keeps the signed-in session on the client object, so per-request
    sign in / sign out must not touch the shared client.
    """
    key = settings.supabase_key or settings.supabase_service_key
    _check_credentials(key)
    return create_client(
        settings.supabase_url, key,
        options=ClientOptions(persist_session=False, auto_refresh_token=False)
    )


# Dedicated bounded thread pool for DB operations; keeps Supabase calls off the default executor.
_db_executor = concurrent.futures.ThreadPoolExecutor(
    max_workers=10,
    thread_name_prefix="supabase-db",
)


def run_sync(func):
    """
    Decorator to run synchronous Supabase operations in async context.
    Supabase Python SDK is synchronous, so we need this wrapper.
    Uses a dedicated bounded thread pool instead of the default executor.
    """
    @wraps(func)
    async def wrapper(*args, **kwargs):
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(_db_executor, lambda: func(*args, **kwargs))
    return wrapper
