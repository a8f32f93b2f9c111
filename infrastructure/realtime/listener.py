"""
Realtime listener - drops cached public content when a content table changes.

One postgres_changes channel per table, like the site's "<table>-changes"
channels. Delivery is Supabase's job; we only react.
"""

import logging
from typing import Awaitable, Callable, List, Optional

from supabase import AsyncClient, acreate_client

from config.settings import settings
from core.domain.constants import CONTENT_TABLES
from core.services.content_cache import ContentCache

logger = logging.getLogger(__name__)


async def _default_client() -> AsyncClient:
    key = settings.supabase_service_key or settings.supabase_key
    return await acreate_client(settings.supabase_url, key)


def _event_type(payload) -> str:
    if not isinstance(payload, dict):
        return "?"
    data = payload.get("data") or {}
    return data.get("type") or payload.get("eventType") or payload.get("type") or "?"


class RealtimeContentListener:
    """Subscribes to content tables and invalidates the cache on every change."""

    def __init__(
        self,
        cache: ContentCache,
        tables: Optional[List[str]] = None,
        schema: str = "public",
        client_factory: Callable[[], Awaitable[AsyncClient]] = _default_client,
    ):
        self.cache = cache
        self.tables = list(tables or CONTENT_TABLES)
        self.schema = schema
        self._client_factory = client_factory
        self._client: Optional[AsyncClient] = None
        self._channels = []
        self.events_received = 0

    @property
    def running(self) -> bool:
        return bool(self._channels)

    def handle_change(self, table: str, payload=None) -> None:
        """Channel callback. Never raises - a bad payload must not kill the socket loop."""
        self.events_received += 1
        try:
            dropped = self.cache.invalidate(table)
            logger.info(f"[REALTIME] {table} {_event_type(payload)} -> dropped {dropped} cached entries")
        except Exception as e:
            logger.error(f"[REALTIME] Failed to handle change on {table}: {e}", exc_info=True)

    def _callback_for(self, table: str):
        def _callback(payload):
            self.handle_change(table, payload)
        return _callback

    async def start(self) -> None:
        if self.running:
            return
        if self._client:
            # Left over from a subscribe that failed part way
            await self.stop()
        self._client = await self._client_factory()
        for table in self.tables:
            channel = self._client.channel(f"{table}-changes")
            channel.on_postgres_changes(
                "*",
                schema=self.schema,
                table=table,
                callback=self._callback_for(table),
            )
            await channel.subscribe()
            self._channels.append(channel)
            logger.info(f"[REALTIME] Subscribed to {self.schema}.{table}")

    async def stop(self) -> None:
        if not self._client:
            return
        for channel in self._channels:
            try:
                await self._client.remove_channel(channel)
            except Exception as e:
                logger.warning(f"[REALTIME] Failed to remove channel: {e}")
        self._channels = []
        try:
            await self._client.realtime.close()
        except Exception as e:
            logger.warning(f"[REALTIME] Failed to close realtime socket: {e}")
        self._client = None
        logger.info("[REALTIME] Listener stopped")
