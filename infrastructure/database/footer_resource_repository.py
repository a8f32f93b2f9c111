"""
Supabase implementation of FooterResource repository.
"""

import logging
from typing import Optional, List

from supabase import Client

from core.domain.constants import FOOTER_RESOURCES_TABLE
from core.domain.models import FooterResource, FooterResourceCreate
from core.interfaces.repositories import IFooterResourceRepository
from infrastructure.database.supabase_client import get_supabase, run_sync

logger = logging.getLogger(__name__)


class SupabaseFooterResourceRepository(IFooterResourceRepository):
    """Supabase implementation of footer resource repository"""

    def __init__(self, client: Optional[Client] = None):
        self._client = client

    @property
    def db(self) -> Client:
        return self._client or get_supabase()

    def _to_model(self, data: dict) -> FooterResource:
        return FooterResource(
            id=str(data["id"]),
            title_it=data.get("title_it") or "",
            title_en=data.get("title_en") or "",
            url=data.get("url") or "",
            icon=data.get("icon") or None,
            category=data.get("category") or "links",
            position=data.get("position") or 0,
            is_active=data.get("is_active", True),
        )

    @run_sync
    def _list_sync(self, active_only: bool) -> List[dict]:
        query = self.db.table(FOOTER_RESOURCES_TABLE).select("*")
        if active_only:
            # Public footer: grouping happens in the service, keep global position order
            query = query.eq("is_active", True).order("position")
        else:
            query = query.order("category").order("position")
        response = query.execute()
        return response.data or []

    async def list(self, active_only: bool = False) -> List[FooterResource]:
        data = await self._list_sync(active_only)
        return [self._to_model(d) for d in data]

    @run_sync
    def _get_by_id_sync(self, resource_id: str) -> Optional[dict]:
        response = self.db.table(FOOTER_RESOURCES_TABLE).select("*").eq("id", resource_id).execute()
        return response.data[0] if response.data else None

    async def get_by_id(self, resource_id: str) -> Optional[FooterResource]:
        data = await self._get_by_id_sync(resource_id)
        return self._to_model(data) if data else None

    @run_sync
    def _count_sync(self) -> int:
        response = self.db.table(FOOTER_RESOURCES_TABLE).select("id", count="exact").execute()
        return response.count if response.count is not None else 0

    async def count(self) -> int:
        return await self._count_sync()

    @run_sync
    def _create_sync(self, data: dict) -> dict:
        response = self.db.table(FOOTER_RESOURCES_TABLE).insert(data).execute()
        return response.data[0]

    async def create(self, resource_data: FooterResourceCreate) -> FooterResource:
        data = resource_data.model_dump()
        if data.get("position") is None:
            data["position"] = 0
        row = await self._create_sync(data)
        logger.info(f"[FOOTER] Created resource {row.get('id')} in '{data['category']}'")
        return self._to_model(row)

    @run_sync
    def _update_sync(self, resource_id: str, fields: dict) -> Optional[dict]:
        response = self.db.table(FOOTER_RESOURCES_TABLE).update(fields).eq("id", resource_id).execute()
        return response.data[0] if response.data else None

    async def update(self, resource_id: str, fields: dict) -> Optional[FooterResource]:
        if not fields:
            return await self.get_by_id(resource_id)
        data = await self._update_sync(resource_id, fields)
        return self._to_model(data) if data else None

    async def set_active(self, resource_id: str, is_active: bool) -> Optional[FooterResource]:
        return await self.update(resource_id, {"is_active": is_active})

    @run_sync
    def _delete_sync(self, resource_id: str) -> bool:
        response = self.db.table(FOOTER_RESOURCES_TABLE).delete().eq("id", resource_id).execute()
        return bool(response.data)

    async def delete(self, resource_id: str) -> bool:
        return await self._delete_sync(resource_id)
