"""
Supabase implementation of Admin repository.
The admins table is an authorization record keyed by the auth user id.
"""

import logging
from typing import Optional, List

from supabase import Client

from core.domain.constants import ADMINS_TABLE
from core.domain.models import Admin
from core.interfaces.repositories import IAdminRepository
from infrastructure.database.supabase_client import get_supabase, run_sync

logger = logging.getLogger(__name__)


class SupabaseAdminRepository(IAdminRepository):
    """Supabase implementation of admin repository"""

    def __init__(self, client: Optional[Client] = None):
        self._client = client

    @property
    def db(self) -> Client:
        return self._client or get_supabase()

    def _to_model(self, data: dict) -> Admin:
        return Admin(
            id=str(data["id"]),
            email=data.get("email") or "",
            is_active=data.get("is_active", True),
            created_at=data.get("created_at"),
        )

    @run_sync
    def _list_sync(self) -> List[dict]:
        response = self.db.table(ADMINS_TABLE).select("*").order("created_at", desc=True).execute()
        return response.data or []

    async def list(self) -> List[Admin]:
        data = await self._list_sync()
        return [self._to_model(d) for d in data]

    @run_sync
    def _get_by_id_sync(self, user_id: str, active_only: bool) -> Optional[dict]:
        query = self.db.table(ADMINS_TABLE).select("*").eq("id", user_id)
        if active_only:
            query = query.eq("is_active", True)
        response = query.execute()
        return response.data[0] if response.data else None

    async def get_by_id(self, user_id: str) -> Optional[Admin]:
        data = await self._get_by_id_sync(user_id, False)
        return self._to_model(data) if data else None

    async def get_active(self, user_id: str) -> Optional[Admin]:
        data = await self._get_by_id_sync(user_id, True)
        return self._to_model(data) if data else None

    @run_sync
    def _get_first_sync(self) -> Optional[dict]:
        response = self.db.table(ADMINS_TABLE).select("*").order("created_at").limit(1).execute()
        return response.data[0] if response.data else None

    async def get_first(self) -> Optional[Admin]:
        data = await self._get_first_sync()
        return self._to_model(data) if data else None

    @run_sync
    def _count_active_sync(self) -> int:
        response = self.db.table(ADMINS_TABLE).select("id", count="exact").eq("is_active", True).execute()
        return response.count if response.count is not None else 0

    async def count_active(self) -> int:
        return await self._count_active_sync()

    @run_sync
    def _create_sync(self, user_id: str, email: str) -> dict:
        data = {"id": user_id, "email": email, "is_active": True}
        response = self.db.table(ADMINS_TABLE).insert(data).execute()
        return response.data[0]

    async def create(self, user_id: str, email: str) -> Admin:
        data = await self._create_sync(user_id, email)
        return self._to_model(data)

    @run_sync
    def _set_active_sync(self, user_id: str, is_active: bool) -> Optional[dict]:
        response = self.db.table(ADMINS_TABLE).update({"is_active": is_active}).eq("id", user_id).execute()
        return response.data[0] if response.data else None

    async def set_active(self, user_id: str, is_active: bool) -> Optional[Admin]:
        data = await self._set_active_sync(user_id, is_active)
        return self._to_model(data) if data else None
