"""
Supabase implementation of Member repository.
"""

import logging
from typing import Optional, List

from supabase import Client

from core.domain.constants import MEMBERS_TABLE
from core.domain.models import Member, MemberCreate
from core.interfaces.repositories import IMemberRepository
from infrastructure.database.supabase_client import get_supabase, run_sync

logger = logging.getLogger(__name__)


class SupabaseMemberRepository(IMemberRepository):
    """Supabase implementation of member repository"""

    def __init__(self, client: Optional[Client] = None):
        self._client = client

    @property
    def db(self) -> Client:
        return self._client or get_supabase()

    def _to_model(self, data: dict) -> Member:
        """Convert database row to Member model"""
        return Member(
            id=str(data["id"]),
            name=data.get("name") or "",
            image=data.get("image") or "",
            role=data.get("role") or "",
            join_date=data.get("join_date") or None,
            achievements=data.get("achievements") or [],
            created_at=data.get("created_at"),
        )

    @run_sync
    def _list_sync(self, limit: Optional[int]) -> List[dict]:
        query = self.db.table(MEMBERS_TABLE).select("*").order("name")
        if limit:
            query = query.limit(limit)
        response = query.execute()
        return response.data or []

    async def list(self, limit: Optional[int] = None) -> List[Member]:
        data = await self._list_sync(limit)
        return [self._to_model(d) for d in data]

    @run_sync
    def _get_by_id_sync(self, member_id: str) -> Optional[dict]:
        response = self.db.table(MEMBERS_TABLE).select("*").eq("id", member_id).execute()
        return response.data[0] if response.data else None

    async def get_by_id(self, member_id: str) -> Optional[Member]:
        data = await self._get_by_id_sync(member_id)
        return self._to_model(data) if data else None

    @run_sync
    def _create_sync(self, member_data: MemberCreate) -> dict:
        data = {
            "name": member_data.name,
            "image": member_data.image,
            "role": member_data.role,
            "join_date": member_data.join_date,
            "achievements": member_data.achievements,
        }
        response = self.db.table(MEMBERS_TABLE).insert(data).execute()
        return response.data[0]

    async def create(self, member_data: MemberCreate) -> Member:
        data = await self._create_sync(member_data)
        logger.info(f"[MEMBERS] Created member {data.get('id')} ({member_data.name})")
        return self._to_model(data)

    @run_sync
    def _update_sync(self, member_id: str, fields: dict) -> Optional[dict]:
        response = self.db.table(MEMBERS_TABLE).update(fields).eq("id", member_id).execute()
        return response.data[0] if response.data else None

    async def update(self, member_id: str, fields: dict) -> Optional[Member]:
        if not fields:
            return await self.get_by_id(member_id)
        data = await self._update_sync(member_id, fields)
        return self._to_model(data) if data else None

    @run_sync
    def _delete_sync(self, member_id: str) -> bool:
        response = self.db.table(MEMBERS_TABLE).delete().eq("id", member_id).execute()
        return bool(response.data)

    async def delete(self, member_id: str) -> bool:
        return await self._delete_sync(member_id)

    @run_sync
    def _insert_many_sync(self, rows: List[dict]) -> List[dict]:
        response = self.db.table(MEMBERS_TABLE).insert(rows).execute()
        return response.data or []

    async def insert_many(self, members: List[MemberCreate]) -> List[Member]:
        """Bulk insert used by the seed script"""
        rows = [m.model_dump() for m in members]
        data = await self._insert_many_sync(rows)
        return [self._to_model(d) for d in data]
