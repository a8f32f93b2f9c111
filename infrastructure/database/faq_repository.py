"""
Supabase implementation of FAQ repository.
"""

import logging
from datetime import datetime, timezone
from typing import Optional, List

from supabase import Client

from core.domain.constants import FAQS_TABLE
from core.domain.models import FAQ, FAQCreate
from core.interfaces.repositories import IFAQRepository
from infrastructure.database.supabase_client import get_supabase, run_sync

logger = logging.getLogger(__name__)


class SupabaseFAQRepository(IFAQRepository):
    """Supabase implementation of FAQ repository"""

    def __init__(self, client: Optional[Client] = None):
        self._client = client

    @property
    def db(self) -> Client:
        return self._client or get_supabase()

    def _to_model(self, data: dict) -> FAQ:
        return FAQ(
            id=str(data["id"]),
            question_it=data.get("question_it") or "",
            question_en=data.get("question_en") or "",
            answer_it=data.get("answer_it") or "",
            answer_en=data.get("answer_en") or "",
            position=data.get("position") or 0,
            is_active=data.get("is_active", True),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )

    @run_sync
    def _list_sync(self, active_only: bool) -> List[dict]:
        query = self.db.table(FAQS_TABLE).select("*")
        if active_only:
            query = query.eq("is_active", True)
        response = query.order("position").execute()
        return response.data or []

    async def list(self, active_only: bool = False) -> List[FAQ]:
        data = await self._list_sync(active_only)
        return [self._to_model(d) for d in data]

    @run_sync
    def _get_by_id_sync(self, faq_id: str) -> Optional[dict]:
        response = self.db.table(FAQS_TABLE).select("*").eq("id", faq_id).execute()
        return response.data[0] if response.data else None

    async def get_by_id(self, faq_id: str) -> Optional[FAQ]:
        data = await self._get_by_id_sync(faq_id)
        return self._to_model(data) if data else None

    @run_sync
    def _count_sync(self) -> int:
        response = self.db.table(FAQS_TABLE).select("id", count="exact").execute()
        return response.count if response.count is not None else 0

    async def count(self) -> int:
        return await self._count_sync()

    @run_sync
    def _create_sync(self, data: dict) -> dict:
        response = self.db.table(FAQS_TABLE).insert(data).execute()
        return response.data[0]

    async def create(self, faq_data: FAQCreate) -> FAQ:
        data = faq_data.model_dump()
        if data.get("position") is None:
            data["position"] = 0
        row = await self._create_sync(data)
        logger.info(f"[FAQ] Created FAQ {row.get('id')} at position {data['position']}")
        return self._to_model(row)

    @run_sync
    def _update_sync(self, faq_id: str, fields: dict) -> Optional[dict]:
        fields = {**fields, "updated_at": datetime.now(timezone.utc).isoformat()}
        response = self.db.table(FAQS_TABLE).update(fields).eq("id", faq_id).execute()
        return response.data[0] if response.data else None

    async def update(self, faq_id: str, fields: dict) -> Optional[FAQ]:
        if not fields:
            return await self.get_by_id(faq_id)
        data = await self._update_sync(faq_id, fields)
        return self._to_model(data) if data else None

    async def set_active(self, faq_id: str, is_active: bool) -> Optional[FAQ]:
        return await self.update(faq_id, {"is_active": is_active})

    @run_sync
    def _delete_sync(self, faq_id: str) -> bool:
        response = self.db.table(FAQS_TABLE).delete().eq("id", faq_id).execute()
        return bool(response.data)

    async def delete(self, faq_id: str) -> bool:
        return await self._delete_sync(faq_id)
