"""
Supabase implementation of BestGame repository.
"""

import logging
from typing import Optional, List

from supabase import Client

from core.domain.constants import BEST_GAMES_TABLE
from core.domain.models import BestGame, BestGameCreate
from core.interfaces.repositories import IBestGameRepository
from infrastructure.database.supabase_client import get_supabase, run_sync

logger = logging.getLogger(__name__)


class SupabaseBestGameRepository(IBestGameRepository):
    """Supabase implementation of best game repository"""

    def __init__(self, client: Optional[Client] = None):
        self._client = client

    @property
    def db(self) -> Client:
        return self._client or get_supabase()

    def _to_model(self, data: dict) -> BestGame:
        return BestGame(
            id=str(data["id"]),
            tournament=data.get("tournament") or "",
            phase=data.get("phase") or "",
            format=data.get("format") or "",
            players=data.get("players") or "",
            image_url=data.get("image_url") or "",
            replay_url=data.get("replay_url") or "",
            description_it=data.get("description_it") or "",
            description_en=data.get("description_en") or "",
            created_at=data.get("created_at"),
        )

    @run_sync
    def _list_sync(self) -> List[dict]:
        response = self.db.table(BEST_GAMES_TABLE).select("*").order("created_at", desc=True).execute()
        return response.data or []

    async def list(self) -> List[BestGame]:
        data = await self._list_sync()
        return [self._to_model(d) for d in data]

    @run_sync
    def _get_by_id_sync(self, game_id: str) -> Optional[dict]:
        response = self.db.table(BEST_GAMES_TABLE).select("*").eq("id", game_id).execute()
        return response.data[0] if response.data else None

    async def get_by_id(self, game_id: str) -> Optional[BestGame]:
        data = await self._get_by_id_sync(game_id)
        return self._to_model(data) if data else None

    @run_sync
    def _create_sync(self, rows: List[dict]) -> List[dict]:
        response = self.db.table(BEST_GAMES_TABLE).insert(rows).execute()
        return response.data or []

    async def create(self, game_data: BestGameCreate) -> BestGame:
        data = await self._create_sync([game_data.model_dump()])
        logger.info(f"[BEST_GAMES] Created game {data[0].get('id')} ({game_data.players})")
        return self._to_model(data[0])

    async def insert_many(self, games: List[BestGameCreate]) -> List[BestGame]:
        """Bulk insert used by the seed script"""
        data = await self._create_sync([g.model_dump() for g in games])
        return [self._to_model(d) for d in data]

    @run_sync
    def _update_sync(self, game_id: str, fields: dict) -> Optional[dict]:
        response = self.db.table(BEST_GAMES_TABLE).update(fields).eq("id", game_id).execute()
        return response.data[0] if response.data else None

    async def update(self, game_id: str, fields: dict) -> Optional[BestGame]:
        if not fields:
            return await self.get_by_id(game_id)
        data = await self._update_sync(game_id, fields)
        return self._to_model(data) if data else None

    @run_sync
    def _delete_sync(self, game_id: str) -> bool:
        response = self.db.table(BEST_GAMES_TABLE).delete().eq("id", game_id).execute()
        return bool(response.data)

    async def delete(self, game_id: str) -> bool:
        return await self._delete_sync(game_id)
