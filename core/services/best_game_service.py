"""
Best games service - featured match replays with bilingual commentary.
"""

import logging
from typing import Optional, List

from core.domain.constants import BEST_GAMES_TABLE
from core.domain.models import BestGame, BestGameCreate, BestGameUpdate, dump_update
from core.interfaces.repositories import IBestGameRepository
from core.services.content_cache import ContentCache
from core.utils.image_url import image_or_placeholder
from core.utils.language import localized

logger = logging.getLogger(__name__)


class BestGameService:
    """Service for best game operations"""

    def __init__(self, game_repo: IBestGameRepository, cache: ContentCache):
        self.game_repo = game_repo
        self.cache = cache

    async def list_games(self) -> List[BestGame]:
        return await self.game_repo.list()

    async def get_game(self, game_id: str) -> Optional[BestGame]:
        return await self.game_repo.get_by_id(game_id)

    async def public_games(self, lang: str) -> List[dict]:
        async def _load():
            games = await self.game_repo.list()
            return [
                {
                    "id": g.id,
                    "tournament": g.tournament,
                    "phase": g.phase,
                    "format": g.format,
                    "players": g.players,
                    "image_url": image_or_placeholder(g.image_url),
                    "replay_url": g.replay_url,
                    "description": localized(g, "description", lang),
                }
                for g in games
            ]
        return await self.cache.get_or_load(BEST_GAMES_TABLE, lang, _load)

    async def create_game(self, data: dict) -> BestGame:
        game = await self.game_repo.create(BestGameCreate.model_validate(data))
        self.cache.invalidate(BEST_GAMES_TABLE)
        return game

    async def update_game(self, game_id: str, data: dict) -> Optional[BestGame]:
        fields = dump_update(BestGameUpdate.model_validate(data))
        game = await self.game_repo.update(game_id, fields)
        if game:
            self.cache.invalidate(BEST_GAMES_TABLE)
            logger.info(f"[BEST_GAMES] Updated game {game_id}")
        return game

    async def delete_game(self, game_id: str) -> bool:
        deleted = await self.game_repo.delete(game_id)
        if deleted:
            self.cache.invalidate(BEST_GAMES_TABLE)
            logger.info(f"[BEST_GAMES] Deleted game {game_id}")
        return deleted
