"""
Member service - roster shown in the "Top Members" section and managed from the admin dashboard.
"""

import logging
from typing import Optional, List

from core.domain.constants import MEMBERS_TABLE
from core.domain.models import Member, MemberCreate, MemberUpdate, dump_update
from core.interfaces.repositories import IMemberRepository
from core.services.content_cache import ContentCache
from core.utils.image_url import image_or_placeholder

logger = logging.getLogger(__name__)


class MemberService:
    """Service for member-related operations"""

    def __init__(self, member_repo: IMemberRepository, cache: ContentCache, public_limit: int = 30):
        self.member_repo = member_repo
        self.cache = cache
        self.public_limit = public_limit

    async def list_members(self, limit: Optional[int] = None) -> List[Member]:
        return await self.member_repo.list(limit=limit)

    async def get_member(self, member_id: str) -> Optional[Member]:
        return await self.member_repo.get_by_id(member_id)

    async def public_members(self) -> List[dict]:
        """Top members for the home page, images normalized for the browser"""
        async def _load():
            members = await self.member_repo.list(limit=self.public_limit)
            return [
                {
                    "id": m.id,
                    "name": m.name,
                    "image": image_or_placeholder(m.image),
                    "role": m.role,
                    "join_date": m.join_date,
                    "achievements": m.achievements,
                }
                for m in members
            ]
        return await self.cache.get_or_load(MEMBERS_TABLE, "public", _load)

    async def create_member(self, data: dict) -> Member:
        """Raises pydantic.ValidationError when name is missing"""
        member_data = MemberCreate.model_validate(data)
        member = await self.member_repo.create(member_data)
        self.cache.invalidate(MEMBERS_TABLE)
        return member

    async def update_member(self, member_id: str, data: dict) -> Optional[Member]:
        fields = dump_update(MemberUpdate.model_validate(data))
        member = await self.member_repo.update(member_id, fields)
        if member:
            self.cache.invalidate(MEMBERS_TABLE)
            logger.info(f"[MEMBERS] Updated member {member_id}: {sorted(fields)}")
        return member

    async def delete_member(self, member_id: str) -> bool:
        deleted = await self.member_repo.delete(member_id)
        if deleted:
            self.cache.invalidate(MEMBERS_TABLE)
            logger.info(f"[MEMBERS] Deleted member {member_id}")
        return deleted
