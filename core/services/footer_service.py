"""
Footer resource service - categorized footer links (links, social, legal, support).
"""

import logging
from typing import Optional, List, Dict

from core.domain.constants import FOOTER_RESOURCES_TABLE
from core.domain.models import FooterResource, FooterResourceCreate, FooterResourceUpdate, dump_update
from core.interfaces.repositories import IFooterResourceRepository
from core.services.content_cache import ContentCache
from core.utils.language import localized

logger = logging.getLogger(__name__)


def group_by_category(resources: List[FooterResource], lang: str) -> Dict[str, List[dict]]:
    """Group active resources by category, keeping first-seen category order"""
    grouped: Dict[str, List[dict]] = {}
    for r in resources:
        grouped.setdefault(r.category, []).append({
            "id": r.id,
            "title": localized(r, "title", lang),
            "url": r.url,
            "icon": r.icon,
        })
    return grouped


class FooterService:
    """Service for footer resource operations"""

    def __init__(self, resource_repo: IFooterResourceRepository, cache: ContentCache):
        self.resource_repo = resource_repo
        self.cache = cache

    async def list_resources(self, active_only: bool = False) -> List[FooterResource]:
        return await self.resource_repo.list(active_only=active_only)

    async def grouped_resources(self, lang: str) -> Dict[str, List[dict]]:
        async def _load():
            resources = await self.resource_repo.list(active_only=True)
            return group_by_category(resources, lang)
        return await self.cache.get_or_load(FOOTER_RESOURCES_TABLE, lang, _load)

    async def create_resource(self, data: dict) -> FooterResource:
        resource_data = FooterResourceCreate.model_validate(data)
        if resource_data.position is None:
            resource_data.position = await self.resource_repo.count()
        resource = await self.resource_repo.create(resource_data)
        self.cache.invalidate(FOOTER_RESOURCES_TABLE)
        return resource

    async def update_resource(self, resource_id: str, data: dict) -> Optional[FooterResource]:
        fields = dump_update(FooterResourceUpdate.model_validate(data))
        resource = await self.resource_repo.update(resource_id, fields)
        if resource:
            self.cache.invalidate(FOOTER_RESOURCES_TABLE)
        return resource

    async def toggle_resource(self, resource_id: str) -> Optional[FooterResource]:
        resource = await self.resource_repo.get_by_id(resource_id)
        if not resource:
            return None
        updated = await self.resource_repo.set_active(resource_id, not resource.is_active)
        if updated:
            self.cache.invalidate(FOOTER_RESOURCES_TABLE)
            logger.info(f"[FOOTER] {'Activated' if updated.is_active else 'Deactivated'} resource {resource_id}")
        return updated

    async def delete_resource(self, resource_id: str) -> bool:
        deleted = await self.resource_repo.delete(resource_id)
        if deleted:
            self.cache.invalidate(FOOTER_RESOURCES_TABLE)
            logger.info(f"[FOOTER] Deleted resource {resource_id}")
        return deleted
