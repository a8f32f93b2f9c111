"""
FAQ service - bilingual questions with manual ordering and an active flag.
"""

import logging
from typing import Optional, List

from core.domain.constants import FAQS_TABLE
from core.domain.models import FAQ, FAQCreate, FAQUpdate, dump_update
from core.interfaces.repositories import IFAQRepository
from core.services.content_cache import ContentCache
from core.utils.language import localized

logger = logging.getLogger(__name__)


class FAQService:
    """Service for FAQ operations"""

    def __init__(self, faq_repo: IFAQRepository, cache: ContentCache):
        self.faq_repo = faq_repo
        self.cache = cache

    async def list_faqs(self, active_only: bool = False) -> List[FAQ]:
        return await self.faq_repo.list(active_only=active_only)

    async def public_faqs(self, lang: str) -> List[dict]:
        async def _load():
            faqs = await self.faq_repo.list(active_only=True)
            return [
                {
                    "id": f.id,
                    "question": localized(f, "question", lang),
                    "answer": localized(f, "answer", lang),  # markdown
                    "position": f.position,
                }
                for f in faqs
            ]
        return await self.cache.get_or_load(FAQS_TABLE, lang, _load)

    async def create_faq(self, data: dict) -> FAQ:
        faq_data = FAQCreate.model_validate(data)
        if faq_data.position is None:
            # New FAQs go to the bottom of the list
            faq_data.position = await self.faq_repo.count()
        faq = await self.faq_repo.create(faq_data)
        self.cache.invalidate(FAQS_TABLE)
        return faq

    async def update_faq(self, faq_id: str, data: dict) -> Optional[FAQ]:
        fields = dump_update(FAQUpdate.model_validate(data))
        faq = await self.faq_repo.update(faq_id, fields)
        if faq:
            self.cache.invalidate(FAQS_TABLE)
        return faq

    async def toggle_faq(self, faq_id: str) -> Optional[FAQ]:
        """Flip is_active. None if the FAQ does not exist."""
        faq = await self.faq_repo.get_by_id(faq_id)
        if not faq:
            return None
        updated = await self.faq_repo.set_active(faq_id, not faq.is_active)
        if updated:
            self.cache.invalidate(FAQS_TABLE)
            logger.info(f"[FAQ] {'Activated' if updated.is_active else 'Deactivated'} FAQ {faq_id}")
        return updated

    async def delete_faq(self, faq_id: str) -> bool:
        deleted = await self.faq_repo.delete(faq_id)
        if deleted:
            self.cache.invalidate(FAQS_TABLE)
            logger.info(f"[FAQ] Deleted FAQ {faq_id}")
        return deleted
