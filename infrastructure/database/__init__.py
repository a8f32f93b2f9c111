from infrastructure.database.member_repository import SupabaseMemberRepository
from infrastructure.database.best_game_repository import SupabaseBestGameRepository
from infrastructure.database.faq_repository import SupabaseFAQRepository
from infrastructure.database.footer_resource_repository import SupabaseFooterResourceRepository
from infrastructure.database.admin_repository import SupabaseAdminRepository

__all__ = [
    "SupabaseMemberRepository",
    "SupabaseBestGameRepository",
    "SupabaseFAQRepository",
    "SupabaseFooterResourceRepository",
    "SupabaseAdminRepository",
]
