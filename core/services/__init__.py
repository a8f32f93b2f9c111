from core.services.content_cache import ContentCache
from core.services.member_service import MemberService
from core.services.best_game_service import BestGameService
from core.services.faq_service import FAQService
from core.services.footer_service import FooterService
from core.services.admin_service import AdminService
from core.services.auth_service import AuthService

__all__ = [
    "ContentCache",
    "MemberService",
    "BestGameService",
    "FAQService",
    "FooterService",
    "AdminService",
    "AuthService",
]
