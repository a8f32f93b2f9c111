"""
Web loader - initializes repositories and services.

Everything hangs off one Container so the app factory and the tests can
build it with an injected Supabase client instead of the shared one.
"""

from typing import Optional

from supabase import Client

from config.features import Features, features as default_features
from config.settings import Settings, settings as default_settings

# Infrastructure
from infrastructure.database import (
    SupabaseMemberRepository,
    SupabaseBestGameRepository,
    SupabaseFAQRepository,
    SupabaseFooterResourceRepository,
    SupabaseAdminRepository,
)
from infrastructure.auth import SupabaseIdentityService
from infrastructure.realtime import RealtimeContentListener

# Core services
from core.interfaces.repositories import IIdentityService
from core.services import (
    ContentCache,
    MemberService,
    BestGameService,
    FAQService,
    FooterService,
    AdminService,
    AuthService,
)


class Container:
    """Wired repositories and services for one running app"""

    def __init__(
        self,
        settings: Settings,
        features: Features,
        client: Optional[Client] = None,
        identity: Optional[IIdentityService] = None,
        listener: Optional[RealtimeContentListener] = None,
    ):
        self.settings = settings
        self.features = features

        # === REPOSITORIES ===
        self.member_repo = SupabaseMemberRepository(client)
        self.game_repo = SupabaseBestGameRepository(client)
        self.faq_repo = SupabaseFAQRepository(client)
        self.footer_repo = SupabaseFooterResourceRepository(client)
        self.admin_repo = SupabaseAdminRepository(client)
        self.identity = identity or SupabaseIdentityService(client)

        # === CACHE ===
        self.cache = ContentCache(ttl_seconds=features.CONTENT_CACHE_TTL)

        # === BUSINESS SERVICES ===
        self.member_service = MemberService(
            member_repo=self.member_repo,
            cache=self.cache,
            public_limit=features.PUBLIC_MEMBERS_LIMIT,
        )
        self.game_service = BestGameService(game_repo=self.game_repo, cache=self.cache)
        self.faq_service = FAQService(faq_repo=self.faq_repo, cache=self.cache)
        self.footer_service = FooterService(resource_repo=self.footer_repo, cache=self.cache)
        self.admin_service = AdminService(
            admin_repo=self.admin_repo,
            identity=self.identity,
            admin_emails=settings.admin_emails,
            bootstrap_enabled=features.ADMIN_BOOTSTRAP_ENABLED,
        )
        self.auth_service = AuthService(identity=self.identity, admin_service=self.admin_service)

        # === REALTIME ===
        # None when disabled; main.py starts it after the server is up
        if listener is None and features.REALTIME_ENABLED:
            listener = RealtimeContentListener(cache=self.cache, schema=settings.db_schema)
        self.listener = listener


def build_container(
    settings: Settings = default_settings,
    features: Features = default_features,
    client: Optional[Client] = None,
    identity: Optional[IIdentityService] = None,
) -> Container:
    return Container(settings, features, client=client, identity=identity)
