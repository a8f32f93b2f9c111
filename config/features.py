"""
Feature Flags - Easy on/off toggle for features.
Change values here to enable/disable functionality.
"""

import os


class Features:
    """Feature toggles - set via env vars or defaults"""

    # === REALTIME ===
    # Subscribe to postgres_changes and drop cached public content on every change
    REALTIME_ENABLED: bool = os.getenv("REALTIME_ENABLED", "true").lower() == "true"

    # === PUBLIC CONTENT ===
    CONTENT_CACHE_TTL: int = int(os.getenv("CONTENT_CACHE_TTL", "300"))  # seconds
    PUBLIC_MEMBERS_LIMIT: int = int(os.getenv("PUBLIC_MEMBERS_LIMIT", "30"))

    # === ADMIN ===
    # First signed-in user may claim admin while the admins table has no active row
    ADMIN_BOOTSTRAP_ENABLED: bool = os.getenv("ADMIN_BOOTSTRAP_ENABLED", "true").lower() == "true"

    # === DEBUG ===
    DEBUG_MODE: bool = os.getenv("DEBUG", "false").lower() == "true"
    LOG_REQUESTS: bool = os.getenv("LOG_REQUESTS", "false").lower() == "true"

    @classmethod
    def to_dict(cls) -> dict:
        """Get all features as dict (useful for logging)"""
        return {
            "realtime_enabled": cls.REALTIME_ENABLED,
            "content_cache_ttl": cls.CONTENT_CACHE_TTL,
            "public_members_limit": cls.PUBLIC_MEMBERS_LIMIT,
            "admin_bootstrap_enabled": cls.ADMIN_BOOTSTRAP_ENABLED,
            "debug_mode": cls.DEBUG_MODE,
            "log_requests": cls.LOG_REQUESTS,
        }


# Shortcut
features = Features()
