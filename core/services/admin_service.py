"""
Admin service - who may edit site content.

Rules:
- an admin can never change their own flag (no accidental self lock-out)
- the first admin (oldest admins row) cannot be demoted
- while nobody is an active admin, the first signed-in user may claim the role
- emails listed in ADMIN_EMAILS are promoted on sign in
"""

import asyncio
import logging
from typing import Optional, List, Tuple

from core.domain.constants import SHORT_ID_LENGTH
from core.domain.models import Admin, Principal, RegisteredUser
from core.interfaces.repositories import IAdminRepository, IIdentityService

logger = logging.getLogger(__name__)


class AdminService:
    """Orchestrates admin role checks and changes."""

    def __init__(
        self,
        admin_repo: IAdminRepository,
        identity: IIdentityService,
        admin_emails: Optional[List[str]] = None,
        bootstrap_enabled: bool = True,
    ):
        self.admin_repo = admin_repo
        self.identity = identity
        self.admin_emails = {e.lower() for e in (admin_emails or [])}
        self.bootstrap_enabled = bootstrap_enabled
        self._bootstrap_lock = asyncio.Lock()

    async def is_admin(self, user_id: str) -> bool:
        return await self.admin_repo.get_active(user_id) is not None

    async def list_admins(self) -> List[Admin]:
        return await self.admin_repo.list()

    async def list_registered_users(self) -> List[RegisteredUser]:
        """
        All users from the identity admin API.
        Without the service role key that call fails; fall back to the people
        we know about from the admins table so the dashboard still renders.
        """
        try:
            return await self.identity.list_users()
        except Exception as e:
            logger.warning(f"[ADMIN] Identity admin API unavailable, falling back to admins table: {e}")
            admins = await self.admin_repo.list()
            return [RegisteredUser(id=a.id, email=a.email, created_at=a.created_at) for a in admins]

    async def users_overview(self) -> List[dict]:
        """Registered users with their admin flag, for the role management tab"""
        users = await self.list_registered_users()
        admins = {a.id: a for a in await self.admin_repo.list()}
        first = await self.admin_repo.get_first()
        overview = []
        for user in users:
            admin = admins.get(user.id)
            overview.append({
                "id": user.id,
                "short_id": user.id[:SHORT_ID_LENGTH],
                "email": user.email,
                "created_at": user.created_at.isoformat() if user.created_at else None,
                "is_admin": bool(admin and admin.is_active),
                "is_first_admin": bool(first and first.id == user.id),
            })
        return overview

    async def _promote(self, user_id: str, email: str) -> Admin:
        existing = await self.admin_repo.get_by_id(user_id)
        if existing:
            return await self.admin_repo.set_active(user_id, True) or existing
        return await self.admin_repo.create(user_id, email)

    async def toggle_admin(
        self,
        actor: Principal,
        user_id: str,
        email: str = "",
        currently_admin: Optional[bool] = None,
    ) -> Tuple[bool, str, List[Admin]]:
        """
        Flip admin flag of user_id.
        Returns: (success, message_key, admins list after the change)
        """
        if actor.id == user_id:
            logger.warning(f"[ADMIN] {actor.email} tried to change their own admin flag")
            return False, "admin_cannot_change_self", []

        if currently_admin is None:
            currently_admin = await self.is_admin(user_id)

        if currently_admin:
            first = await self.admin_repo.get_first()
            if first and first.id == user_id:
                logger.warning(f"[ADMIN] {actor.email} tried to demote the first admin {user_id}")
                return False, "admin_first_protected", []

            updated = await self.admin_repo.set_active(user_id, False)
            if not updated:
                return False, "admin_not_found", []
            logger.info(f"[ADMIN] {actor.email} removed admin {updated.email or user_id}")
            return True, "admin_removed", await self.admin_repo.list()

        admin = await self._promote(user_id, email)
        logger.info(f"[ADMIN] {actor.email} granted admin to {admin.email or user_id}")
        return True, "admin_added", await self.admin_repo.list()

    async def bootstrap_admin(self, principal: Principal) -> Tuple[bool, str]:
        """First admin claim. Only works while no active admin exists."""
        if not self.bootstrap_enabled:
            return False, "bootstrap_disabled"

        async with self._bootstrap_lock:
            if await self.admin_repo.count_active() > 0:
                return False, "bootstrap_refused"
            await self._promote(principal.id, principal.email)

        logger.info(f"[ADMIN] Bootstrap: {principal.email} is now the first admin")
        return True, "bootstrap_ok"

    async def ensure_configured_admin(self, principal: Principal) -> bool:
        """Promote principals whose email is listed in ADMIN_EMAILS. Returns admin status."""
        if await self.is_admin(principal.id):
            return True
        if principal.email and principal.email.lower() in self.admin_emails:
            await self._promote(principal.id, principal.email)
            logger.info(f"[ADMIN] Promoted configured admin {principal.email}")
            return True
        return False
