"""
Auth service - email/password accounts on top of the hosted identity provider.
"""

import logging
from typing import Optional

from core.domain.models import AuthResult, Principal
from core.interfaces.repositories import IIdentityService
from core.services.admin_service import AdminService

logger = logging.getLogger(__name__)


class AuthService:
    """Sign up / sign in / token resolution"""

    def __init__(self, identity: IIdentityService, admin_service: AdminService):
        self.identity = identity
        self.admin_service = admin_service

    @staticmethod
    def _missing_credentials(email: Optional[str], password: Optional[str]) -> bool:
        return not (email or "").strip() or not password

    async def sign_up(self, email: str, password: str) -> AuthResult:
        if self._missing_credentials(email, password):
            return AuthResult(ok=False, message="auth_missing_credentials")

        email = email.strip()
        try:
            payload = await self.identity.sign_up(email, password)
        except Exception as e:
            logger.warning(f"[AUTH] Sign up failed for {email}: {e}")
            return AuthResult(ok=False, message="auth_error", error_detail=str(e))

        user = payload.get("user")
        logger.info(f"[AUTH] Sign up submitted for {email}")
        if not payload.get("access_token") or not user:
            # Email confirmation required before the first sign in
            return AuthResult(ok=True, message="auth_signup_check_email")

        principal = Principal(id=user.id, email=user.email, access_token=payload["access_token"])
        principal.is_admin = await self.admin_service.ensure_configured_admin(principal)
        return AuthResult(
            ok=True,
            message="auth_signed_in",
            principal=principal,
            access_token=payload["access_token"],
            refresh_token=payload.get("refresh_token"),
        )

    async def sign_in(self, email: str, password: str) -> AuthResult:
        if self._missing_credentials(email, password):
            return AuthResult(ok=False, message="auth_missing_credentials")

        email = email.strip()
        try:
            payload = await self.identity.sign_in(email, password)
        except Exception as e:
            logger.info(f"[AUTH] Sign in rejected for {email}: {e}")
            return AuthResult(ok=False, message="auth_error", error_detail=str(e))

        user = payload.get("user")
        if not user or not payload.get("access_token"):
            return AuthResult(ok=False, message="auth_error")

        principal = Principal(id=user.id, email=user.email, access_token=payload["access_token"])
        principal.is_admin = await self.admin_service.ensure_configured_admin(principal)
        logger.info(f"[AUTH] {email} signed in (admin={principal.is_admin})")
        return AuthResult(
            ok=True,
            message="auth_signed_in",
            principal=principal,
            access_token=payload["access_token"],
            refresh_token=payload.get("refresh_token"),
        )

    async def sign_out(self, access_token: Optional[str]) -> None:
        if access_token:
            await self.identity.sign_out(access_token)

    async def resolve_principal(self, access_token: Optional[str]) -> Optional[Principal]:
        """Validate a bearer token. None when missing, expired or forged."""
        if not access_token:
            return None
        user = await self.identity.get_user(access_token)
        if not user:
            return None
        return Principal(
            id=user.id,
            email=user.email,
            access_token=access_token,
            is_admin=await self.admin_service.is_admin(user.id),
        )
