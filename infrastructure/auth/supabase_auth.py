"""
Supabase Auth (GoTrue) adapter.
Sign in / sign up run on a throwaway anon client; token checks and the
user listing run on the shared service client.
"""

import logging
from typing import Callable, Optional, List

from supabase import AuthError, Client

from core.domain.models import RegisteredUser
from core.interfaces.repositories import IIdentityService
from infrastructure.database.supabase_client import get_supabase, create_auth_client, run_sync

logger = logging.getLogger(__name__)


def _to_user(user) -> Optional[RegisteredUser]:
    if user is None:
        return None
    return RegisteredUser(
        id=str(user.id),
        email=getattr(user, "email", None) or "",
        created_at=getattr(user, "created_at", None),
    )


def _session_payload(response) -> dict:
    session = getattr(response, "session", None)
    return {
        "user": _to_user(getattr(response, "user", None)),
        "access_token": session.access_token if session else None,
        "refresh_token": session.refresh_token if session else None,
    }


class SupabaseIdentityService(IIdentityService):
    """Identity provider backed by Supabase Auth"""

    def __init__(
        self,
        client: Optional[Client] = None,
        auth_client_factory: Callable[[], Client] = create_auth_client,
    ):
        self._client = client
        self._auth_client_factory = auth_client_factory

    @property
    def db(self) -> Client:
        return self._client or get_supabase()

    @run_sync
    def _sign_up_sync(self, email: str, password: str) -> dict:
        client = self._auth_client_factory()
        response = client.auth.sign_up({"email": email, "password": password})
        return _session_payload(response)

    async def sign_up(self, email: str, password: str) -> dict:
        """Raises AuthError on provider rejection (weak password, already registered...)"""
        return await self._sign_up_sync(email, password)

    @run_sync
    def _sign_in_sync(self, email: str, password: str) -> dict:
        client = self._auth_client_factory()
        response = client.auth.sign_in_with_password({"email": email, "password": password})
        return _session_payload(response)

    async def sign_in(self, email: str, password: str) -> dict:
        return await self._sign_in_sync(email, password)

    @run_sync
    def _sign_out_sync(self, access_token: str) -> None:
        self.db.auth.admin.sign_out(access_token)

    async def sign_out(self, access_token: str) -> None:
        """Revokes the refresh tokens of the session. Never raises."""
        try:
            await self._sign_out_sync(access_token)
        except AuthError as e:
            logger.warning(f"[AUTH] Sign out failed: {e}")

    @run_sync
    def _get_user_sync(self, access_token: str):
        response = self.db.auth.get_user(access_token)
        return response.user if response else None

    async def get_user(self, access_token: str) -> Optional[RegisteredUser]:
        if not access_token:
            return None
        try:
            user = await self._get_user_sync(access_token)
        except AuthError as e:
            logger.debug(f"[AUTH] Token rejected: {e}")
            return None
        return _to_user(user)

    @run_sync
    def _list_users_sync(self) -> list:
        return self.db.auth.admin.list_users()

    async def list_users(self) -> List[RegisteredUser]:
        """Raises AuthError without the service role key"""
        users = await self._list_users_sync()
        return [_to_user(u) for u in users or []]
