"""
Repository interfaces - abstractions for data access.
This allows swapping implementations (Supabase -> PostgreSQL -> in-memory fakes, etc.)
"""

from abc import ABC, abstractmethod
from typing import Optional, List
from core.domain.models import (
    Member, MemberCreate,
    BestGame, BestGameCreate,
    FAQ, FAQCreate,
    FooterResource, FooterResourceCreate,
    Admin, RegisteredUser,
)


class IMemberRepository(ABC):
    """Interface for member data access"""

    @abstractmethod
    async def list(self, limit: Optional[int] = None) -> List[Member]:
        """All members ordered by name"""
        pass

    @abstractmethod
    async def get_by_id(self, member_id: str) -> Optional[Member]:
        pass

    @abstractmethod
    async def create(self, member_data: MemberCreate) -> Member:
        pass

    @abstractmethod
    async def update(self, member_id: str, fields: dict) -> Optional[Member]:
        """Partial update, None if the row does not exist"""
        pass

    @abstractmethod
    async def delete(self, member_id: str) -> bool:
        pass


class IBestGameRepository(ABC):
    """Interface for best game data access"""

    @abstractmethod
    async def list(self) -> List[BestGame]:
        """Newest first"""
        pass

    @abstractmethod
    async def get_by_id(self, game_id: str) -> Optional[BestGame]:
        pass

    @abstractmethod
    async def create(self, game_data: BestGameCreate) -> BestGame:
        pass

    @abstractmethod
    async def update(self, game_id: str, fields: dict) -> Optional[BestGame]:
        pass

    @abstractmethod
    async def delete(self, game_id: str) -> bool:
        pass


class IFAQRepository(ABC):
    """Interface for FAQ data access"""

    @abstractmethod
    async def list(self, active_only: bool = False) -> List[FAQ]:
        """Ordered by position"""
        pass

    @abstractmethod
    async def get_by_id(self, faq_id: str) -> Optional[FAQ]:
        pass

    @abstractmethod
    async def count(self) -> int:
        pass

    @abstractmethod
    async def create(self, faq_data: FAQCreate) -> FAQ:
        pass

    @abstractmethod
    async def update(self, faq_id: str, fields: dict) -> Optional[FAQ]:
        pass

    @abstractmethod
    async def set_active(self, faq_id: str, is_active: bool) -> Optional[FAQ]:
        pass

    @abstractmethod
    async def delete(self, faq_id: str) -> bool:
        pass


class IFooterResourceRepository(ABC):
    """Interface for footer link data access"""

    @abstractmethod
    async def list(self, active_only: bool = False) -> List[FooterResource]:
        """Admin view: by category then position. Public view: active rows by position"""
        pass

    @abstractmethod
    async def get_by_id(self, resource_id: str) -> Optional[FooterResource]:
        pass

    @abstractmethod
    async def count(self) -> int:
        pass

    @abstractmethod
    async def create(self, resource_data: FooterResourceCreate) -> FooterResource:
        pass

    @abstractmethod
    async def update(self, resource_id: str, fields: dict) -> Optional[FooterResource]:
        pass

    @abstractmethod
    async def set_active(self, resource_id: str, is_active: bool) -> Optional[FooterResource]:
        pass

    @abstractmethod
    async def delete(self, resource_id: str) -> bool:
        pass


class IAdminRepository(ABC):
    """Interface for admin authorization records"""

    @abstractmethod
    async def list(self) -> List[Admin]:
        """Newest first"""
        pass

    @abstractmethod
    async def get_by_id(self, user_id: str) -> Optional[Admin]:
        """Row regardless of is_active"""
        pass

    @abstractmethod
    async def get_active(self, user_id: str) -> Optional[Admin]:
        pass

    @abstractmethod
    async def get_first(self) -> Optional[Admin]:
        """Oldest row - the bootstrap admin"""
        pass

    @abstractmethod
    async def count_active(self) -> int:
        pass

    @abstractmethod
    async def create(self, user_id: str, email: str) -> Admin:
        pass

    @abstractmethod
    async def set_active(self, user_id: str, is_active: bool) -> Optional[Admin]:
        pass


class IIdentityService(ABC):
    """Interface for the hosted identity provider"""

    @abstractmethod
    async def sign_up(self, email: str, password: str) -> dict:
        """Returns {"user": RegisteredUser | None, "access_token": ..., "refresh_token": ...}"""
        pass

    @abstractmethod
    async def sign_in(self, email: str, password: str) -> dict:
        pass

    @abstractmethod
    async def sign_out(self, access_token: str) -> None:
        pass

    @abstractmethod
    async def get_user(self, access_token: str) -> Optional[RegisteredUser]:
        """None when the token is invalid or expired"""
        pass

    @abstractmethod
    async def list_users(self) -> List[RegisteredUser]:
        """Needs the service role key"""
        pass
