from core.interfaces.repositories import (
    IMemberRepository,
    IBestGameRepository,
    IFAQRepository,
    IFooterResourceRepository,
    IAdminRepository,
    IIdentityService,
)

__all__ = [
    # Content
    "IMemberRepository",
    "IBestGameRepository",
    "IFAQRepository",
    "IFooterResourceRepository",
    # Auth
    "IAdminRepository",
    "IIdentityService",
]
