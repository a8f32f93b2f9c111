"""
Domain models - the core of business logic.
These models are transport-agnostic (work with the JSON API, scripts, tests, etc.)
"""

from pydantic import BaseModel, BeforeValidator, Field, NonNegativeInt, StringConstraints, ValidationInfo, field_validator
from typing import Annotated, ClassVar, Optional, List, Tuple
from datetime import datetime
from enum import Enum

from core.domain.constants import FOOTER_CATEGORIES


# === ENUMS ===

class Language(str, Enum):
    IT = "it"
    EN = "en"


class FooterCategory(str, Enum):
    LINKS = "links"
    SOCIAL = "social"
    LEGAL = "legal"
    SUPPORT = "support"


# === FIELD TYPES ===

def parse_achievements(text: str) -> List[str]:
    """One achievement per line, blanks dropped"""
    return [line.strip() for line in (text or "").split("\n") if line.strip()]


def _split_achievements(v):
    """Accept a list or the newline-separated textarea format"""
    if v is None:
        return v
    if isinstance(v, str):
        return parse_achievements(v)
    return [str(item).strip() for item in v if str(item).strip()]


def _check_category(v):
    if v is None:
        return v
    value = v.value if isinstance(v, FooterCategory) else str(v).strip().lower()
    if value not in FOOTER_CATEGORIES:
        raise ValueError(f"category must be one of {', '.join(FOOTER_CATEGORIES)}")
    return value


def _empty_to_none(v):
    if v is None:
        return None
    v = str(v).strip()
    return v or None


Text = Annotated[str, StringConstraints(strip_whitespace=True)]
RequiredText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
Achievements = Annotated[List[str], BeforeValidator(_split_achievements)]
Category = Annotated[str, BeforeValidator(_check_category)]
OptionalText = Annotated[Optional[str], BeforeValidator(_empty_to_none)]
Position = NonNegativeInt


class PartialUpdate(BaseModel):
    """
    Base for Update models: omitted fields are left alone, explicit nulls are
    rejected unless the column is nullable.
    """
    nullable_fields: ClassVar[Tuple[str, ...]] = ()

    @field_validator("*", mode="before")
    @classmethod
    def reject_null(cls, v, info: ValidationInfo):
        if v is None and info.field_name not in cls.nullable_fields:
            raise ValueError("field cannot be null")
        return v


# === MEMBER ===

class MemberCreate(BaseModel):
    """Data for adding a member to the roster"""
    name: RequiredText
    image: Text = ""
    role: Text = ""
    join_date: OptionalText = None  # free text, e.g. "September 2015"; blank -> None
    achievements: Achievements = Field(default_factory=list)


class MemberUpdate(PartialUpdate):
    nullable_fields = ("join_date",)

    name: Optional[RequiredText] = None
    image: Optional[Text] = None
    role: Optional[Text] = None
    join_date: OptionalText = None
    achievements: Optional[Achievements] = None


class Member(BaseModel):
    """Full member model"""
    id: str
    name: str
    image: str = ""
    role: str = ""
    join_date: Optional[str] = None
    achievements: List[str] = Field(default_factory=list)
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


# === BEST GAME ===

class BestGameCreate(BaseModel):
    """Featured match replay"""
    tournament: RequiredText
    phase: Text = ""
    format: Text = ""
    players: RequiredText  # "Raiza vs Luthier"
    image_url: Text = ""
    replay_url: RequiredText
    description_it: str = ""
    description_en: str = ""


class BestGameUpdate(PartialUpdate):
    tournament: Optional[RequiredText] = None
    phase: Optional[Text] = None
    format: Optional[Text] = None
    players: Optional[RequiredText] = None
    image_url: Optional[Text] = None
    replay_url: Optional[RequiredText] = None
    description_it: Optional[str] = None
    description_en: Optional[str] = None


class BestGame(BaseModel):
    id: str
    tournament: str
    phase: str = ""
    format: str = ""
    players: str = ""
    image_url: str = ""
    replay_url: str = ""
    description_it: str = ""
    description_en: str = ""
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


# === FAQ ===

class FAQCreate(BaseModel):
    """All four bilingual fields are mandatory"""
    question_it: RequiredText
    question_en: RequiredText
    answer_it: RequiredText
    answer_en: RequiredText
    position: Optional[Position] = None  # None = append after the last one
    is_active: bool = True


class FAQUpdate(PartialUpdate):
    question_it: Optional[RequiredText] = None
    question_en: Optional[RequiredText] = None
    answer_it: Optional[RequiredText] = None
    answer_en: Optional[RequiredText] = None
    position: Optional[Position] = None
    is_active: Optional[bool] = None


class FAQ(BaseModel):
    id: str
    question_it: str
    question_en: str
    answer_it: str
    answer_en: str
    position: int = 0
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# === FOOTER RESOURCE ===

class FooterResourceCreate(BaseModel):
    title_it: RequiredText
    title_en: RequiredText
    url: RequiredText
    icon: OptionalText = None  # icon name, e.g. "Github"
    category: Category
    position: Optional[Position] = None
    is_active: bool = True


class FooterResourceUpdate(PartialUpdate):
    nullable_fields = ("icon",)

    title_it: Optional[RequiredText] = None
    title_en: Optional[RequiredText] = None
    url: Optional[RequiredText] = None
    icon: OptionalText = None
    category: Optional[Category] = None
    position: Optional[Position] = None
    is_active: Optional[bool] = None


class FooterResource(BaseModel):
    id: str
    title_it: str
    title_en: str
    url: str
    icon: Optional[str] = None
    category: str = FooterCategory.LINKS.value
    position: int = 0
    is_active: bool = True


# === ADMIN / AUTH ===

class Admin(BaseModel):
    """Authorization record - one row per identity principal"""
    id: str
    email: str = ""
    is_active: bool = True
    created_at: Optional[datetime] = None


class RegisteredUser(BaseModel):
    """User as known to the identity service"""
    id: str
    email: str = ""
    created_at: Optional[datetime] = None


class Principal(BaseModel):
    """Authenticated caller of the API"""
    id: str
    email: str = ""
    access_token: Optional[str] = None
    is_admin: bool = False


class AuthResult(BaseModel):
    """Outcome of sign in / sign up"""
    ok: bool
    message: str  # locale key
    principal: Optional[Principal] = None
    access_token: Optional[str] = None
    refresh_token: Optional[str] = None
    error_detail: Optional[str] = None


class Credentials(BaseModel):
    """Sign up / sign in body. Blank values are reported by AuthService"""
    email: Optional[str] = None
    password: Optional[str] = None


class AdminToggleRequest(BaseModel):
    """Body of the users tab toggle"""
    email: Text = ""
    is_admin: Optional[bool] = None  # state shown in the dashboard; None = look it up


def dump_update(update: BaseModel) -> dict:
    """Only fields the caller actually sent"""
    return update.model_dump(exclude_unset=True)
