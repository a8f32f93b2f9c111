from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
from pydantic import field_validator
from typing import Annotated, List
from pathlib import Path


class Settings(BaseSettings):
    """Application settings - reads from environment variables"""

    # Supabase
    supabase_url: str = ""
    supabase_key: str = ""  # anon / publishable key, used for auth calls
    supabase_service_key: str = ""  # service role, used for table access and auth admin API
    db_schema: str = "public"

    # Web server
    host: str = "0.0.0.0"
    port: int = 8080
    stats_token: str = ""
    cookie_secure: bool = True

    # App Settings
    # Comma separated in env, so skip the JSON decoding pydantic-settings does for lists
    admin_emails: Annotated[List[str], NoDecode] = []
    default_language: str = "it"

    # Environment
    env: str = "development"
    debug: bool = False

    @field_validator('admin_emails', mode='before')
    @classmethod
    def parse_admin_emails(cls, v):
        if isinstance(v, str):
            return [x.strip().lower() for x in v.split(",") if x.strip()]
        if isinstance(v, list):
            return [str(x).strip().lower() for x in v if str(x).strip()]
        return []

    @field_validator('default_language', mode='before')
    @classmethod
    def parse_default_language(cls, v):
        if isinstance(v, str) and v.strip().lower().startswith("en"):
            return "en"
        return "it"

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env" if Path(".env").exists() else None,
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,  # SUPABASE_URL == supabase_url
    )

    @property
    def is_configured(self) -> bool:
        return bool(self.supabase_url and (self.supabase_service_key or self.supabase_key))


# Create settings instance
settings = Settings()
