from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from .query.filters import PaginationConfig


class Settings(BaseSettings):
    """Application settings, read from APPLYTE_* environment variables and an optional .env file."""

    model_config = SettingsConfigDict(
        env_prefix="APPLYTE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    link_base_url: str = "http://applyte.io/api"
    jwt_secret: str = "change-me"
    jwt_algorithm: str = "HS256"
    token_ttl_seconds: int = 3600
    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"
    host: str = "0.0.0.0"
    port: int = 8000
    default_limit: int = 10
    max_limit: int = 100

    @property
    def pagination(self) -> PaginationConfig:
        return PaginationConfig(default_limit=self.default_limit, max_limit=self.max_limit)


_settings: Settings | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    global _settings
    _settings = None
