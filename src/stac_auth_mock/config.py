"""Configuration for the STAC Auth Mock server."""

from typing import Annotated, Any, Literal, Optional, Sequence, TypeAlias

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

AuthMethod: TypeAlias = Literal["none", "basic", "apikey"]


def str2list(x: Optional[Any] = None) -> Optional[Sequence[str]]:
    """Convert string to list based on commas."""
    if isinstance(x, str):
        return [item.strip() for item in x.split(",") if item.strip()]
    return x


class CorsSettings(BaseSettings):
    """CORS policy applied ahead of authentication."""

    allow_origins: Annotated[Sequence[str], NoDecode] = ("*",)
    allow_methods: Annotated[Sequence[str], NoDecode] = ("GET", "OPTIONS")
    allow_headers: Annotated[Sequence[str], NoDecode] = (
        "Origin",
        "Content-Type",
        "Accept",
        "Authorization",
        "x-api-key",
    )
    allow_credentials: bool = True

    model_config = SettingsConfigDict(
        env_prefix="CORS_",
        env_file=".env",
        extra="ignore",
        frozen=True,
    )

    @field_validator("allow_origins", "allow_methods", "allow_headers", mode="before")
    @classmethod
    def _parse_list(cls, v):
        return str2list(v)


class Settings(BaseSettings):
    """Configuration settings for the STAC Auth Mock server."""

    # Server
    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=0, le=65535)
    base_url: Optional[str] = None

    # Auth
    auth_method: AuthMethod = "basic"
    basic_auth_username: str = "testuser"
    basic_auth_password: str = "testpass"
    api_key: str = "test-api-key-12345"

    cors: CorsSettings = Field(default_factory=CorsSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        frozen=True,
    )

    @field_validator("auth_method", mode="before")
    @classmethod
    def _normalize_auth_method(cls, v):
        return v.strip().lower() if isinstance(v, str) else v

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, v: Optional[str]) -> Optional[str]:
        return v.rstrip("/") if v else v

    @property
    def public_url(self) -> str:
        """Origin used when building absolute link hrefs."""
        return self.base_url or f"http://localhost:{self.port}"
