"""
API configuration.

Settings are loaded from environment variables prefixed with GATEHOUSE_
and, when present, from a .env file in the project root.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Find .env file in project root
_env_file = Path(__file__).parent.parent.parent.parent.parent / ".env"


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="GATEHOUSE_",
        env_file=str(_env_file) if _env_file.exists() else None,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    version: str = "0.1.0"
    debug: bool = False

    # JWT
    secret_key: str = Field(..., min_length=16)
    jwt_algorithm: str = "HS256"
    jwt_access_token_expire_minutes: int = 15
    jwt_refresh_token_expire_minutes: int = 24 * 60

    # Credential document
    credentials_path: Path = Path("data/administrators.json")

    # Refresh token cookie
    refresh_cookie_name: str = "jwt"
    refresh_cookie_secure: bool = True
    refresh_cookie_samesite: str = "none"

    cors_origins: list[str] = ["http://localhost:3000"]

    # Logging
    log_level: str = "INFO"
    log_json: bool = False


settings = Settings()
