"""
Configuration management for the Auth Service
"""
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional


class Settings(BaseSettings):
    """Auth Service configuration loaded from environment variables"""

    # Server Configuration
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    LOG_LEVEL: str = "INFO"
    LOG_DIR: Optional[str] = None

    # Token signing; no default so the service refuses to start without it
    JWT_SECRET: str = Field(..., min_length=1)
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # Password hashing
    BCRYPT_ROUNDS: int = 10

    # Database Configuration
    DATABASE_URL: str = "sqlite:///./app.db"

    # When False, emails are lower-cased before lookup and insert
    EMAIL_CASE_SENSITIVE: bool = True

    # CORS Configuration
    CORS_ORIGINS: List[str] = ["*"]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )


def get_settings() -> Settings:
    """Load settings from the environment. Raises if JWT_SECRET is missing."""
    return Settings()
