"""Application configuration management."""
from typing import List
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = "Goal Tracker"
    debug: bool = False
    log_level: str = "INFO"
    api_prefix: str = ""
    cors_origins: List[str] = ["*"]

    # Database
    database_url: str = "sqlite+aiosqlite:///./goal_tracker.db"

    # JWT
    jwt_secret_key: str = "your-secret-key-change-in-production"
    jwt_algorithm: str = "HS256"
    jwt_expire_hours: int = 24

    # Registration
    password_min_length: int = 6
    bcrypt_rounds: int = 12

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
