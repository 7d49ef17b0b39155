"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "Workout Tracker API"
    VERSION: str = "1.0.0"
    API_PREFIX: str = "/workout-tracker/v1"

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: Optional[str] = None
    DATABASE_USER: str = "postgres"
    DATABASE_PASSWORD: str = ""
    DATABASE_HOST: str = "localhost"
    DATABASE_PORT: int = 5432
    DATABASE_DBNAME: str = "workout_tracker"

    # Security
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24

    # Token blacklist
    REDIS_URL: str = "redis://localhost:6379/0"
    BLACKLIST_PREFIX: str = "jwtblacklist:"

    # Exercise catalog
    SEED_ON_STARTUP: bool = True
    EXERCISE_SEED_FILE: Optional[str] = None

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @property
    def database_url(self) -> str:
        """Explicit ``DATABASE_URL`` if set, otherwise built from the parts."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (f"postgresql+psycopg2://{self.DATABASE_USER}:{self.DATABASE_PASSWORD}@{self.DATABASE_HOST}"
                f":{self.DATABASE_PORT}"
                f"/{self.DATABASE_DBNAME}")


# Global settings instance
settings = Settings()
