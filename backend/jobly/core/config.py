# jobly/core/config.py
import os
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).parent.parent.parent

class Settings(BaseSettings):
    PROJECT_NAME: str = "Jobly"
    env: str = "local"
    DATABASE_URL: str

    # =========================
    # Auth
    # =========================
    JWT_SECRET_KEY: str
    JWT_ALGORITHM: str = "HS256"
    JWT_ACCESS_TOKEN_EXPIRES_MINUTES: int = 60

    # Single admin account allowed to mutate companies/jobs
    ADMIN_USERNAME: str = "admin"
    ADMIN_PASSWORD: str | None = None

    # Comma-separated, e.g. "http://localhost:3000,https://jobly.example.com"
    CORS_ALLOW_ORIGINS: str | None = None

    model_config = SettingsConfigDict(
        env_file=os.path.join(PROJECT_ROOT, ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

settings = Settings()
