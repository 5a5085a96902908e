"""Application settings via pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables with HACKHUB_ prefix."""

    model_config = SettingsConfigDict(
        env_prefix="HACKHUB_",
        env_file=".env",
        case_sensitive=False,
    )

    # --- Core ---
    app_version: str = "0.1.0"
    debug: bool = False
    environment: str = "development"
    cors_origins: list[str] = ["*"]
    log_level: str = "INFO"
    log_format: str = "json"

    # --- Firebase ---
    # Path to a service-account JSON file, or the JSON document itself.
    # Empty means application default credentials.
    firebase_credentials: str = ""
    firebase_project_id: str | None = None
    check_revoked_tokens: bool = False

    # --- Firestore collections ---
    users_collection: str = "users"
    hackathons_collection: str = "hackathons"
    projects_collection: str = "my_projects"
    joined_hackathons_collection: str = "joinedHackathons"

    # --- Domain defaults ---
    default_team: str = "C.C.P.C."
    labels_locale: Literal["en", "uk"] = "en"


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
