"""Application configuration using pydantic-settings."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

# Repository root (holds data/ and policies/)
BASE_DIR = Path(__file__).resolve().parent.parent.parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application environment
    env: Literal["dev", "test", "staging", "prod"] = "dev"

    # Logging
    log_level: str = "INFO"

    # Seed data
    data_dir: Path = BASE_DIR / "data"
    students_file: str = "students.json"
    companies_file: str = "companies.json"
    load_seed_data_on_startup: bool = True

    # Default placement policy applied at startup
    policy_file: Path = BASE_DIR / "policies" / "default-policy.yaml"

    # CORS (frontend origins)
    cors_origins: list[str] = ["http://localhost:3000"]

    @property
    def students_path(self) -> Path:
        """Return full path to the students seed file."""
        return self.data_dir / self.students_file

    @property
    def companies_path(self) -> Path:
        """Return full path to the companies seed file."""
        return self.data_dir / self.companies_file

    @property
    def is_dev(self) -> bool:
        """Check if running in development mode."""
        return self.env == "dev"

    @property
    def is_prod(self) -> bool:
        """Check if running in production mode."""
        return self.env == "prod"

    @property
    def is_test(self) -> bool:
        """Check if running in test mode."""
        return self.env == "test"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
