"""Application configuration using pydantic-settings."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="LIFETRACKER_",
        extra="ignore",
    )

    # Database backing the key/value store
    database_path: Path = Path("lifetracker.db")

    # Logging
    log_level: str = "INFO"

    # Storage keys, one per module
    budget_storage_key: str = "budgetTransactions"
    habits_storage_key: str = "habits"
    goals_storage_key: str = "goals"

    # Goal +/- buttons
    goal_progress_step: int = 10

    # UI
    window_title: str = "LifeTracker"
    port: int = 8081
    native: bool = False

    @property
    def database_url(self) -> str:
        """Get SQLite connection URL."""
        return f"sqlite:///{self.database_path}"


settings = Settings()
