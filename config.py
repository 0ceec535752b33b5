"""
Signal Intelligence Core - Configuration
"""
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Paths
    BASE_DIR: Path = Path(__file__).parent
    DATA_DIR: Path = Field(default_factory=lambda: Path(__file__).parent / "data")
    DATABASE_PATH: Path = Field(default_factory=lambda: Path(__file__).parent / "data" / "intelligence.db")
    DATABASE_URL: Optional[str] = Field(default=None, description="Async SQLAlchemy URL, overrides DATABASE_PATH")

    # Logging
    LOG_LEVEL: str = Field(default="INFO")
    LOG_DIR: Optional[Path] = Field(default=None, description="Enables file logging when set")

    # API
    API_HOST: str = Field(default="0.0.0.0")
    API_PORT: int = Field(default=8000)
    RUN_MIGRATIONS_ON_STARTUP: bool = Field(default=True)

    # Scheduler
    ANALYSIS_INTERVAL_MINUTES: int = Field(default=1)

    # Analysis windows
    SIGNAL_WINDOW_HOURS: int = Field(default=2)
    SIGNAL_FETCH_LIMIT: int = Field(default=100)
    BASELINE_DAYS: int = Field(default=7)
    TOP_SIGNALS_LIMIT: int = Field(default=10)
    HIGH_PRIORITY_THRESHOLD: float = Field(default=0.6)

    # Adaptive thresholds and alerting
    USE_ADAPTIVE_THRESHOLDS: bool = Field(default=False, description="Report persisted thresholds in run metrics")
    AUTO_ALERT_ENABLED: bool = Field(default=True)
    AUTO_ALERT_TOP_N: int = Field(default=3)
    THRESHOLD_DRIFT_TRIGGER: float = Field(default=0.3)

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# Global settings instance
settings = Settings()


def ensure_directories():
    """Ensure all required directories exist."""
    dirs = [settings.DATA_DIR]
    if settings.LOG_DIR:
        dirs.append(settings.LOG_DIR)
    for dir_path in dirs:
        Path(dir_path).mkdir(parents=True, exist_ok=True)
