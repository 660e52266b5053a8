"""Configuration settings for Boop-Blur.

Everything lives under one storage directory:
- boop-blur.db: captured artifacts (SQLite)
- settings.json / trace.json: small keyed records
- logs/: JSONL event journals
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DB_NAME = "boop-blur.db"
SCHEMA_VERSION = 1

DEFAULT_VIBE_PACK = "zen-but-dumb"
DEFAULT_DELETION_POLICY = "off"

# Visual decay thresholds (in days), ascending
DEFAULT_DECAY_THRESHOLDS: dict[str, int] = {
    "crisp": 0,
    "slight-blur": 1,
    "more-blur": 3,
    "heavy-blur": 5,
    "pixelated": 7,
}


class AppConfig(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="BOOPBLUR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Storage directory (default: ~/.boopblur)
    storage_dir: Path = Field(default_factory=lambda: Path.home() / ".boopblur")

    # Used when no settings record has been persisted yet
    default_vibe_pack: str = DEFAULT_VIBE_PACK
    default_deletion_policy: str = DEFAULT_DELETION_POLICY

    decay_thresholds: dict[str, int] = Field(
        default_factory=lambda: dict(DEFAULT_DECAY_THRESHOLDS)
    )

    @field_validator("storage_dir")
    @classmethod
    def _expand_storage_dir(cls, value: Path) -> Path:
        return value.expanduser()

    @property
    def db_path(self) -> Path:
        """Path to the artifact database."""
        return self.storage_dir / DB_NAME

    @property
    def settings_path(self) -> Path:
        return self.storage_dir / "settings.json"

    @property
    def trace_path(self) -> Path:
        return self.storage_dir / "trace.json"

    @property
    def logs_dir(self) -> Path:
        return self.storage_dir / "logs"

    def ensure_storage_dir(self) -> None:
        """Create storage directory if it doesn't exist."""
        self.storage_dir.mkdir(parents=True, exist_ok=True)


_config: AppConfig | None = None


def get_config() -> AppConfig:
    """Get cached config instance."""
    global _config
    if _config is None:
        _config = AppConfig()
    return _config


def reset_config() -> None:
    """Reset config cache (useful for testing)."""
    global _config
    _config = None
