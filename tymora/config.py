"""Application configuration using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from tymora.dice.luck import LUCK_WINDOW, MIN_LUCK_HISTORY


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Application settings loaded from TYMORA_* environment variables.

    luck_window and luck_min_history only drive the CLI's luck readings and
    descriptions. Die.luck, Die.luck_tier, str(die) and DiceBag.to_list
    always use tymora.dice.luck.LUCK_WINDOW and its default guard.
    """

    model_config = SettingsConfigDict(
        env_prefix="TYMORA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Database
    database_url: str = "sqlite:///tymora.db"

    # Pocket defaults
    default_bag: str = "Main Bag"
    default_user: str = "anonymous"

    # Luck
    luck_window: int = Field(default=LUCK_WINDOW, ge=1)  # Trailing rolls examined
    luck_min_history: int = Field(default=MIN_LUCK_HISTORY, ge=0)  # Rolls before luck counts

    # Debug
    debug: bool = False
    log_level: LogLevel = "WARNING"

    @property
    def effective_log_level(self) -> str:
        """Log level after applying the debug flag."""
        return "DEBUG" if self.debug else self.log_level


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
