from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from feedbrain.core.version import __version__


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="allow",
    )

    APP_NAME: str = "FeedBrain"
    APP_ENV: Literal["development", "production"] = "production"
    PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    # Where the per-user brain document lives
    DATA_DIR: Path = Path(".feedbrain")
    BRAIN_FILENAME: str = "user_neuro_brain.json"

    @property
    def brain_path(self) -> Path:
        return self.DATA_DIR / self.BRAIN_FILENAME


settings = Settings()

APP_VERSION = __version__
