from enum import Enum
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings


class SaveMode(str, Enum):
    OVERWRITE = "overwrite"
    APPEND = "append"


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    path: Path = Path("recipes.txt")
    encoding: str = "utf-8"
    save_mode: SaveMode = SaveMode.OVERWRITE
    load_on_startup: bool = True
    log_level: str = "INFO"

    model_config = {
        "env_file": ".env",
        "env_prefix": "RECIPES_",
        "extra": "ignore",
    }

@lru_cache()
def get_settings() -> Settings:
    """Return cached Settings instance."""
    return Settings()
