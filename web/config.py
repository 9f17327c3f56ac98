"""
Configuration for the diagram web service.

Every value can be overridden with a DIAGRAM_-prefixed environment variable
(e.g. DIAGRAM_FONT_DIR=/srv/fonts) or a .env file in the working directory.
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="DIAGRAM_", env_file=".env", extra="ignore")

    # Directory holding roboto.ttf (labels) and casefont.ttf (pieces).
    FONT_DIR: Path = Path(__file__).parent / "fonts"

    DEFAULT_SIZE: int = 800
    MAX_SIZE: int = 2000

    LOG_LEVEL: str = "INFO"


settings = Settings()
