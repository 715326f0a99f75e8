# rostering/settings.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
import logging
from pathlib import Path

logger = logging.getLogger(__name__)
if not logging.getLogger().hasHandlers():
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s SETTINGS.PY - [%(levelname)s] - %(message)s'
    )

# This settings.py file is at <project>/rostering/settings.py
PROJECT_ROOT = Path(__file__).parent.parent.resolve()
DOTENV_PATH = PROJECT_ROOT / ".env"

logger.info(f"SETTINGS.PY: Determined PROJECT_ROOT as: {PROJECT_ROOT}")

if DOTENV_PATH.exists():
    logger.info(f"SETTINGS.PY: .env file FOUND at explicit path: {DOTENV_PATH}")
else:
    logger.warning(
        f"SETTINGS.PY: .env file NOT FOUND at explicit path: {DOTENV_PATH}. "
        "Will rely on OS env vars or defaults."
    )


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    app_name: str = "Rostering Backend"
    debug_mode: bool = False
    log_level: str = "INFO"

    # SQLite configuration
    sqlite_db_path: str = "./rostering_data.sqlite3"

    # Every REST route is mounted under this prefix
    api_prefix: str = Field(
        default="/rest",
        description="Path prefix for the tenant, entity and admin routes."
    )

    model_config = SettingsConfigDict(
        env_file=DOTENV_PATH if DOTENV_PATH.exists() else None,
        extra="ignore",
        env_file_encoding='utf-8'
    )


settings = Settings()

logger.info(
    f"SETTINGS.PY: Post-Settings() settings.debug_mode: "
    f"{settings.debug_mode} (Type: {type(settings.debug_mode)})"
)
logger.info(f"SETTINGS.PY: Post-Settings() settings.sqlite_db_path: '{settings.sqlite_db_path}'")
logger.info(f"SETTINGS.PY: Post-Settings() settings.api_prefix: '{settings.api_prefix}'")
