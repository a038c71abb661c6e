"""Runtime configuration for tasktrack.

Values come from the environment, with a `.env` file loaded first:
- TASKTRACK_STORAGE: "file" (default), "sql" or "memory"
- TASKTRACK_DATA_FILE: JSON data file for the file backend
- DATABASE_URL: SQLAlchemy URL for the sql backend
- TASKTRACK_LOG_LEVEL: logging level name
- DEBUG: "true" turns on SQL echo and debug logging
"""

import logging
import os
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from tasktrack.storage.backends import JsonFileKeyValueStore, KeyValueStore, MemoryKeyValueStore
from tasktrack.storage.database import SqlKeyValueStore

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_DATA_FILE = "./tasktrack.json"
DEFAULT_DATABASE_URL = "sqlite:///./tasktrack.db"


class Settings(BaseModel):
    """Resolved configuration."""
    storage_backend: Literal["file", "sql", "memory"] = Field("file", description="Key-value backend")
    data_file: str = Field(DEFAULT_DATA_FILE, description="JSON data file path")
    database_url: str = Field(DEFAULT_DATABASE_URL, description="SQLAlchemy database URL")
    log_level: str = Field("INFO", description="Logging level name")
    debug: bool = Field(False, description="Verbose logging and SQL echo")


def load_settings() -> Settings:
    """Read settings from the environment."""
    debug = os.getenv("DEBUG", "False").lower() == "true"
    return Settings(
        storage_backend=os.getenv("TASKTRACK_STORAGE", "file").strip().lower(),
        data_file=os.getenv("TASKTRACK_DATA_FILE", DEFAULT_DATA_FILE),
        database_url=os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL),
        log_level="DEBUG" if debug else os.getenv("TASKTRACK_LOG_LEVEL", "INFO").upper(),
        debug=debug,
    )


def build_storage(settings: Settings) -> KeyValueStore:
    """Create the configured key-value backend."""
    if settings.storage_backend == "memory":
        logger.info("Using in-memory storage (nothing is kept after exit)")
        return MemoryKeyValueStore()
    if settings.storage_backend == "sql":
        return SqlKeyValueStore(settings.database_url, echo=settings.debug)
    logger.info(f"Using data file {settings.data_file}")
    return JsonFileKeyValueStore(settings.data_file)
