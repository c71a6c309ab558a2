"""
Session configuration.

Values come from environment variables (a .env file in the working directory
is loaded first):

    RESUME_STORAGE_BACKEND  "sqlite" (default) or "memory"
    RESUME_STORAGE_PATH     SQLite file for the sqlite backend
    RESUME_STORAGE_KEY      Storage slot holding the single resume
    LOGS_PATH               Directory for session logs
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

STORAGE_BACKENDS = ("sqlite", "memory")
DEFAULT_STORAGE_BACKEND = "sqlite"
DEFAULT_STORAGE_PATH = Path("outs/resume_store.sqlite3")
DEFAULT_STORAGE_KEY = "resume-data"
DEFAULT_LOGS_PATH = Path("outs/logs")


@dataclass(frozen=True)
class Settings:
    """
    Attributes:
        storage_backend: Repository implementation to build ("sqlite" or "memory")
        storage_path: SQLite file used by the sqlite backend
        storage_key: Key of the resume slot
        logs_path: Directory for log files
    """

    storage_backend: str = DEFAULT_STORAGE_BACKEND
    storage_path: Path = DEFAULT_STORAGE_PATH
    storage_key: str = DEFAULT_STORAGE_KEY
    logs_path: Path = DEFAULT_LOGS_PATH

    def __post_init__(self):
        if self.storage_backend not in STORAGE_BACKENDS:
            raise ValueError(
                f"Invalid storage backend: {self.storage_backend!r}. "
                f"Must be one of: {', '.join(STORAGE_BACKENDS)}"
            )
        if not self.storage_key:
            raise ValueError("Storage key must not be empty")


def load_settings() -> Settings:
    """
    Build Settings from the environment.

    Raises:
        ValueError: If RESUME_STORAGE_BACKEND names an unknown backend
    """
    return Settings(
        storage_backend=os.getenv("RESUME_STORAGE_BACKEND", DEFAULT_STORAGE_BACKEND).strip().lower(),
        storage_path=Path(os.getenv("RESUME_STORAGE_PATH", str(DEFAULT_STORAGE_PATH))),
        storage_key=os.getenv("RESUME_STORAGE_KEY", DEFAULT_STORAGE_KEY),
        logs_path=Path(os.getenv("LOGS_PATH", str(DEFAULT_LOGS_PATH))),
    )
