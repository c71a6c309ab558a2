"""
Resume Repository Implementations

- InMemoryResumeRepository: snapshot kept in process memory, lost on exit
- KeyValueResumeRepository: YAML snapshot under a fixed key in a KeyValueStore

create_repository() picks one from Settings. It is the only place that knows
which backend a session uses.
"""

import copy
from typing import Optional

from resume_builder.config import DEFAULT_STORAGE_KEY, Settings
from resume_builder.contexts.application.exceptions import ResumeNotFoundError, StorageError
from resume_builder.contexts.application.logger import _log_debug, _log_warning
from resume_builder.contexts.application.repository import ResumeRepository
from resume_builder.contexts.domain.models import Resume
from resume_builder.contexts.infrastructure.key_value_store import (
    KeyValueStore,
    SQLiteKeyValueStore,
)
from resume_builder.contexts.infrastructure.serialization import dump_resume, load_resume_text


class InMemoryResumeRepository(ResumeRepository):
    """
    Ephemeral repository.

    Stores a deep copy on save and hands out deep copies on load, so later
    edits by the caller never leak into the stored snapshot.
    """

    def __init__(self):
        self._snapshot: Optional[Resume] = None

    def save(self, resume: Resume) -> None:
        self._snapshot = copy.deepcopy(resume)
        _log_debug("Saved resume snapshot in memory")

    def load(self) -> Resume:
        if self._snapshot is None:
            raise ResumeNotFoundError("No resume has been saved in this session")
        return copy.deepcopy(self._snapshot)

    def exists(self) -> bool:
        return self._snapshot is not None


class KeyValueResumeRepository(ResumeRepository):
    """
    Durable repository storing one YAML snapshot under a fixed key.

    Args:
        store: Backing key-value store
        storage_key: Slot name; only one document is ever kept per key
    """

    def __init__(self, store: KeyValueStore, storage_key: str = DEFAULT_STORAGE_KEY):
        self.store = store
        self.storage_key = storage_key

    def save(self, resume: Resume) -> None:
        text = dump_resume(resume)
        self.store.set_item(self.storage_key, text)
        _log_debug(f"Saved resume snapshot under '{self.storage_key}' ({len(text)} chars)")

    def load(self) -> Resume:
        text = self.store.get_item(self.storage_key)
        if text is None:
            raise ResumeNotFoundError("Resume not found in storage", self.storage_key)
        return load_resume_text(text)

    def exists(self) -> bool:
        try:
            return self.store.get_item(self.storage_key) is not None
        except StorageError as e:
            _log_warning(f"Storage unavailable while checking for saved resume: {e}")
            return False


def create_repository(settings: Settings) -> ResumeRepository:
    """Build the repository selected by settings.storage_backend."""
    _log_debug(f"Using {settings.storage_backend} storage (key: {settings.storage_key})")

    if settings.storage_backend == "sqlite":
        store = SQLiteKeyValueStore(settings.storage_path)
        return KeyValueResumeRepository(store, settings.storage_key)
    if settings.storage_backend == "memory":
        return InMemoryResumeRepository()

    raise ValueError(f"Invalid storage backend: {settings.storage_backend!r}")
