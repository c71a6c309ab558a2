"""
Infrastructure Context

Responsibilities:
- Implements the ResumeRepository contract (in-memory and key-value backed)
- Encodes documents as YAML snapshots and decodes them back
- Maps backend failures onto StorageError kinds

Owns: Storage adapters, snapshot format, backend selection
Never: Mutates document content
"""

from resume_builder.contexts.infrastructure.key_value_store import (
    KeyValueStore,
    SQLiteKeyValueStore,
)
from resume_builder.contexts.infrastructure.serialization import dump_resume, load_resume_text
from resume_builder.contexts.infrastructure.storage import (
    InMemoryResumeRepository,
    KeyValueResumeRepository,
    create_repository,
)

__all__ = [
    # Repositories
    "InMemoryResumeRepository",
    "KeyValueResumeRepository",
    "create_repository",
    # Stores
    "KeyValueStore",
    "SQLiteKeyValueStore",
    # Snapshot format
    "dump_resume",
    "load_resume_text",
]
