"""
Application Context

Responsibilities:
- Applies every structural change to a resume document (add/update/remove/move)
- Enforces list bounds before mutating
- Delegates load/save to the configured repository

Owns: ResumeService, ResumeRepository contract, error taxonomy
Never: Knows which storage technology is in use
"""

from resume_builder.contexts.application.exceptions import (
    IndexOutOfBoundsError,
    ResumeNotFoundError,
    SerializationError,
    StorageError,
    StorageErrorKind,
    StorageUnavailableError,
    StorageWriteError,
)
from resume_builder.contexts.application.repository import ResumeRepository
from resume_builder.contexts.application.use_cases import ResumeService

__all__ = [
    "ResumeService",
    "ResumeRepository",
    # Errors
    "IndexOutOfBoundsError",
    "StorageError",
    "StorageErrorKind",
    "ResumeNotFoundError",
    "StorageUnavailableError",
    "SerializationError",
    "StorageWriteError",
]
