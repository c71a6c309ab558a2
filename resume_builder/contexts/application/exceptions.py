"""Custom exceptions for resume mutation and storage."""

from enum import Enum
from typing import Optional


class IndexOutOfBoundsError(IndexError):
    """
    Exception raised when an update/remove/move targets an entry that does not exist.

    The document is never modified when this is raised.

    Attributes:
        section: Section name (e.g., 'education')
        index: Offending index
        length: Length of the section list at the time of the call
    """

    def __init__(self, section: str, index: int, length: int):
        self.section = section
        self.index = index
        self.length = length
        super().__init__(
            f"{section.capitalize()} index out of bounds: {index} (section has {length} entries)"
        )


class StorageErrorKind(Enum):
    NOT_FOUND = "not_found"
    UNAVAILABLE = "unavailable"
    SERIALIZATION_FAILURE = "serialization_failure"
    WRITE_FAILURE = "write_failure"


class StorageError(Exception):
    """
    Exception raised by resume repositories.

    Every backend maps its own failures onto one of the StorageErrorKind values,
    so callers never see sqlite3 or YAML exceptions directly (the underlying
    exception is chained as __cause__).

    Attributes:
        message: Error description
        kind: Failure category
        storage_key: Storage slot involved, when known
    """

    kind: StorageErrorKind = StorageErrorKind.UNAVAILABLE

    def __init__(self, message: str, storage_key: Optional[str] = None):
        self.message = message
        self.storage_key = storage_key

        parts = [message]
        if storage_key:
            parts.append(f"(key: {storage_key})")
        super().__init__(" ".join(parts))


class ResumeNotFoundError(StorageError):
    """No snapshot has been saved yet."""

    kind = StorageErrorKind.NOT_FOUND


class StorageUnavailableError(StorageError):
    """The underlying store cannot be reached or opened."""

    kind = StorageErrorKind.UNAVAILABLE


class SerializationError(StorageError):
    """A document could not be encoded, or a stored snapshot could not be decoded."""

    kind = StorageErrorKind.SERIALIZATION_FAILURE


class StorageWriteError(StorageError):
    """The store refused the write (disk full, read-only database, etc.)."""

    kind = StorageErrorKind.WRITE_FAILURE
