"""Storage contract for the single persisted resume."""

from abc import ABC, abstractmethod

from resume_builder.contexts.domain.models import Resume


class ResumeRepository(ABC):
    """
    Port for saving and loading one resume snapshot.

    Implementations live in the infrastructure context. The concrete class is
    chosen once per session (see create_repository()); nothing downstream
    branches on the storage kind.
    """

    @abstractmethod
    def save(self, resume: Resume) -> None:
        """
        Persist a full snapshot, overwriting any prior one.

        Raises:
            StorageError: If the snapshot cannot be encoded or written
        """

    @abstractmethod
    def load(self) -> Resume:
        """
        Return the last saved snapshot.

        Raises:
            ResumeNotFoundError: If nothing has been saved
            StorageError: For any other storage failure
        """

    @abstractmethod
    def exists(self) -> bool:
        """Report whether a snapshot is present. Never raises."""
