"""
Resume View Model

Holds the live document for one editing session and exposes the read/mutate
surface used by the CLI (or any other front end).

The view model is created once per session and passed explicitly to whatever
handles user actions; there is no module-level live document.
"""

import copy
from typing import Callable, Optional

from resume_builder.contexts.application.exceptions import IndexOutOfBoundsError, StorageError
from resume_builder.contexts.application.logger import _log_debug, _log_error
from resume_builder.contexts.application.use_cases import ResumeService
from resume_builder.contexts.domain.models import (
    Education,
    Experience,
    PersonalInfo,
    Project,
    Resume,
    ResumeTheme,
    Skill,
    Skills,
)


class ResumeViewModel:
    """
    Single authoritative copy of the resume being edited.

    Every mutator runs the matching ResumeService operation on a private copy
    and swaps it in only when the operation succeeds. A rejected operation
    raises to the caller and the live document stays as it was.

    Attributes:
        service: Use-case layer that performs mutations and persistence
        revision: Incremented on every successful mutation or load
    """

    def __init__(self, service: ResumeService):
        self.service = service
        self._resume = service.create_new_resume()
        self.revision = 0
        self._saved_revision = 0

    @property
    def is_dirty(self) -> bool:
        """True if the live document changed since the last load or save."""
        return self.revision != self._saved_revision

    def current(self) -> Resume:
        """Return a copy of the live document."""
        return copy.deepcopy(self._resume)

    # =========================================================================
    # PERSISTENCE
    # =========================================================================

    def load(self) -> None:
        """
        Replace the live document with the saved one (or an empty one).

        Raises:
            StorageError: If loading fails; the live document is kept
        """
        try:
            resume = self.service.load_resume()
        except StorageError as e:
            _log_error(f"Load failed, keeping current document: {e}")
            raise

        self._resume = resume
        self.revision += 1
        self._saved_revision = self.revision

    def save(self) -> None:
        """
        Persist the live document.

        Raises:
            StorageError: If saving fails
        """
        try:
            self.service.save_resume(self._resume)
        except StorageError as e:
            _log_error(f"Save failed: {e}")
            raise
        self._saved_revision = self.revision

    def has_saved_resume(self) -> bool:
        return self.service.has_saved_resume()

    def reset(self, resume: Optional[Resume] = None) -> None:
        """
        Replace the whole live document, e.g. to start over before saving.

        Args:
            resume: New document (copied); an empty one when omitted
        """
        if resume is None:
            resume = self.service.create_new_resume()
        self._resume = copy.deepcopy(resume)
        self.revision += 1
        _log_debug("Live document reset")

    def _apply(self, operation: Callable[..., Resume], *args) -> None:
        working = copy.deepcopy(self._resume)
        try:
            # Arguments are copied so callers cannot alias the live document
            self._resume = operation(working, *copy.deepcopy(args))
        except IndexOutOfBoundsError:
            _log_debug(f"{operation.__name__} left the live document unchanged")
            raise
        self.revision += 1

    # =========================================================================
    # MUTATORS (one per ResumeService operation)
    # =========================================================================

    def update_personal_info(self, info: PersonalInfo) -> None:
        self._apply(self.service.update_personal_info, info)

    def update_skills(self, skills: Skills) -> None:
        self._apply(self.service.update_skills, skills)

    def change_theme(self, theme: ResumeTheme) -> None:
        self._apply(self.service.change_theme, theme)

    def add_education(self, education: Education) -> None:
        self._apply(self.service.add_education, education)

    def update_education(self, index: int, education: Education) -> None:
        self._apply(self.service.update_education, index, education)

    def remove_education(self, index: int) -> None:
        self._apply(self.service.remove_education, index)

    def move_education(self, from_index: int, to_index: int) -> None:
        self._apply(self.service.move_education, from_index, to_index)

    def add_experience(self, experience: Experience) -> None:
        self._apply(self.service.add_experience, experience)

    def update_experience(self, index: int, experience: Experience) -> None:
        self._apply(self.service.update_experience, index, experience)

    def remove_experience(self, index: int) -> None:
        self._apply(self.service.remove_experience, index)

    def move_experience(self, from_index: int, to_index: int) -> None:
        self._apply(self.service.move_experience, from_index, to_index)

    def add_project(self, project: Project) -> None:
        self._apply(self.service.add_project, project)

    def update_project(self, index: int, project: Project) -> None:
        self._apply(self.service.update_project, index, project)

    def remove_project(self, index: int) -> None:
        self._apply(self.service.remove_project, index)

    def move_project(self, from_index: int, to_index: int) -> None:
        self._apply(self.service.move_project, from_index, to_index)

    def add_skill(self, skill: Skill) -> None:
        self._apply(self.service.add_skill, skill)

    def update_skill(self, index: int, skill: Skill) -> None:
        self._apply(self.service.update_skill, index, skill)

    def remove_skill(self, index: int) -> None:
        self._apply(self.service.remove_skill, index)
