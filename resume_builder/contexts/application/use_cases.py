"""
Resume Use Cases

ResumeService is the only component that applies structural changes to a
Resume. Every mutator works on the document it is given and returns that same
document. Index-based operations check bounds before touching anything, so a
rejected call leaves the document exactly as it was.

Only load_resume() and save_resume() talk to the repository.
"""

from typing import List, TypeVar

from resume_builder.contexts.application.exceptions import (
    IndexOutOfBoundsError,
    ResumeNotFoundError,
)
from resume_builder.contexts.application.logger import (
    _log_debug,
    _log_success,
    log_rejected_operation,
)
from resume_builder.contexts.application.repository import ResumeRepository
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

T = TypeVar("T")


def check_index(section: str, entries: List, index: int) -> None:
    """
    Ensure index addresses an existing entry.

    Negative indices are rejected rather than counted from the end.

    Raises:
        IndexOutOfBoundsError: If index is not within [0, len(entries))
    """
    if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(entries):
        error = IndexOutOfBoundsError(section, index, len(entries))
        log_rejected_operation(f"{section} change", error)
        raise error


def _replace(section: str, entries: List[T], index: int, entry: T) -> None:
    check_index(section, entries, index)
    entries[index] = entry
    _log_debug(f"Updated {section}[{index}]")


def _remove(section: str, entries: List[T], index: int) -> None:
    check_index(section, entries, index)
    del entries[index]
    _log_debug(f"Removed {section}[{index}] ({len(entries)} remaining)")


def _move(section: str, entries: List[T], from_index: int, to_index: int) -> None:
    check_index(section, entries, from_index)
    check_index(section, entries, to_index)
    entries.insert(to_index, entries.pop(from_index))
    _log_debug(f"Moved {section}[{from_index}] to position {to_index}")


class ResumeService:
    """
    Use-case layer over a single resume document.

    Args:
        repository: Storage backend, selected once at session start
    """

    def __init__(self, repository: ResumeRepository):
        self.repository = repository

    # =========================================================================
    # LIFECYCLE AND PERSISTENCE
    # =========================================================================

    def create_new_resume(self) -> Resume:
        """Return an empty document. No side effects."""
        return Resume()

    def has_saved_resume(self) -> bool:
        """True if the repository holds a saved document."""
        return self.repository.exists()

    def load_resume(self) -> Resume:
        """
        Load the saved document, or a fresh empty one if nothing was saved.

        Raises:
            StorageError: For storage failures other than absence
        """
        if not self.repository.exists():
            _log_debug("No saved resume found, starting from an empty document")
            return self.create_new_resume()

        try:
            resume = self.repository.load()
        except ResumeNotFoundError:
            # Snapshot disappeared between exists() and load()
            _log_debug("Saved resume vanished before load, starting from an empty document")
            return self.create_new_resume()

        _log_success("Loaded saved resume")
        return resume

    def save_resume(self, resume: Resume) -> None:
        """
        Persist the document.

        Raises:
            StorageError: If the repository cannot save
        """
        self.repository.save(resume)
        _log_success("Saved resume")

    # =========================================================================
    # SINGLE-VALUE SECTIONS
    # =========================================================================

    def update_personal_info(self, resume: Resume, info: PersonalInfo) -> Resume:
        resume.personal_info = info
        return resume

    def update_skills(self, resume: Resume, skills: Skills) -> Resume:
        resume.skills = skills
        return resume

    def change_theme(self, resume: Resume, theme: ResumeTheme) -> Resume:
        resume.theme = theme
        _log_debug(f"Theme set to {theme.display_name}")
        return resume

    # =========================================================================
    # EDUCATION
    # =========================================================================

    def add_education(self, resume: Resume, education: Education) -> Resume:
        resume.education.append(education)
        return resume

    def update_education(self, resume: Resume, index: int, education: Education) -> Resume:
        _replace("education", resume.education, index, education)
        return resume

    def remove_education(self, resume: Resume, index: int) -> Resume:
        _remove("education", resume.education, index)
        return resume

    def move_education(self, resume: Resume, from_index: int, to_index: int) -> Resume:
        _move("education", resume.education, from_index, to_index)
        return resume

    # =========================================================================
    # EXPERIENCE
    # =========================================================================

    def add_experience(self, resume: Resume, experience: Experience) -> Resume:
        resume.experience.append(experience)
        return resume

    def update_experience(self, resume: Resume, index: int, experience: Experience) -> Resume:
        _replace("experience", resume.experience, index, experience)
        return resume

    def remove_experience(self, resume: Resume, index: int) -> Resume:
        _remove("experience", resume.experience, index)
        return resume

    def move_experience(self, resume: Resume, from_index: int, to_index: int) -> Resume:
        _move("experience", resume.experience, from_index, to_index)
        return resume

    # =========================================================================
    # PROJECTS
    # =========================================================================

    def add_project(self, resume: Resume, project: Project) -> Resume:
        resume.projects.append(project)
        return resume

    def update_project(self, resume: Resume, index: int, project: Project) -> Resume:
        _replace("project", resume.projects, index, project)
        return resume

    def remove_project(self, resume: Resume, index: int) -> Resume:
        _remove("project", resume.projects, index)
        return resume

    def move_project(self, resume: Resume, from_index: int, to_index: int) -> Resume:
        _move("project", resume.projects, from_index, to_index)
        return resume

    # =========================================================================
    # INDIVIDUAL SKILLS
    # =========================================================================

    def add_skill(self, resume: Resume, skill: Skill) -> Resume:
        resume.skills.skill_list.append(skill)
        return resume

    def update_skill(self, resume: Resume, index: int, skill: Skill) -> Resume:
        _replace("skill", resume.skills.skill_list, index, skill)
        return resume

    def remove_skill(self, resume: Resume, index: int) -> Resume:
        _remove("skill", resume.skills.skill_list, index)
        return resume
