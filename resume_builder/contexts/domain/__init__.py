"""
Domain Context

Responsibilities:
- Defines the resume document and its sections as plain data structures
- Converts documents to and from field-named dicts

Owns: Resume aggregate, section records, theme enumeration
Never: Mutates documents on behalf of callers or touches storage
"""

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
from resume_builder.contexts.domain.sample_data import sample_resume

__all__ = [
    "Resume",
    "PersonalInfo",
    "Education",
    "Experience",
    "Skill",
    "Skills",
    "Project",
    "ResumeTheme",
    "sample_resume",
]
