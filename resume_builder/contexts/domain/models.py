"""
Resume Document Data Structures

Defines the resume aggregate and its sections. These structures carry no
behavior beyond construction-time checks and conversion to and from plain
field-named dicts (the shape that gets persisted).

The root aggregate is Resume:
- personal_info (exactly one)
- education, experience, projects (ordered lists, may be empty)
- skills (exactly one, canonical rated-list representation)
- theme (exactly one)
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Dict, List, Optional


# =========================================================================
# FIELD COERCION HELPERS
# =========================================================================


def _text(data: Dict[str, Any], key: str) -> str:
    """Read a free-text field, treating missing/None as empty."""
    value = data.get(key, "")
    if value is None:
        return ""
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise TypeError(f"Field '{key}' must be text, got {type(value).__name__}")
    return str(value)


def _text_list(data: Dict[str, Any], key: str) -> List[str]:
    """Read an ordered list of strings, treating missing/None as empty."""
    value = data.get(key) or []
    if not isinstance(value, list):
        raise TypeError(f"Field '{key}' must be a list, got {type(value).__name__}")
    return [_text({key: item}, key) for item in value]


def _flag(data: Dict[str, Any], key: str) -> bool:
    value = data.get(key, False)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise TypeError(f"Field '{key}' must be a boolean, got {type(value).__name__}")
    return value


def parse_calendar_date(value: Any) -> Optional[date]:
    """
    Parse an optional calendar date.

    Accepts None/empty (no date), date instances, ISO "YYYY-MM-DD" strings and
    the older month-only "YYYY-MM" form (mapped to the first of the month).

    Raises:
        ValueError: If value is text in any other format
        TypeError: If value is not text or a date
    """
    if value is None or value == "":
        return None
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise TypeError(f"Expected date string, got {type(value).__name__}")

    text = value.strip()
    if not text:
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass

    # Month-only dates written by older documents
    parts = text.split("-")
    if len(parts) == 2 and all(part.isdigit() for part in parts):
        return date(int(parts[0]), int(parts[1]), 1)

    raise ValueError(f"Unrecognized date: {value!r} (expected YYYY-MM-DD)")


def _format_calendar_date(value: Optional[date]) -> Optional[str]:
    return value.isoformat() if value is not None else None


# =========================================================================
# THEME
# =========================================================================


class ResumeTheme(Enum):
    """Closed set of visual themes. Values double as display names."""

    PROFESSIONAL = "Professional"
    MINIMAL = "Minimal"
    CREATIVE = "Creative"
    MODERN = "Modern"

    @classmethod
    def all(cls) -> List["ResumeTheme"]:
        """All themes in declaration order."""
        return list(cls)

    @classmethod
    def default(cls) -> "ResumeTheme":
        return cls.PROFESSIONAL

    @classmethod
    def from_name(cls, name: str) -> "ResumeTheme":
        """
        Look up a theme by display name or member name, ignoring case.

        Raises:
            ValueError: If no theme matches
        """
        wanted = name.strip().lower()
        for theme in cls:
            if wanted in (theme.value.lower(), theme.name.lower()):
                return theme
        valid = ", ".join(theme.value for theme in cls)
        raise ValueError(f"Unknown theme: {name!r}. Valid themes are: {valid}")

    @property
    def display_name(self) -> str:
        return self.value


# =========================================================================
# SECTIONS
# =========================================================================


@dataclass
class PersonalInfo:
    """
    Contact details and summary shown at the top of the resume.

    No field is required; validation of individual fields belongs to whatever
    collects the input.
    """

    name: str = ""
    email: str = ""
    phone: str = ""
    website: str = ""
    linkedin: str = ""
    github: str = ""
    location: str = ""
    summary: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "website": self.website,
            "linkedin": self.linkedin,
            "github": self.github,
            "location": self.location,
            "summary": self.summary,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PersonalInfo":
        return cls(
            name=_text(data, "name"),
            email=_text(data, "email"),
            phone=_text(data, "phone"),
            website=_text(data, "website"),
            linkedin=_text(data, "linkedin"),
            github=_text(data, "github"),
            location=_text(data, "location"),
            summary=_text(data, "summary"),
        )


@dataclass
class Education:
    """
    Single education entry.

    Dates are free text (e.g. "2015-09", "Fall 2019") and are never parsed.
    """

    institution: str = ""
    degree: str = ""
    field_of_study: str = ""
    start_date: str = ""
    end_date: str = ""
    location: str = ""
    description: str = ""
    gpa: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "institution": self.institution,
            "degree": self.degree,
            "field_of_study": self.field_of_study,
            "start_date": self.start_date,
            "end_date": self.end_date,
            "location": self.location,
            "description": self.description,
            "gpa": self.gpa,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Education":
        return cls(
            institution=_text(data, "institution"),
            degree=_text(data, "degree"),
            field_of_study=_text(data, "field_of_study"),
            start_date=_text(data, "start_date"),
            end_date=_text(data, "end_date"),
            location=_text(data, "location"),
            description=_text(data, "description"),
            gpa=_text(data, "gpa"),
        )


@dataclass
class Experience:
    """
    Single work experience entry.

    Attributes:
        achievements: Ordered bullet points
        is_current: Position is ongoing. end_date may still hold text, but
            consumers should treat the entry as having no end date.
    """

    company: str = ""
    position: str = ""
    start_date: str = ""
    end_date: str = ""
    location: str = ""
    description: str = ""
    achievements: List[str] = field(default_factory=list)
    is_current: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "company": self.company,
            "position": self.position,
            "start_date": self.start_date,
            "end_date": self.end_date,
            "location": self.location,
            "description": self.description,
            "achievements": list(self.achievements),
            "is_current": self.is_current,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Experience":
        return cls(
            company=_text(data, "company"),
            position=_text(data, "position"),
            start_date=_text(data, "start_date"),
            end_date=_text(data, "end_date"),
            location=_text(data, "location"),
            description=_text(data, "description"),
            achievements=_text_list(data, "achievements"),
            is_current=_flag(data, "is_current"),
        )


MIN_SKILL_LEVEL = 0
MAX_SKILL_LEVEL = 5


@dataclass
class Skill:
    """
    Rated skill.

    Attributes:
        name: Skill name (e.g., "Python")
        level: Proficiency from 0 (unrated) to 5
        category: Optional grouping label (e.g., "Languages")
    """

    name: str
    level: int = MIN_SKILL_LEVEL
    category: str = ""

    def __post_init__(self):
        if isinstance(self.level, bool) or not isinstance(self.level, int):
            raise ValueError(f"Skill level must be an integer, got {self.level!r}")
        if not MIN_SKILL_LEVEL <= self.level <= MAX_SKILL_LEVEL:
            raise ValueError(
                f"Skill level must be between {MIN_SKILL_LEVEL} and {MAX_SKILL_LEVEL}, "
                f"got {self.level}"
            )

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "level": self.level, "category": self.category}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Skill":
        level = data.get("level", MIN_SKILL_LEVEL)
        return cls(
            name=_text(data, "name"),
            level=MIN_SKILL_LEVEL if level is None else level,
            category=_text(data, "category"),
        )


@dataclass
class Skills:
    """
    Skills section as an ordered list of rated skills.

    Documents written before skills were rated stored a mapping of category
    name to skill names; from_dict() migrates that shape on read.
    """

    skill_list: List[Skill] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"skill_list": [skill.to_dict() for skill in self.skill_list]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Skills":
        if data.get("skill_list") is not None:
            entries = data["skill_list"]
            if not isinstance(entries, list):
                raise TypeError("Field 'skill_list' must be a list")
            return cls(skill_list=[Skill.from_dict(entry) for entry in entries])

        if data.get("categories") is not None:
            return cls.from_categories(data["categories"])

        return cls()

    @classmethod
    def from_categories(cls, categories: Dict[str, List[str]]) -> "Skills":
        """Migrate the category-map shape: every skill becomes unrated (level 0)."""
        if not isinstance(categories, dict):
            raise TypeError("Field 'categories' must be a mapping")
        skill_list = []
        for category, names in categories.items():
            for name in _text_list({"names": names}, "names"):
                skill_list.append(Skill(name=name, category=str(category)))
        return cls(skill_list=skill_list)


@dataclass
class Project:
    """
    Single project entry.

    Dates are optional calendar dates (None means unspecified).
    """

    name: str = ""
    role: str = ""
    description: str = ""
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    technologies: List[str] = field(default_factory=list)
    url: str = ""
    achievements: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "role": self.role,
            "description": self.description,
            "start_date": _format_calendar_date(self.start_date),
            "end_date": _format_calendar_date(self.end_date),
            "technologies": list(self.technologies),
            "url": self.url,
            "achievements": list(self.achievements),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Project":
        return cls(
            name=_text(data, "name"),
            role=_text(data, "role"),
            description=_text(data, "description"),
            start_date=parse_calendar_date(data.get("start_date")),
            end_date=parse_calendar_date(data.get("end_date")),
            technologies=_text_list(data, "technologies"),
            url=_text(data, "url"),
            achievements=_text_list(data, "achievements"),
        )


# =========================================================================
# ROOT AGGREGATE
# =========================================================================


@dataclass
class Resume:
    """
    Complete resume document.

    Resume() is the empty document: blank personal info, no list entries,
    no skills, default theme.
    """

    personal_info: PersonalInfo = field(default_factory=PersonalInfo)
    education: List[Education] = field(default_factory=list)
    experience: List[Experience] = field(default_factory=list)
    skills: Skills = field(default_factory=Skills)
    projects: List[Project] = field(default_factory=list)
    theme: ResumeTheme = ResumeTheme.PROFESSIONAL

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain nested dict of field-named values."""
        return {
            "personal_info": self.personal_info.to_dict(),
            "education": [entry.to_dict() for entry in self.education],
            "experience": [entry.to_dict() for entry in self.experience],
            "skills": self.skills.to_dict(),
            "projects": [entry.to_dict() for entry in self.projects],
            "theme": self.theme.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Resume":
        """
        Build a Resume from a field-named dict.

        Missing sections take their default value and unknown keys are ignored,
        so documents missing newer fields still load.

        Raises:
            TypeError: If a section or field has the wrong shape
            ValueError: If a value is invalid (unknown theme, bad date, skill level)
        """
        if not isinstance(data, dict):
            raise TypeError(f"Resume data must be a mapping, got {type(data).__name__}")

        theme_name = data.get("theme")
        theme = ResumeTheme.from_name(theme_name) if theme_name else ResumeTheme.default()

        return cls(
            personal_info=PersonalInfo.from_dict(data.get("personal_info") or {}),
            education=[Education.from_dict(entry) for entry in _entries(data, "education")],
            experience=[Experience.from_dict(entry) for entry in _entries(data, "experience")],
            skills=Skills.from_dict(data.get("skills") or {}),
            projects=[Project.from_dict(entry) for entry in _entries(data, "projects")],
            theme=theme,
        )


def _entries(data: Dict[str, Any], key: str) -> List[Dict[str, Any]]:
    entries = data.get(key) or []
    if not isinstance(entries, list):
        raise TypeError(f"Section '{key}' must be a list, got {type(entries).__name__}")
    for entry in entries:
        if not isinstance(entry, dict):
            raise TypeError(f"Entries in '{key}' must be mappings, got {type(entry).__name__}")
    return entries
