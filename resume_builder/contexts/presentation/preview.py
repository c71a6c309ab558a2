"""
Resume Preview Rendering

Two renderings of a Resume:
- render_markdown(): plain markdown preview, independent of theme
- render_html(): themed HTML page from the Jinja2 template registered for the
  resume's theme (templates/{theme}.html.jinja, all extending base.html.jinja)

Empty sections are omitted from both.
"""

from datetime import date
from pathlib import Path
from typing import Dict, List, Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, select_autoescape

from resume_builder.contexts.domain.models import (
    Education,
    Experience,
    Project,
    Resume,
    ResumeTheme,
    Skills,
)

TEMPLATES_PATH = Path(__file__).parent / "templates"
PRESENT = "Present"


# =========================================================================
# SHARED FORMATTING HELPERS
# =========================================================================


def format_date_range(start: str, end: str) -> str:
    """Join start and end with a dash, dropping whichever is empty."""
    return " - ".join(part for part in (start, end) if part)


def experience_dates(experience: Experience) -> str:
    """Date range for an experience entry; current positions end in 'Present'."""
    end = PRESENT if experience.is_current else experience.end_date
    return format_date_range(experience.start_date, end)


def format_calendar_date(value: Optional[date]) -> str:
    """Format an optional date as 'Mon YYYY' (e.g., 'Mar 2021')."""
    return value.strftime("%b %Y") if value else ""


def project_dates(project: Project) -> str:
    return format_date_range(
        format_calendar_date(project.start_date), format_calendar_date(project.end_date)
    )


def contact_line(resume: Resume) -> str:
    """Non-empty contact fields joined with ' | '."""
    info = resume.personal_info
    fields = [info.email, info.phone, info.location, info.website, info.linkedin, info.github]
    return " | ".join(value for value in fields if value)


def skill_label(name: str, level: int) -> str:
    """Skill name with its rating; unrated (level 0) skills show the name only."""
    return f"{name} ({level}/5)" if level else name


def group_skills(skills: Skills) -> Dict[str, List[str]]:
    """Skill labels grouped by category, unlabelled skills under 'General'."""
    grouped: Dict[str, List[str]] = {}
    for skill in skills.skill_list:
        category = skill.category or "General"
        grouped.setdefault(category, []).append(skill_label(skill.name, skill.level))
    return grouped


# =========================================================================
# MARKDOWN
# =========================================================================


def format_education_markdown(education: Education) -> str:
    """
    Format single education entry as markdown.

    Institution is formatted as ### (section header added separately by caller).
    """
    parts = [f"### {education.institution or 'Unknown Institution'}\n"]

    degree = " in ".join(part for part in (education.degree, education.field_of_study) if part)
    if degree:
        parts.append(f"**{degree}**")
    dates = format_date_range(education.start_date, education.end_date)
    if dates:
        parts.append(f"*{dates}*")
    if education.location:
        parts.append(education.location)
    if education.gpa:
        parts.append(f"GPA: {education.gpa}")
    if education.description:
        parts.append("")
        parts.append(education.description)

    return "\n".join(parts)


def format_experience_markdown(experience: Experience) -> str:
    """Format single work experience entry as markdown (company as ###)."""
    parts = [f"### {experience.company or 'Unknown Company'}\n"]

    if experience.position:
        parts.append(f"**{experience.position}**")
    dates = experience_dates(experience)
    if dates:
        parts.append(f"*{dates}*")
    if experience.location:
        parts.append(experience.location)

    parts.append("")  # Blank line before content

    if experience.description:
        parts.append(experience.description)
    for achievement in experience.achievements:
        parts.append(f"- {achievement}")

    return "\n".join(parts)


def format_project_markdown(project: Project) -> str:
    """Format single project entry as markdown (name as ###)."""
    parts = [f"### {project.name or 'Untitled Project'}\n"]

    if project.role:
        parts.append(f"**{project.role}**")
    dates = project_dates(project)
    if dates:
        parts.append(f"*{dates}*")
    if project.url:
        parts.append(f"<{project.url}>")

    parts.append("")

    if project.description:
        parts.append(project.description)
    if project.technologies:
        parts.append(f"Technologies: {', '.join(project.technologies)}")
    for achievement in project.achievements:
        parts.append(f"- {achievement}")

    return "\n".join(parts)


def format_skills_markdown(skills: Skills) -> str:
    """Format skills grouped by category (categories as ###)."""
    parts = []
    for category, labels in group_skills(skills).items():
        parts.append(f"### {category}\n")
        parts.extend(f"- {label}" for label in labels)
        parts.append("")
    return "\n".join(parts).rstrip()


def render_markdown(resume: Resume) -> str:
    """
    Render the whole resume as markdown.

    Returns:
        Markdown text ending with a single newline
    """
    info = resume.personal_info
    blocks = [f"# {info.name or 'Untitled Resume'}"]

    contact = contact_line(resume)
    if contact:
        blocks.append(contact)

    if info.summary:
        blocks.append(f"## Summary\n\n{info.summary}")

    if resume.education:
        entries = "\n\n".join(format_education_markdown(entry) for entry in resume.education)
        blocks.append(f"## Education\n\n{entries}")

    if resume.experience:
        entries = "\n\n".join(format_experience_markdown(entry) for entry in resume.experience)
        blocks.append(f"## Experience\n\n{entries}")

    if resume.skills.skill_list:
        blocks.append(f"## Skills\n\n{format_skills_markdown(resume.skills)}")

    if resume.projects:
        entries = "\n\n".join(format_project_markdown(entry) for entry in resume.projects)
        blocks.append(f"## Projects\n\n{entries}")

    return "\n\n".join(block.rstrip() for block in blocks) + "\n"


# =========================================================================
# THEMED HTML
# =========================================================================


class ThemeRegistry:
    """
    Registry for loading and caching the Jinja2 template of each theme.

    Templates are stored as templates/{theme}.html.jinja, named after the
    lower-cased theme (e.g., professional.html.jinja).
    """

    def __init__(self, templates_path: Path = None):
        """
        Args:
            templates_path: Directory holding the theme templates. Defaults to
                the templates shipped with this package.
        """
        if templates_path is None:
            templates_path = TEMPLATES_PATH

        self.templates_path = templates_path
        self._cache: Dict[ResumeTheme, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(templates_path)),
            undefined=StrictUndefined,
            autoescape=select_autoescape(["html", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.globals.update(
            experience_dates=experience_dates,
            project_dates=project_dates,
            format_date_range=format_date_range,
        )

    @staticmethod
    def template_name(theme: ResumeTheme) -> str:
        return f"{theme.name.lower()}.html.jinja"

    def get_template(self, theme: ResumeTheme) -> Template:
        """
        Get the template for a theme, loading and caching it if necessary.

        Raises:
            TemplateNotFound: If the theme has no template file
        """
        if theme not in self._cache:
            self._cache[theme] = self.env.get_template(self.template_name(theme))
        return self._cache[theme]

    def is_cached(self, theme: ResumeTheme) -> bool:
        return theme in self._cache

    def render(self, resume: Resume) -> str:
        """Render the resume with its own theme's template."""
        template = self.get_template(resume.theme)
        return template.render(
            resume=resume,
            theme=resume.theme,
            contact=contact_line(resume),
            skill_groups=group_skills(resume.skills),
        )


def render_html(resume: Resume, registry: Optional[ThemeRegistry] = None) -> str:
    """Render the resume as a themed HTML page."""
    if registry is None:
        registry = ThemeRegistry()
    return registry.render(resume)
