"""
Presentation Context

Responsibilities:
- Holds the live document for an editing session (ResumeViewModel)
- Renders previews (markdown, themed HTML) and exports files

Owns: Live document lifecycle, theme templates, export formats
Never: Applies document mutations itself (delegates to ResumeService)
"""

from resume_builder.contexts.presentation.export import export_resume
from resume_builder.contexts.presentation.preview import (
    ThemeRegistry,
    render_html,
    render_markdown,
)
from resume_builder.contexts.presentation.view_model import ResumeViewModel

__all__ = [
    "ResumeViewModel",
    "ThemeRegistry",
    "render_markdown",
    "render_html",
    "export_resume",
]
