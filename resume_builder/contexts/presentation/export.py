"""
Resume Export

Writes the resume to a file as markdown, themed HTML or the YAML snapshot
format. There is no PDF output.
"""

from pathlib import Path

from resume_builder.contexts.application.logger import _log_info
from resume_builder.contexts.domain.models import Resume
from resume_builder.contexts.infrastructure.serialization import dump_resume
from resume_builder.contexts.presentation.preview import render_html, render_markdown

EXPORT_FORMATS = {
    "markdown": render_markdown,
    "html": render_html,
    "yaml": dump_resume,
}

FORMAT_SUFFIXES = {
    ".md": "markdown",
    ".markdown": "markdown",
    ".html": "html",
    ".htm": "html",
    ".yaml": "yaml",
    ".yml": "yaml",
}


def infer_format(output_path: Path) -> str:
    """
    Guess the export format from a file suffix.

    Raises:
        ValueError: If the suffix is not recognized
    """
    fmt = FORMAT_SUFFIXES.get(output_path.suffix.lower())
    if fmt is None:
        raise ValueError(
            f"Cannot infer export format from '{output_path.name}'. "
            f"Use one of: {', '.join(sorted(FORMAT_SUFFIXES))}"
        )
    return fmt


def export_resume(resume: Resume, output_path: Path, fmt: str = None) -> Path:
    """
    Render the resume and write it to output_path.

    Args:
        resume: Document to export
        output_path: Destination file (parent directories are created)
        fmt: "markdown", "html" or "yaml"; inferred from the suffix when omitted

    Returns:
        Path written

    Raises:
        ValueError: If fmt is unknown or cannot be inferred
    """
    output_path = Path(output_path)
    if fmt is None:
        fmt = infer_format(output_path)

    renderer = EXPORT_FORMATS.get(fmt)
    if renderer is None:
        raise ValueError(f"Invalid export format: {fmt}. Must be one of: {', '.join(EXPORT_FORMATS)}")

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(renderer(resume), encoding="utf-8")
    _log_info(f"Exported resume as {fmt}: {output_path}")
    return output_path
