"""
Command-line interface for editing the saved resume.

Every command opens a session (loading the saved resume), applies at most one
change through ResumeViewModel, and saves when something changed.

Commands:
    init    - Start a new resume (blank or sample)
    show    - Print the saved resume as YAML
    preview - Print a markdown (or HTML) preview
    themes  - List available themes
    theme   - Change the theme
    remove  - Remove an entry from a list section
    move    - Move an entry within a list section
    export  - Write the resume to a markdown, HTML or YAML file
"""

from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from resume_builder.config import load_settings
from resume_builder.contexts.application.exceptions import IndexOutOfBoundsError, StorageError
from resume_builder.contexts.application.logger import setup_resume_logger
from resume_builder.contexts.domain.models import ResumeTheme
from resume_builder.contexts.domain.sample_data import sample_resume
from resume_builder.contexts.infrastructure.serialization import dump_resume
from resume_builder.contexts.presentation.export import EXPORT_FORMATS, export_resume
from resume_builder.contexts.presentation.preview import render_html, render_markdown
from resume_builder.contexts.presentation.view_model import ResumeViewModel
from resume_builder.session import open_session

app = typer.Typer(
    add_completion=False,
    help="Edit, preview and export your resume",
    invoke_without_command=True,
)


class Section(str, Enum):
    education = "education"
    experience = "experience"
    project = "project"
    skill = "skill"


def _fail(message: str) -> None:
    typer.secho(f"✗ {message}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


def _session(ctx: typer.Context, load: bool = True) -> ResumeViewModel:
    """Open a session with the settings resolved in main()."""
    try:
        return open_session(ctx.obj["settings"], load=load)
    except StorageError as e:
        _fail(f"Could not load resume: {e}")


def _save(view_model: ResumeViewModel) -> None:
    try:
        view_model.save()
    except StorageError as e:
        _fail(f"Could not save resume: {e}")


@app.callback()
def main(
    ctx: typer.Context,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Echo debug logging to the console")
    ] = False,
):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()

    try:
        settings = load_settings()
    except ValueError as e:
        _fail(str(e))

    setup_resume_logger(
        settings.logs_path,
        backend=settings.storage_backend,
        console_level="DEBUG" if verbose else "WARNING",
    )
    ctx.obj = {"settings": settings}


@app.command("init")
def init_command(
    ctx: typer.Context,
    sample: Annotated[
        bool, typer.Option("--sample", help="Start from a filled-in example resume")
    ] = False,
    force: Annotated[
        bool, typer.Option("--force", "-f", help="Overwrite an existing saved resume")
    ] = False,
):
    """
    Start a new resume.

    Examples:\n

        $ resume-builder init --sample

        $ resume-builder init --force   # discard the saved resume
    """
    view_model = _session(ctx, load=False)

    if view_model.has_saved_resume() and not force:
        _fail("A saved resume already exists (use --force to overwrite)")

    view_model.reset(sample_resume() if sample else None)
    _save(view_model)

    typer.secho(f"✓ Created {'sample' if sample else 'blank'} resume", fg=typer.colors.GREEN)


@app.command("show")
def show_command(ctx: typer.Context):
    """Print the saved resume as YAML."""
    view_model = _session(ctx)
    typer.echo(dump_resume(view_model.current()).rstrip())


@app.command("preview")
def preview_command(
    ctx: typer.Context,
    html: Annotated[bool, typer.Option("--html", help="Render themed HTML instead of markdown")] = False,
):
    """Print a preview of the saved resume."""
    resume = _session(ctx).current()
    rendered = render_html(resume) if html else render_markdown(resume)
    typer.echo(rendered.rstrip())


@app.command("themes")
def themes_command(ctx: typer.Context):
    """List available themes (current theme marked with *)."""
    current = _session(ctx).current().theme
    for theme in ResumeTheme.all():
        marker = "*" if theme is current else " "
        typer.echo(f"{marker} {theme.display_name}")


@app.command("theme")
def theme_command(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Theme name (e.g., Modern)")],
):
    """Change the resume theme."""
    try:
        theme = ResumeTheme.from_name(name)
    except ValueError as e:
        raise typer.BadParameter(str(e))

    view_model = _session(ctx)
    view_model.change_theme(theme)
    _save(view_model)
    typer.secho(f"✓ Theme set to {theme.display_name}", fg=typer.colors.GREEN)


@app.command("remove")
def remove_command(
    ctx: typer.Context,
    section: Annotated[Section, typer.Argument(help="List section to edit")],
    index: Annotated[int, typer.Argument(help="Zero-based entry index")],
):
    """Remove one entry from a list section."""
    view_model = _session(ctx)
    remove = getattr(view_model, f"remove_{section.value}")
    try:
        remove(index)
    except IndexOutOfBoundsError as e:
        _fail(str(e))

    _save(view_model)
    typer.secho(f"✓ Removed {section.value} #{index}", fg=typer.colors.GREEN)


@app.command("move")
def move_command(
    ctx: typer.Context,
    section: Annotated[Section, typer.Argument(help="List section to reorder")],
    from_index: Annotated[int, typer.Argument(help="Current zero-based position")],
    to_index: Annotated[int, typer.Argument(help="New zero-based position")],
):
    """Move an entry to a new position within its section."""
    if section is Section.skill:
        raise typer.BadParameter("Skills cannot be reordered", param_hint="SECTION")

    view_model = _session(ctx)
    move = getattr(view_model, f"move_{section.value}")
    try:
        move(from_index, to_index)
    except IndexOutOfBoundsError as e:
        _fail(str(e))

    _save(view_model)
    typer.secho(f"✓ Moved {section.value} #{from_index} to #{to_index}", fg=typer.colors.GREEN)


@app.command("export")
def export_command(
    ctx: typer.Context,
    output: Annotated[Path, typer.Argument(help="Output file", dir_okay=False)],
    fmt: Annotated[
        Optional[str],
        typer.Option(
            "--format",
            help=f"Output format ({', '.join(EXPORT_FORMATS)}); inferred from suffix if omitted",
        ),
    ] = None,
):
    """Export the saved resume to a file."""
    resume = _session(ctx).current()
    try:
        written = export_resume(resume, output, fmt)
    except ValueError as e:
        _fail(str(e))

    typer.secho(f"✓ Exported to {written}", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()
