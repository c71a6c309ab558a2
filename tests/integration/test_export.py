"""Integration tests for exporting a resume to files."""

import pytest

from resume_builder.contexts.domain.models import ResumeTheme
from resume_builder.contexts.domain.sample_data import sample_resume
from resume_builder.contexts.infrastructure.serialization import load_resume_text
from resume_builder.contexts.presentation.export import export_resume, infer_format


@pytest.mark.integration
def test_export_markdown(tmp_path):
    output = export_resume(sample_resume(), tmp_path / "out" / "resume.md")

    text = output.read_text(encoding="utf-8")
    assert output == tmp_path / "out" / "resume.md"
    assert text.startswith("# John Doe")


@pytest.mark.integration
def test_export_html_uses_theme(tmp_path):
    resume = sample_resume()
    resume.theme = ResumeTheme.MINIMAL

    output = export_resume(resume, tmp_path / "resume.html")

    html = output.read_text(encoding="utf-8")
    assert html.startswith("<!DOCTYPE html>")
    assert 'class="theme-minimal"' in html


@pytest.mark.integration
def test_export_yaml_can_be_loaded_back(tmp_path):
    output = export_resume(sample_resume(), tmp_path / "resume.txt", fmt="yaml")

    assert load_resume_text(output.read_text(encoding="utf-8")) == sample_resume()


@pytest.mark.integration
def test_unknown_format(tmp_path):
    with pytest.raises(ValueError, match="Invalid export format"):
        export_resume(sample_resume(), tmp_path / "resume.md", fmt="pdf")

    assert not (tmp_path / "resume.md").exists()


@pytest.mark.integration
@pytest.mark.parametrize(
    "name,expected",
    [("cv.md", "markdown"), ("cv.HTML", "html"), ("cv.yml", "yaml")],
)
def test_infer_format(tmp_path, name, expected):
    assert infer_format(tmp_path / name) == expected


@pytest.mark.integration
def test_infer_format_rejects_pdf(tmp_path):
    with pytest.raises(ValueError, match="Cannot infer export format"):
        infer_format(tmp_path / "resume.pdf")
