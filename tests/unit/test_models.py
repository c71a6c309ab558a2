"""Unit tests for resume document data structures."""

from datetime import date

import pytest

from resume_builder.contexts.domain.models import (
    Education,
    Experience,
    Project,
    Resume,
    ResumeTheme,
    Skill,
    Skills,
    parse_calendar_date,
)
from resume_builder.contexts.domain.sample_data import sample_resume


class TestResumeTheme:
    """Tests for the theme enumeration."""

    @pytest.mark.unit
    def test_all_in_declaration_order(self):
        assert ResumeTheme.all() == [
            ResumeTheme.PROFESSIONAL,
            ResumeTheme.MINIMAL,
            ResumeTheme.CREATIVE,
            ResumeTheme.MODERN,
        ]

    @pytest.mark.unit
    def test_display_names(self):
        assert [theme.display_name for theme in ResumeTheme.all()] == [
            "Professional",
            "Minimal",
            "Creative",
            "Modern",
        ]

    @pytest.mark.unit
    def test_from_name_ignores_case(self):
        assert ResumeTheme.from_name("modern") is ResumeTheme.MODERN
        assert ResumeTheme.from_name("  CREATIVE ") is ResumeTheme.CREATIVE

    @pytest.mark.unit
    def test_from_name_unknown(self):
        with pytest.raises(ValueError, match="Unknown theme"):
            ResumeTheme.from_name("Baroque")


class TestEmptyResume:
    """Tests for the default document."""

    @pytest.mark.unit
    def test_defaults(self):
        resume = Resume()

        assert resume.personal_info.name == ""
        assert resume.education == []
        assert resume.experience == []
        assert resume.projects == []
        assert resume.skills.skill_list == []
        assert resume.theme is ResumeTheme.PROFESSIONAL

    @pytest.mark.unit
    def test_defaults_do_not_share_lists(self):
        first = Resume()
        second = Resume()
        first.education.append(Education(institution="State University"))

        assert second.education == []


class TestSkill:
    """Tests for rated skills."""

    @pytest.mark.unit
    @pytest.mark.parametrize("level", [0, 3, 5])
    def test_valid_levels(self, level):
        assert Skill(name="Python", level=level).level == level

    @pytest.mark.unit
    @pytest.mark.parametrize("level", [-1, 6, 2.5, True])
    def test_invalid_levels(self, level):
        with pytest.raises(ValueError, match="Skill level"):
            Skill(name="Python", level=level)


class TestLegacySkillsMigration:
    """Tests for reading the older category-map skills shape."""

    @pytest.mark.unit
    def test_categories_become_unrated_skills(self):
        skills = Skills.from_dict(
            {"categories": {"Languages": ["Python", "Rust"], "Tools": ["Git"]}}
        )

        assert skills.skill_list == [
            Skill("Python", 0, "Languages"),
            Skill("Rust", 0, "Languages"),
            Skill("Git", 0, "Tools"),
        ]

    @pytest.mark.unit
    def test_skill_list_wins_over_categories(self):
        skills = Skills.from_dict(
            {
                "skill_list": [{"name": "Go", "level": 2}],
                "categories": {"Languages": ["Python"]},
            }
        )

        assert skills.skill_list == [Skill("Go", 2)]

    @pytest.mark.unit
    def test_migrated_document_only_writes_skill_list(self):
        resume = Resume.from_dict({"skills": {"categories": {"Languages": ["Python"]}}})

        assert resume.to_dict()["skills"] == {
            "skill_list": [{"name": "Python", "level": 0, "category": "Languages"}]
        }


class TestCalendarDates:
    """Tests for optional project dates."""

    @pytest.mark.unit
    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_empty_is_none(self, value):
        assert parse_calendar_date(value) is None

    @pytest.mark.unit
    def test_iso_date(self):
        assert parse_calendar_date("2021-03-15") == date(2021, 3, 15)

    @pytest.mark.unit
    def test_month_only_maps_to_first_of_month(self):
        assert parse_calendar_date("2021-03") == date(2021, 3, 1)

    @pytest.mark.unit
    def test_date_passthrough(self):
        assert parse_calendar_date(date(2020, 1, 2)) == date(2020, 1, 2)

    @pytest.mark.unit
    def test_free_text_rejected(self):
        with pytest.raises(ValueError, match="Unrecognized date"):
            parse_calendar_date("Spring 2021")


class TestDictConversion:
    """Tests for to_dict()/from_dict()."""

    @pytest.mark.unit
    def test_sample_resume_survives_dict_conversion(self):
        resume = sample_resume()

        assert Resume.from_dict(resume.to_dict()) == resume

    @pytest.mark.unit
    def test_project_dates_written_as_iso_strings(self):
        project = Project(name="CLI", start_date=date(2021, 3, 1))

        data = project.to_dict()

        assert data["start_date"] == "2021-03-01"
        assert data["end_date"] is None

    @pytest.mark.unit
    def test_missing_sections_take_defaults(self):
        resume = Resume.from_dict({"personal_info": {"name": "Jane Roe"}})

        assert resume.personal_info.name == "Jane Roe"
        assert resume.personal_info.email == ""
        assert resume.experience == []
        assert resume.theme is ResumeTheme.PROFESSIONAL

    @pytest.mark.unit
    def test_unknown_keys_ignored(self):
        resume = Resume.from_dict({"theme": "Modern", "layout": "two-column"})

        assert resume.theme is ResumeTheme.MODERN

    @pytest.mark.unit
    def test_experience_flags_and_lists(self):
        experience = Experience.from_dict(
            {"company": "Tech Corp", "achievements": ["Shipped v2"], "is_current": True}
        )

        assert experience.achievements == ["Shipped v2"]
        assert experience.is_current is True
        assert experience.end_date == ""

    @pytest.mark.unit
    def test_numeric_text_coerced_to_string(self):
        education = Education.from_dict({"institution": "State University", "gpa": 3.8})

        assert education.gpa == "3.8"

    @pytest.mark.unit
    def test_wrong_section_shape_rejected(self):
        with pytest.raises(TypeError, match="education"):
            Resume.from_dict({"education": {"institution": "State University"}})

    @pytest.mark.unit
    def test_non_boolean_flag_rejected(self):
        with pytest.raises(TypeError, match="is_current"):
            Experience.from_dict({"is_current": "yes"})
