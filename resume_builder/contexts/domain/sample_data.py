"""Example resume used for demos (`resume-builder init --sample`) and tests."""

from datetime import date

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


def sample_resume() -> Resume:
    """Return a fully populated resume. Each call builds a fresh object."""
    return Resume(
        personal_info=PersonalInfo(
            name="John Doe",
            email="john.doe@example.com",
            phone="123-456-7890",
            website="https://johndoe.dev",
            linkedin="johndoe",
            github="johndoe",
            location="New York, NY",
            summary=(
                "Experienced software engineer with a passion for building impactful products. "
                "Skilled in designing, developing, and deploying scalable applications."
            ),
        ),
        education=[
            Education(
                institution="State University",
                degree="B.Sc.",
                field_of_study="Computer Science",
                start_date="2015-09",
                end_date="2019-06",
                location="New York, NY",
                description="Graduated with honors.",
                gpa="3.8",
            )
        ],
        experience=[
            Experience(
                company="Tech Corp",
                position="Software Engineer",
                start_date="2019-07",
                end_date="2022-08",
                location="Remote",
                description="Worked on backend systems.",
                achievements=["Improved API performance by 30%"],
                is_current=False,
            ),
            Experience(
                company="Startup Inc",
                position="Senior Engineer",
                start_date="2022-09",
                location="New York, NY",
                description="Leading the platform team.",
                achievements=["Shipped the v2 billing pipeline", "Mentored three engineers"],
                is_current=True,
            ),
        ],
        skills=Skills(
            skill_list=[
                Skill(name="Python", level=5, category="Languages"),
                Skill(name="Rust", level=4, category="Languages"),
                Skill(name="React", level=3, category="Frameworks"),
            ]
        ),
        projects=[
            Project(
                name="Open Source CLI",
                role="Lead Developer",
                description="A CLI tool for productivity.",
                start_date=date(2021, 3, 1),
                end_date=None,
                technologies=["Python", "CLI"],
                url="https://github.com/johndoe/cli",
                achievements=["500+ GitHub stars"],
            )
        ],
        theme=ResumeTheme.PROFESSIONAL,
    )
