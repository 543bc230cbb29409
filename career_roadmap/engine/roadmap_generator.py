"""Six-month roadmap templates per skill level."""

from typing import Optional

from career_roadmap.models.profile import SkillLevel
from career_roadmap.utils.logger import get_logger


ROADMAP_STAGES = 6
GENERIC_FIRST_COURSE = "basic programming course"

ROADMAP_TEMPLATES: dict[SkillLevel, list[str]] = {
    SkillLevel.BEGINNER: [
        "Month 1: Finish 1 foundational course ({top_course}) and practice basics.",
        "Month 2: Implement 1 mini project (see ideas) and push to GitHub.",
        "Month 3: Take an intermediate course and start participating in community (LinkedIn groups, GitHub).",
        "Month 4: Improve project, make a portfolio page and start applying to small internships/hackathons.",
        "Month 5: Target 3 internship applications; prepare resume & LinkedIn.",
        "Month 6: Join hackathons and aim for mentorship/real-world contributions.",
    ],
    SkillLevel.INTERMEDIATE: [
        "Month 1: Complete 1 intermediate course and add advanced features to an existing project.",
        "Month 2: Publish project with README + demo; start applying to internships.",
        "Month 3: Join 1 hackathon or open-source contribution.",
        "Month 4: Build a capstone project and document outcomes.",
        "Month 5: Apply to targeted internships / research positions.",
        "Month 6: Network on LinkedIn; ask mentors for referrals.",
    ],
    SkillLevel.ADVANCED: [
        "Month 1: Polish portfolio and complete an advanced specialization.",
        "Month 2: Contribute to open-source and lead a small project.",
        "Month 3: Target internships at preferred companies; prepare system design / interviews.",
        "Month 4: Take leadership in a project or research.",
        "Month 5: Apply to internships and seek mentor referrals.",
        "Month 6: Interview preparation and finalize offers.",
    ],
}


def generate(
    skill_level: SkillLevel | str,
    category: str,
    top_course_title: Optional[str] = None,
    correlation_id: Optional[str] = None,
) -> list[str]:
    """
    Build the six-stage roadmap for a skill level.

    Args:
        skill_level: beginner, intermediate or advanced. Anything else gets
            the advanced template.
        category: Primary interest the roadmap is generated for
        top_course_title: Title of the first recommended course, if any
        correlation_id: Correlation ID for logging

    Returns:
        Exactly six month-labelled stages
    """
    try:
        level = SkillLevel(skill_level)
    except ValueError:
        level = SkillLevel.ADVANCED

    top_course = top_course_title or GENERIC_FIRST_COURSE
    stages = [stage.format(top_course=top_course) for stage in ROADMAP_TEMPLATES[level]]

    logger = get_logger(
        correlation_id=correlation_id,
        phase="recommendation",
        component="roadmap_generator",
    )
    logger.debug(
        "Roadmap generated",
        skill_level=level.value,
        category=category,
        top_course=top_course,
    )

    return stages
