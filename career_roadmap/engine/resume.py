"""Plain-text resume generation from a stored profile."""

import re
from typing import Sequence

from career_roadmap.engine.course_ranker import ScoredCourse
from career_roadmap.models.profile import UserProfile


RESUME_COURSE_COUNT = 3


def generate_resume_text(
    profile: UserProfile, ranked_courses: Sequence[ScoredCourse] = ()
) -> str:
    """
    Render a short resume.

    Args:
        profile: Stored learner profile
        ranked_courses: Output of rank_courses; the top three titles are listed

    Returns:
        Resume text with name, branch/year, summary, skills and courses
    """
    skills = ", ".join(profile.skills)
    top_courses = "; ".join(
        scored.course.title for scored in ranked_courses[:RESUME_COURSE_COUNT]
    )
    return (
        f"Name: {profile.name}\n"
        f"Branch/Year: {profile.branch} {profile.year}\n"
        f"Summary: {profile.summary}\n"
        f"Skills: {skills}\n"
        f"Recommended Courses: {top_courses}"
    )


def resume_filename(profile: UserProfile) -> str:
    """File name for a downloaded resume; whitespace and path separators become underscores."""
    safe_name = re.sub(r"[\s/\\]+", "_", profile.name or "resume")
    return f"{safe_name}.txt"
