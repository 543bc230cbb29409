"""Course ranking for the career advisor view.

Scores every catalog course against the learner's interests and skills:
+3 for each interest tag present in the course tags, +2 for each interest tag
contained in the title, +2 for each course tag the learner already lists as a
skill. Only positively scored courses are kept.
"""

from typing import Iterable, Optional, Sequence

from pydantic import BaseModel

from career_roadmap.engine.tag_scorer import parse_tags
from career_roadmap.models.course import CourseCatalogEntry


TAG_MATCH_POINTS = 3
TITLE_MATCH_POINTS = 2
SKILL_MATCH_POINTS = 2


class ScoredCourse(BaseModel):
    course: CourseCatalogEntry
    score: int


def score_course(
    course: CourseCatalogEntry, interest_tags: Sequence[str], skills: Iterable[str]
) -> int:
    """Score a single course."""
    course_tags = course.normalized_tags()
    title = course.title.lower()
    skill_set = {s.lower() for s in skills}

    total = 0
    for tag in interest_tags:
        if tag in course_tags:
            total += TAG_MATCH_POINTS
        if tag in title:
            total += TITLE_MATCH_POINTS
    for course_tag in course_tags:
        if course_tag in skill_set:
            total += SKILL_MATCH_POINTS
    return total


def rank_courses(
    interests_text: Optional[str],
    skills: Sequence[str],
    catalog: Sequence[CourseCatalogEntry],
    limit: Optional[int] = None,
) -> list[ScoredCourse]:
    """
    Rank catalog courses for a learner.

    Args:
        interests_text: Comma-separated interests
        skills: Learner's listed skills
        catalog: Course catalog entries
        limit: Optional maximum number of results

    Returns:
        Courses with score > 0, highest first. Equal scores keep catalog order.
    """
    tags = parse_tags(interests_text)
    scored = [
        ScoredCourse(course=course, score=score_course(course, tags, skills))
        for course in catalog
    ]
    ranked = sorted(
        (s for s in scored if s.score > 0), key=lambda s: s.score, reverse=True
    )
    return ranked[:limit] if limit is not None else ranked
