"""Content lookup for a resolved primary interest.

Combines the learner's local course catalog with the curated content table.
Pure: identical inputs always produce an equal ContentBundle.
"""

from typing import Optional, Sequence

from pydantic import BaseModel, Field

from career_roadmap.models.config import RecommendationLimits
from career_roadmap.models.content import CuratedContent
from career_roadmap.models.course import CourseCatalogEntry, CourseLink
from career_roadmap.models.profile import SkillLevel
from career_roadmap.models.recommendation import EventLink, RepoLink


class ContentBundle(BaseModel):
    """Everything the lookup step contributes to a recommendation."""

    skills: list[str] = Field(default_factory=list)
    courses: list[CourseLink] = Field(default_factory=list)
    project_repos: list[RepoLink] = Field(default_factory=list)
    project_ideas: list[str] = Field(default_factory=list)
    community_groups: list[str] = Field(default_factory=list)
    events: list[EventLink] = Field(default_factory=list)
    local_course_count: int = 0


def select_skills(
    category: str, content: CuratedContent, skill_level: SkillLevel | str
) -> list[str]:
    """Skill bundle for the category, with advanced skills past beginner level."""
    entry = content.category(category)
    bundle = content.skill_bundles.get(entry.skill_bundle) if entry and entry.skill_bundle else None
    if bundle is None:
        return list(content.default_skills)

    skills = list(bundle.core)
    if skill_level != SkillLevel.BEGINNER:
        skills.extend(bundle.advanced)
    return skills


def select_project_ideas(category: str, content: CuratedContent) -> list[str]:
    entry = content.category(category)
    if entry is None or not entry.project_ideas:
        return []
    return list(content.project_ideas.get(entry.project_ideas, []))


def course_matches_tags(course: CourseCatalogEntry, tags: Sequence[str]) -> bool:
    """A local course matches when its tags intersect the user's tags, or its
    title contains one of them."""
    lowered = [t.lower() for t in tags]
    course_tags = course.normalized_tags()
    if any(t in lowered for t in course_tags):
        return True
    title = course.title.lower()
    return any(t in title for t in lowered)


def pick_local_courses(
    tags: Sequence[str], local_catalog: Sequence[CourseCatalogEntry], limit: int = 3
) -> list[CourseLink]:
    """
    Scan the local catalog in stored order for courses matching the tags.

    Args:
        tags: Parsed interest tags
        local_catalog: User-contributed courses
        limit: Maximum matches to return

    Returns:
        Course links titled "<title> (<platform>)", url "#" when missing
    """
    picks: list[CourseLink] = []
    if not tags:
        return picks

    for course in local_catalog:
        if course_matches_tags(course, tags):
            picks.append(
                CourseLink(
                    title=f"{course.title} ({course.platform or 'course'})",
                    url=course.url or "#",
                )
            )
        if len(picks) >= limit:
            break
    return picks


def lookup(
    category: str,
    tags: Sequence[str],
    local_catalog: Sequence[CourseCatalogEntry],
    content: CuratedContent,
    skill_level: SkillLevel | str = SkillLevel.BEGINNER,
    limits: Optional[RecommendationLimits] = None,
) -> ContentBundle:
    """
    Retrieve skills, courses, repos, groups and events for a category.

    Local catalog matches come first, then curated courses backfill up to the
    course cap. Unknown categories yield empty sections (and the default skill
    bundle); nothing here raises for missing content.

    Args:
        category: Primary interest
        tags: Parsed interest tags
        local_catalog: User-contributed courses
        content: Curated content table
        skill_level: Learner's skill level
        limits: Section caps (defaults to RecommendationLimits())

    Returns:
        ContentBundle
    """
    limits = limits or RecommendationLimits()
    entry = content.category(category)

    local_courses = pick_local_courses(tags, local_catalog, limits.max_local_courses)
    curated_courses = list(entry.courses) if entry else []
    courses = (local_courses + curated_courses)[: limits.max_courses]

    repos = [
        RepoLink(name=repo, url=f"{content.repo_host}{repo}")
        for repo in (entry.repos if entry else [])[: limits.max_repos]
    ]
    groups = list(entry.groups if entry else [])[: limits.max_groups]
    events = list(content.events)[: limits.max_events]

    return ContentBundle(
        skills=select_skills(category, content, skill_level),
        courses=courses,
        project_repos=repos,
        project_ideas=select_project_ideas(category, content),
        community_groups=groups,
        events=events,
        local_course_count=len(local_courses),
    )
