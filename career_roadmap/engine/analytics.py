"""Career analytics summary.

Aggregates the stored profile, the recommendation log and the course catalog
into the numbers shown on the analytics view.
"""

from datetime import datetime
from typing import Sequence

from pydantic import BaseModel, Field

from career_roadmap.models.course import CourseCatalogEntry
from career_roadmap.models.profile import UserProfile
from career_roadmap.models.recommendation import RecommendationLogEntry


RECENT_LOG_COUNT = 10
RECENT_SKILL_COUNT = 4


class RecentInteraction(BaseModel):
    """Condensed log entry for display."""

    entry_id: str
    timestamp: datetime
    interests: str
    primary_interest: str
    skills: list[str] = Field(default_factory=list)


class CareerAnalytics(BaseModel):
    courses_completed: int
    total_courses: int
    skills_acquired: int
    completion_rate: int  # whole percent
    recommendations_generated: int
    recent: list[RecentInteraction] = Field(default_factory=list)


def completion_rate(completed: int, total: int) -> int:
    """Rounded completion percentage; 0 when the catalog is empty."""
    if total <= 0:
        return 0
    # halves round up
    return int(completed * 100 / total + 0.5)


def summarize(
    profile: UserProfile,
    logs: Sequence[RecommendationLogEntry],
    catalog: Sequence[CourseCatalogEntry],
) -> CareerAnalytics:
    """
    Build the analytics summary.

    Args:
        profile: Stored learner profile
        logs: Recommendation log, newest first
        catalog: Course catalog

    Returns:
        CareerAnalytics with the ten most recent interactions
    """
    completed = len(profile.completed_courses)
    total = len(catalog)

    recent = [
        RecentInteraction(
            entry_id=entry.id,
            timestamp=entry.timestamp,
            interests=entry.inputs.interests,
            primary_interest=entry.result.primary_interest,
            skills=entry.result.skills[:RECENT_SKILL_COUNT],
        )
        for entry in logs[:RECENT_LOG_COUNT]
    ]

    return CareerAnalytics(
        courses_completed=completed,
        total_courses=total,
        skills_acquired=len(profile.skills),
        completion_rate=completion_rate(completed, total),
        recommendations_generated=len(logs),
        recent=recent,
    )
