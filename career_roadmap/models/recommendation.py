"""
Recommendation Models

Pydantic models for generated recommendations and the per-user log.
"""

from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, field_validator

from career_roadmap.models.course import CourseLink
from career_roadmap.models.profile import InterestProfile


# Data quality flag constants
RECOMMENDATION_FLAGS = {
    "ambiguous_tag_match",  # A tag matched more than one category
    "fallback_category",  # Primary interest is a raw tag, not a known category
    "default_category",  # No interests or priors, global default used
    "no_local_courses",  # Local catalog contributed no courses
}


class RepoLink(BaseModel):
    """Project repository suggestion."""

    name: str
    url: str


class EventLink(BaseModel):
    """Hackathon or event listing."""

    title: str
    url: str


class RecommendationResult(BaseModel):
    """Combined output of one recommendation run. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    primary_interest: str
    skills: list[str] = Field(default_factory=list)
    courses: list[CourseLink] = Field(default_factory=list, max_length=4)
    project_repos: list[RepoLink] = Field(default_factory=list, max_length=3)
    project_ideas: list[str] = Field(default_factory=list)
    community_groups: list[str] = Field(default_factory=list, max_length=3)
    events: list[EventLink] = Field(default_factory=list, max_length=5)
    roadmap: list[str] = Field(..., min_length=6, max_length=6)
    generated_at: datetime
    flags: list[str] = Field(default_factory=list)

    @field_validator("flags")
    @classmethod
    def validate_flags(cls, v: list[str]) -> list[str]:
        """Only known data quality flags, each at most once."""
        unknown = [f for f in v if f not in RECOMMENDATION_FLAGS]
        if unknown:
            raise ValueError(f"Unknown recommendation flag(s): {unknown}")
        return list(dict.fromkeys(v))

    def has_flag(self, flag: str) -> bool:
        """Check whether a data quality flag was raised."""
        return flag in self.flags


class RecommendationLogEntry(BaseModel):
    """One persisted recommendation, newest entries first in the log."""

    id: str
    timestamp: datetime
    user_id: str
    inputs: InterestProfile
    result: RecommendationResult
