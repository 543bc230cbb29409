"""
Learner Profile Data Models
"""

from enum import Enum
from typing import Any, List

from pydantic import AliasChoices, BaseModel, Field, field_validator


class SkillLevel(str, Enum):
    """Self-reported skill level selecting the roadmap template."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class InterestProfile(BaseModel):
    """Inputs for a single recommendation request.

    Built per invocation from editable form fields. Only persisted as the
    ``inputs`` of a RecommendationLogEntry.
    """

    branch: str = ""
    year: str = ""
    interests: str = ""  # comma-separated free text
    skill_level: SkillLevel = SkillLevel.BEGINNER
    location_preference: str = ""


class UserProfile(BaseModel):
    """Stored learner profile used by the course ranker, resume and analytics."""

    name: str = ""
    year: str = ""
    branch: str = ""
    interests: str = ""
    skills: List[str] = Field(default_factory=list)
    summary: str = ""
    location: str = ""
    completed_courses: List[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("completed_courses", "completedCourses"),
    )

    @field_validator("skills", "completed_courses", mode="before")
    @classmethod
    def null_list_to_empty(cls, v: Any) -> Any:
        if v is None:
            return []
        return v

    def add_skill(self, skill: str) -> bool:
        """Add a skill unless it is blank or already present (case-insensitive).

        Args:
            skill: Skill text as typed by the learner

        Returns:
            True if the skill was added
        """
        value = (skill or "").strip()
        if not value:
            return False

        lower = value.lower()
        if any(existing.lower() == lower for existing in self.skills):
            return False

        self.skills.append(value)
        return True

    def remove_skill(self, skill: str) -> bool:
        """Remove a skill by exact match.

        Returns:
            True if anything was removed
        """
        remaining = [s for s in self.skills if s != skill]
        removed = len(remaining) != len(self.skills)
        self.skills = remaining
        return removed

    def to_interest_profile(self, skill_level: SkillLevel = SkillLevel.BEGINNER) -> InterestProfile:
        """Prefill a recommendation request from the stored profile."""
        return InterestProfile(
            branch=self.branch,
            year=self.year,
            interests=self.interests,
            skill_level=skill_level,
            location_preference=self.location,
        )
