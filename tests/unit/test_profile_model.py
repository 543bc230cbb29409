"""
Unit tests for learner profile models.
"""

import pytest
from pydantic import ValidationError

from career_roadmap.models.profile import InterestProfile, SkillLevel, UserProfile


class TestInterestProfile:
    """Test cases for InterestProfile."""

    def test_defaults(self):
        profile = InterestProfile()

        assert profile.interests == ""
        assert profile.skill_level == SkillLevel.BEGINNER

    def test_skill_level_from_string(self):
        assert InterestProfile(skill_level="advanced").skill_level == SkillLevel.ADVANCED

    def test_invalid_skill_level(self):
        with pytest.raises(ValidationError):
            InterestProfile(skill_level="expert")


class TestUserProfileSkills:
    """Test cases for UserProfile skill editing."""

    def test_add_skill_trims(self):
        profile = UserProfile()

        assert profile.add_skill("  Python ")
        assert profile.skills == ["Python"]

    def test_add_skill_ignores_case_insensitive_duplicates(self):
        profile = UserProfile(skills=["Python"])

        assert not profile.add_skill("python")
        assert profile.skills == ["Python"]

    def test_add_skill_ignores_blank(self):
        profile = UserProfile()

        assert not profile.add_skill("   ")
        assert not profile.add_skill(None)
        assert profile.skills == []

    def test_remove_skill_exact_match(self):
        profile = UserProfile(skills=["Python", "SQL"])

        assert not profile.remove_skill("python")
        assert profile.remove_skill("Python")
        assert profile.skills == ["SQL"]


def test_to_interest_profile_prefills_fields():
    # Arrange
    profile = UserProfile(branch="ECE", year="2", interests="iot", location="Pune")

    # Act
    inputs = profile.to_interest_profile(SkillLevel.INTERMEDIATE)

    # Assert
    assert inputs == InterestProfile(
        branch="ECE",
        year="2",
        interests="iot",
        skill_level="intermediate",
        location_preference="Pune",
    )


def test_completed_courses_accepts_camel_case_key():
    profile = UserProfile.model_validate({"completedCourses": ["c1"], "skills": None})

    assert profile.completed_courses == ["c1"]
    assert profile.skills == []
    assert UserProfile(completed_courses=["c2"]).completed_courses == ["c2"]
