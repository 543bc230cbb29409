"""
Unit tests for recommendation models.
"""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from career_roadmap.models.recommendation import RecommendationResult


def make_result(**overrides) -> RecommendationResult:
    fields = {
        "primary_interest": "ml",
        "roadmap": [f"Month {i}: step" for i in range(1, 7)],
        "generated_at": datetime(2025, 3, 1, tzinfo=timezone.utc),
    }
    fields.update(overrides)
    return RecommendationResult(**fields)


class TestRecommendationFlags:
    """Test cases for data quality flags."""

    def test_known_flags_accepted(self):
        result = make_result(flags=["ambiguous_tag_match", "no_local_courses"])

        assert result.has_flag("ambiguous_tag_match")
        assert not result.has_flag("default_category")

    def test_unknown_flag_rejected(self):
        with pytest.raises(ValidationError, match="Unknown recommendation flag"):
            make_result(flags=["low_confidence"])

    def test_repeated_flag_kept_once(self):
        result = make_result(flags=["no_local_courses", "no_local_courses"])

        assert result.flags == ["no_local_courses"]


def test_roadmap_must_have_six_stages():
    with pytest.raises(ValidationError):
        make_result(roadmap=["Month 1: only one"])
