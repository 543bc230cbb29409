"""
Unit tests for analytics module.
"""

from datetime import datetime, timedelta, timezone

import pytest

from career_roadmap.engine.analytics import completion_rate, summarize
from career_roadmap.models.profile import InterestProfile, UserProfile
from career_roadmap.models.recommendation import (
    RecommendationLogEntry,
    RecommendationResult,
)


START = datetime(2025, 1, 1, tzinfo=timezone.utc)


def make_entry(i: int) -> RecommendationLogEntry:
    return RecommendationLogEntry(
        id=f"e{i}",
        timestamp=START - timedelta(hours=i),
        user_id="u1",
        inputs=InterestProfile(interests=f"interest {i}"),
        result=RecommendationResult(
            primary_interest="ml",
            skills=["Python", "Pandas", "NumPy", "scikit-learn", "PyTorch / TensorFlow"],
            roadmap=[f"Month {m}: step" for m in range(1, 7)],
            generated_at=START,
        ),
    )


@pytest.mark.parametrize(
    "completed,total,expected",
    [(0, 0, 0), (1, 3, 33), (2, 3, 67), (1, 8, 13), (1, 200, 1), (3, 3, 100)],
)
def test_completion_rate(completed, total, expected):
    assert completion_rate(completed, total) == expected


def test_summarize_counts(local_catalog):
    # Arrange
    profile = UserProfile(skills=["Python", "SQL", "Git"], completed_courses=["c1"])
    logs = [make_entry(i) for i in range(12)]

    # Act
    summary = summarize(profile, logs, local_catalog)

    # Assert
    assert summary.courses_completed == 1
    assert summary.total_courses == 4
    assert summary.skills_acquired == 3
    assert summary.completion_rate == 25
    assert summary.recommendations_generated == 12


def test_summarize_recent_is_newest_ten(local_catalog):
    logs = [make_entry(i) for i in range(12)]

    summary = summarize(UserProfile(), logs, local_catalog)

    assert [r.entry_id for r in summary.recent] == [f"e{i}" for i in range(10)]
    assert summary.recent[0].interests == "interest 0"
    assert len(summary.recent[0].skills) == 4


def test_summarize_empty():
    summary = summarize(UserProfile(), [], [])

    assert summary.completion_rate == 0
    assert summary.recent == []
