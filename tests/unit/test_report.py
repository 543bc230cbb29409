"""
Unit tests for console report rendering.
"""

from datetime import datetime, timezone
from io import StringIO

from rich.console import Console

from career_roadmap.engine.analytics import CareerAnalytics, RecentInteraction
from career_roadmap.models.course import CourseLink
from career_roadmap.models.recommendation import (
    RECOMMENDATION_FLAGS,
    RecommendationResult,
    RepoLink,
)
from career_roadmap.utils.report import (
    FLAG_NOTES,
    render_analytics,
    render_recommendation,
)


GENERATED = datetime(2025, 3, 1, 9, 30, tzinfo=timezone.utc)


def capture() -> Console:
    return Console(file=StringIO(), width=200, color_system=None)


def test_render_recommendation_sections():
    # Arrange
    console = capture()
    result = RecommendationResult(
        primary_interest="ml",
        skills=["Python", "Pandas"],
        courses=[CourseLink(title="Intro [ML]", url="https://example.com")],
        project_repos=[RepoLink(name="a/b", url="https://github.com/a/b")],
        roadmap=[f"Month {i}: step {i}" for i in range(1, 7)],
        generated_at=GENERATED,
        flags=["no_local_courses"],
    )

    # Act
    render_recommendation(result, console=console)

    # Assert
    output = console.file.getvalue()
    assert "Primary focus: ml" in output
    assert "Skills to learn: Python, Pandas" in output
    assert "6. Month 6: step 6" in output
    assert "* Intro [ML] <https://example.com>" in output
    assert "* a/b <https://github.com/a/b>" in output
    assert "* no teacher-added courses matched yet" in output
    assert "2025-03-01T09:30:00+00:00" in output


def test_render_recommendation_empty_sections_use_placeholder():
    console = capture()
    result = RecommendationResult(
        primary_interest="python",
        roadmap=[f"Month {i}: x" for i in range(1, 7)],
        generated_at=GENERATED,
    )

    render_recommendation(result, console=console)

    output = console.file.getvalue()
    assert "Skills to learn: -" in output
    assert "Notes:" not in output


def test_every_flag_has_a_note():
    assert set(FLAG_NOTES) == RECOMMENDATION_FLAGS


def test_notes_follow_flag_order_independent_of_result():
    console = capture()
    result = RecommendationResult(
        primary_interest="rust",
        roadmap=[f"Month {i}: x" for i in range(1, 7)],
        generated_at=GENERATED,
        flags=["no_local_courses", "fallback_category"],
    )

    render_recommendation(result, console=console)

    output = console.file.getvalue()
    assert output.index(FLAG_NOTES["fallback_category"]) < output.index(
        FLAG_NOTES["no_local_courses"]
    )


def test_render_analytics_with_recent():
    # Arrange
    console = capture()
    analytics = CareerAnalytics(
        courses_completed=1,
        total_courses=4,
        skills_acquired=3,
        completion_rate=25,
        recommendations_generated=2,
        recent=[
            RecentInteraction(
                entry_id="e1",
                timestamp=GENERATED,
                interests="ml, python",
                primary_interest="ml",
                skills=["Python", "Pandas"],
            )
        ],
    )

    # Act
    render_analytics(analytics, console=console)

    # Assert
    output = console.file.getvalue()
    assert "Career Analytics" in output
    assert "25%" in output
    assert "2025-03-01 09:30" in output
    assert "ml, python" in output


def test_render_analytics_without_recent():
    console = capture()
    analytics = CareerAnalytics(
        courses_completed=0,
        total_courses=0,
        skills_acquired=0,
        completion_rate=0,
        recommendations_generated=0,
    )

    render_analytics(analytics, console=console)

    assert "No recommendations yet" in console.file.getvalue()
