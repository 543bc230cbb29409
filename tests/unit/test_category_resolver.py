"""
Unit tests for category_resolver module.
"""

import pytest

from career_roadmap.engine.category_resolver import (
    DEFAULT_CATEGORY,
    fallback_flags,
    resolve,
)
from career_roadmap.engine.tag_scorer import parse_tags, score


class TestResolve:
    """Test cases for resolve."""

    def test_highest_score_wins(self):
        assert resolve({"react": 1, "ml": 2.5, "web": 2}, []) == "ml"

    def test_ties_keep_insertion_order(self):
        """Equal scores resolve to the key inserted first."""
        assert resolve({"react": 0.5, "ml": 0.5}, []) == "react"
        assert resolve({"ml": 0.5, "react": 0.5}, []) == "ml"

    def test_empty_scores_fall_back_to_first_tag(self):
        assert resolve({}, ["python", "golang"]) == "python"

    def test_empty_scores_and_tags_use_default(self):
        assert resolve({}, []) == DEFAULT_CATEGORY == "ml"

    @pytest.mark.parametrize(
        "interests",
        ["", "ml, python", "python", "d", "rust, go", "Web Dev, IoT", ",,,"],
    )
    def test_result_is_category_first_tag_or_default(self, interests, taxonomy):
        """The resolver never produces anything outside its three sources."""
        # Arrange
        tags = parse_tags(interests)

        # Act
        primary = resolve(score(interests, "", taxonomy), tags)

        # Assert
        allowed = set(taxonomy) | {DEFAULT_CATEGORY}
        if tags:
            allowed.add(tags[0])
        assert primary in allowed


class TestFallbackFlags:
    """Test cases for fallback_flags."""

    def test_no_flags_when_scores_exist(self):
        assert fallback_flags("ml", {"ml": 1}) == []

    def test_default_category_flag(self):
        assert fallback_flags("ml", {}) == ["default_category"]

    def test_fallback_category_flag(self):
        assert fallback_flags("python", {}) == ["fallback_category"]
