"""
Unit tests for tag_scorer module.
"""

from career_roadmap.engine.tag_scorer import (
    find_ambiguous_tags,
    parse_tags,
    score,
    score_tags,
    tag_matches,
)


class TestParseTags:
    """Test cases for parse_tags."""

    def test_splits_trims_and_lowercases(self):
        assert parse_tags(" ML , Python,React ") == ["ml", "python", "react"]

    def test_drops_empty_tokens(self):
        assert parse_tags("ml,, ,python,") == ["ml", "python"]

    def test_empty_and_none_yield_no_tags(self):
        assert parse_tags("") == []
        assert parse_tags(None) == []


class TestTagMatches:
    """Test cases for tag_matches."""

    def test_substring_mode_matches_both_directions(self):
        assert tag_matches("react native", "react", [], "substring")
        assert tag_matches("da", "data", [], "substring")

    def test_substring_mode_ignores_synonyms(self):
        assert not tag_matches("machine learning", "ml", ["machine learning"], "substring")

    def test_exact_mode_uses_key_and_synonyms(self):
        assert tag_matches("ml", "ml", ["machine learning"], "exact")
        assert tag_matches("machine learning", "ml", ["machine learning"], "exact")
        assert not tag_matches("da", "data", ["data science"], "exact")

    def test_empty_tag_never_matches(self):
        assert not tag_matches("", "ml", [], "substring")


class TestScore:
    """Test cases for score and score_tags."""

    def test_ml_python_with_cse_branch(self, taxonomy):
        """Tag match plus branch prior puts ml ahead of react."""
        # Act
        scores = score("ml, python", "CSE", taxonomy)

        # Assert
        assert scores == {"ml": 1.5, "react": 0.5}

    def test_empty_input_yields_empty_map(self, taxonomy):
        assert score("", "", taxonomy) == {}

    def test_ece_branch_prior(self, taxonomy):
        assert score("", "B.Tech ECE", taxonomy) == {"embedded": 1}

    def test_branch_prior_is_case_insensitive(self, taxonomy):
        assert score("", "cse", taxonomy) == {"ml": 0.5, "react": 0.5}

    def test_partial_tag_matches_several_categories(self, taxonomy):
        """'d' is contained in several keys and votes for each of them."""
        scores = score("d", "", taxonomy)

        assert list(scores) == ["frontend", "dsp", "embedded", "data", "ds"]
        assert all(value == 1 for value in scores.values())

    def test_insertion_order_follows_first_increment(self, taxonomy):
        """Keys appear in tag order, then taxonomy order, then priors."""
        scores = score_tags(["web", "ml"], "ECE", taxonomy)

        assert list(scores) == ["web", "ml", "embedded"]

    def test_repeated_tags_accumulate(self, taxonomy):
        assert score("react, react", "", taxonomy)["react"] == 2

    def test_exact_mode_uses_synonyms(self, taxonomy):
        scores = score("Machine Learning, data structures", "", taxonomy, mode="exact")

        assert scores == {"ml": 1, "ds": 1}

    def test_exact_mode_rejects_partial_words(self, taxonomy):
        assert score("da, reac", "", taxonomy, mode="exact") == {}


class TestFindAmbiguousTags:
    """Test cases for find_ambiguous_tags."""

    def test_reports_multi_category_tags(self, taxonomy):
        ambiguous = find_ambiguous_tags(["ds", "ml"], taxonomy)

        assert ambiguous == {"ds": ["dsp", "ds"]}

    def test_no_ambiguity_for_unique_matches(self, taxonomy):
        assert find_ambiguous_tags(["react", "python"], taxonomy) == {}

    def test_exact_mode_removes_substring_ambiguity(self, taxonomy):
        assert find_ambiguous_tags(["ds"], taxonomy, mode="exact") == {}
