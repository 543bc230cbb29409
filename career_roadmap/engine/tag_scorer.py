"""Interest tag scoring against the category taxonomy.

Free-text interests are split into tags and each tag votes for the categories
it matches. Two matching modes exist:

- ``substring``: a tag matches a category when either string contains the
  other. Tolerates partial words ("react" matches "react", "da" matches
  "data") at the cost of false positives.
- ``exact``: a tag matches when it equals the category key or one of its
  synonym tokens.

Branch priors are added after tag scoring.
"""

from typing import Mapping, Optional, Sequence

from career_roadmap.utils.logger import get_logger


BRANCH_PRIORS: list[tuple[str, dict[str, float]]] = [
    ("ece", {"embedded": 1.0}),
    ("cse", {"ml": 0.5, "react": 0.5}),
]


def parse_tags(interests_text: Optional[str]) -> list[str]:
    """Split comma-separated interests into trimmed, lower-cased, non-empty tags."""
    return [
        tag.strip()
        for tag in (interests_text or "").lower().split(",")
        if tag.strip()
    ]


def tag_matches(
    tag: str, category: str, synonyms: Sequence[str], mode: str = "substring"
) -> bool:
    """Decide whether a single tag votes for a category."""
    if not tag:
        return False
    if mode == "exact":
        return tag == category or tag in synonyms
    return category in tag or tag in category


def score_tags(
    tags: Sequence[str],
    branch: str,
    taxonomy: Mapping[str, Sequence[str]],
    mode: str = "substring",
) -> dict[str, float]:
    """
    Accumulate per-category scores for already parsed tags.

    Args:
        tags: Parsed interest tags
        branch: Learner's branch (e.g., "CSE", "ECE")
        taxonomy: Category key -> synonym tokens, in scoring order
        mode: "substring" or "exact"

    Returns:
        Category -> score. Keys appear in order of first increment.
    """
    scores: dict[str, float] = {}

    for tag in tags:
        for category, synonyms in taxonomy.items():
            if tag_matches(tag, category, synonyms, mode):
                scores[category] = scores.get(category, 0) + 1

    low_branch = (branch or "").lower()
    for marker, priors in BRANCH_PRIORS:
        if marker in low_branch:
            for category, weight in priors.items():
                scores[category] = scores.get(category, 0) + weight

    return scores


def score(
    interests_text: Optional[str],
    branch: str,
    taxonomy: Mapping[str, Sequence[str]],
    mode: str = "substring",
    correlation_id: Optional[str] = None,
) -> dict[str, float]:
    """
    Score free-text interests and branch against the taxonomy.

    Args:
        interests_text: Comma-separated interests
        branch: Learner's branch
        taxonomy: Category key -> synonym tokens
        mode: "substring" or "exact"
        correlation_id: Correlation ID for logging

    Returns:
        Category -> score. Empty when nothing matched and no prior applied.
    """
    tags = parse_tags(interests_text)
    scores = score_tags(tags, branch, taxonomy, mode)

    logger = get_logger(
        correlation_id=correlation_id,
        phase="recommendation",
        component="tag_scorer",
    )
    logger.debug("Scored interest tags", tags=tags, mode=mode, scores=scores)

    return scores


def find_ambiguous_tags(
    tags: Sequence[str],
    taxonomy: Mapping[str, Sequence[str]],
    mode: str = "substring",
) -> dict[str, list[str]]:
    """
    Report tags that matched more than one category.

    Returns:
        Tag -> matched categories, only for tags with two or more matches
    """
    ambiguous: dict[str, list[str]] = {}
    for tag in tags:
        matched = [
            category
            for category, synonyms in taxonomy.items()
            if tag_matches(tag, category, synonyms, mode)
        ]
        if len(matched) > 1:
            ambiguous[tag] = matched
    return ambiguous
