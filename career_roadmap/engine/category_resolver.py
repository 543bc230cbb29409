"""Primary interest resolution from category scores."""

from typing import Mapping, Optional, Sequence

from career_roadmap.utils.logger import get_logger


DEFAULT_CATEGORY = "ml"


def resolve(
    score_map: Mapping[str, float],
    fallback_tags: Sequence[str],
    correlation_id: Optional[str] = None,
) -> str:
    """
    Pick the highest-scoring category as the primary interest.

    Ties keep the score map's insertion order (stable sort, no secondary key).
    With no scores, the first fallback tag is returned as-is, or "ml" when
    there are no tags either.

    Args:
        score_map: Category -> score from the tag scorer
        fallback_tags: Parsed interest tags
        correlation_id: Correlation ID for logging

    Returns:
        Category key, raw first tag, or the default category
    """
    ranked = sorted(score_map, key=lambda category: score_map[category], reverse=True)
    if ranked:
        return ranked[0]

    logger = get_logger(
        correlation_id=correlation_id,
        phase="recommendation",
        component="category_resolver",
    )

    if fallback_tags:
        logger.warning(
            "No category matched, using first interest tag",
            primary_interest=fallback_tags[0],
        )
        return fallback_tags[0]

    logger.info("No interests supplied, using default category", primary_interest=DEFAULT_CATEGORY)
    return DEFAULT_CATEGORY


def fallback_flags(category: str, score_map: Mapping[str, float]) -> list[str]:
    """Data quality flags describing how the primary interest was chosen."""
    if score_map:
        return []
    if category == DEFAULT_CATEGORY:
        return ["default_category"]
    return ["fallback_category"]
