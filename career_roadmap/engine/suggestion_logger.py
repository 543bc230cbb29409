"""Suggestion Logger.

Persists every generated recommendation to the per-user log, newest first, for
later analytics display. Logging is a side effect of recommendation and never
fails the caller: unreadable logs are treated as empty and write failures are
reported through the structured logger only.
"""

import uuid
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional, Sequence

from career_roadmap.models.config import LogRetention
from career_roadmap.models.profile import InterestProfile
from career_roadmap.models.recommendation import (
    RecommendationLogEntry,
    RecommendationResult,
)
from career_roadmap.utils.logger import get_logger
from career_roadmap.utils.repositories import (
    RecommendationLogRepository,
    resolve_user_id,
)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def apply_retention(
    entries: Sequence[RecommendationLogEntry],
    retention: Optional[LogRetention],
    now: datetime,
) -> list[RecommendationLogEntry]:
    """
    Trim a newest-first log according to the retention policy.

    Args:
        entries: Log entries, newest first
        retention: Policy; None or empty policy keeps everything
        now: Reference time for age-based retention

    Returns:
        Retained entries, order preserved
    """
    kept = list(entries)
    if retention is None:
        return kept

    if retention.max_age_days is not None:
        cutoff = now - timedelta(days=retention.max_age_days)
        kept = [e for e in kept if _as_utc(e.timestamp) >= cutoff]

    if retention.max_entries is not None:
        kept = kept[: retention.max_entries]

    return kept


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class SuggestionLogger:
    """Prepend-and-rewrite log of generated recommendations."""

    def __init__(
        self,
        repository: RecommendationLogRepository,
        retention: Optional[LogRetention] = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        """
        Initialize SuggestionLogger.

        Args:
            repository: Storage for per-user log entries
            retention: Optional retention policy applied on every write
            clock: Source of the current time (UTC)
        """
        self.repository = repository
        self.retention = retention
        self.clock = clock

    def log(
        self,
        user_id: Optional[str],
        inputs: InterestProfile,
        result: RecommendationResult,
        correlation_id: Optional[str] = None,
    ) -> None:
        """
        Record one recommendation for a user.

        Reads the existing log (empty if absent or corrupt), prepends a new
        entry with a fresh id and the current timestamp, applies retention and
        writes the sequence back. Never raises.

        Args:
            user_id: Learner id; missing ids are logged under "anon"
            inputs: Profile the recommendation was generated from
            result: Generated recommendation
            correlation_id: Correlation ID for logging
        """
        logger = get_logger(
            correlation_id=correlation_id,
            phase="recommendation",
            component="suggestion_logger",
        )
        uid = resolve_user_id(user_id)
        now = self.clock()

        entry = RecommendationLogEntry(
            id=str(uuid.uuid4()),
            timestamp=now,
            user_id=uid,
            inputs=inputs,
            result=result,
        )

        existing = self.repository.read(uid)
        entries = apply_retention([entry, *existing], self.retention, now)

        try:
            self.repository.write(uid, entries)
        except IOError as e:
            logger.error(
                "Failed to persist recommendation log",
                user_id=uid,
                entry_id=entry.id,
                error=str(e),
            )
            return

        logger.info(
            "Recommendation logged",
            user_id=uid,
            entry_id=entry.id,
            log_size=len(entries),
            dropped=len(existing) + 1 - len(entries),
        )

    def history(self, user_id: Optional[str]) -> list[RecommendationLogEntry]:
        """Return the user's log, newest first."""
        return self.repository.read(resolve_user_id(user_id))
