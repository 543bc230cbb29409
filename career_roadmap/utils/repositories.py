"""Repository interfaces for the course catalog, recommendation log and profiles.

The engine only talks to these interfaces so a transactional store can replace
the file-backed implementations without touching scoring logic. Reads are
tolerant: absent or corrupt data is treated as empty and logged.
"""

import uuid
from abc import ABC, abstractmethod
from typing import Optional, Sequence

from pydantic import ValidationError

from career_roadmap.models.course import CourseCatalogEntry
from career_roadmap.models.profile import UserProfile
from career_roadmap.models.recommendation import RecommendationLogEntry
from career_roadmap.utils.local_store import LocalStore
from career_roadmap.utils.logger import get_logger


ANONYMOUS_USER_ID = "anon"
COURSE_CATALOG_KEY = "courses_v1"


def resolve_user_id(user_id: Optional[str]) -> str:
    """Return the user id, or the "anon" sentinel when missing or blank."""
    if user_id is None:
        return ANONYMOUS_USER_ID
    user_id = str(user_id).strip()
    return user_id or ANONYMOUS_USER_ID


def log_key(user_id: Optional[str]) -> str:
    return f"career_logs_{resolve_user_id(user_id)}"


def profile_key(user_id: Optional[str]) -> str:
    return f"profile_{resolve_user_id(user_id)}"


class CourseCatalogRepository(ABC):
    """Read access to the shared course catalog."""

    @abstractmethod
    def list_courses(self) -> list[CourseCatalogEntry]:
        """Return all catalog entries in stored order."""
        ...


class RecommendationLogRepository(ABC):
    """Per-user recommendation history, newest first."""

    @abstractmethod
    def read(self, user_id: Optional[str]) -> list[RecommendationLogEntry]:
        ...

    @abstractmethod
    def write(
        self, user_id: Optional[str], entries: Sequence[RecommendationLogEntry]
    ) -> None:
        ...


class ProfileRepository(ABC):
    """Per-user stored profile."""

    @abstractmethod
    def get(self, user_id: Optional[str]) -> UserProfile:
        ...

    @abstractmethod
    def save(self, user_id: Optional[str], profile: UserProfile) -> None:
        ...


class LocalCourseCatalog(CourseCatalogRepository):
    """Course catalog stored as a JSON array under "courses_v1"."""

    def __init__(self, store: LocalStore, key: str = COURSE_CATALOG_KEY):
        self.store = store
        self.key = key
        self.logger = get_logger(
            correlation_id="course-catalog",
            phase="storage",
            component="course_catalog",
        )

    def _read_raw(self) -> list:
        try:
            raw = self.store.read_json(self.key, default=[])
        except IOError as e:
            self.logger.warning("Course catalog unreadable, using empty catalog", error=str(e))
            return []

        if not isinstance(raw, list):
            self.logger.warning(
                "Course catalog is not a list, using empty catalog",
                found_type=type(raw).__name__,
            )
            return []
        return raw

    def list_courses(self) -> list[CourseCatalogEntry]:
        courses: list[CourseCatalogEntry] = []
        for item in self._read_raw():
            if not isinstance(item, dict):
                continue
            if "id" not in item and item.get("title"):
                item = {
                    **item,
                    "id": CourseCatalogEntry.generate_id(
                        str(item["title"]), str(item.get("platform") or "")
                    ),
                }
            try:
                courses.append(CourseCatalogEntry(**item))
            except ValidationError as e:
                self.logger.warning(
                    "Skipping invalid catalog entry",
                    entry_id=item.get("id"),
                    error_count=e.error_count(),
                )
        return courses

    def add_course(
        self,
        title: str,
        platform: str = "",
        url: str = "",
        tags: Optional[list[str]] = None,
        teacher_name: str = "",
    ) -> CourseCatalogEntry:
        """
        Add a new course at the front of the catalog (newest first).

        Args:
            title: Course title (required, non-blank)
            platform: Hosting platform
            url: Course URL
            tags: Topic tags (blank tags dropped)
            teacher_name: Contributing teacher

        Returns:
            The stored CourseCatalogEntry

        Raises:
            ValueError: If title is blank
            IOError: If the catalog cannot be written
        """
        title = (title or "").strip()
        if not title:
            raise ValueError("Course title must not be empty")

        entry = CourseCatalogEntry(
            id=str(uuid.uuid4()),
            title=title,
            platform=platform.strip(),
            url=url.strip(),
            tags=[t.strip() for t in (tags or []) if t and t.strip()],
            teacher_name=teacher_name.strip(),
        )

        raw = self._read_raw()
        raw.insert(0, entry.model_dump(mode="json"))
        self.store.write_json(self.key, raw)

        self.logger.info("Course added to catalog", course_id=entry.id, title=entry.title)
        return entry


class LocalRecommendationLog(RecommendationLogRepository):
    """Recommendation log stored as JSON Lines under "career_logs_<user>"."""

    def __init__(self, store: LocalStore):
        self.store = store
        self.logger = get_logger(
            correlation_id="recommendation-log",
            phase="storage",
            component="recommendation_log",
        )

    def read(self, user_id: Optional[str]) -> list[RecommendationLogEntry]:
        key = log_key(user_id)
        try:
            records = self.store.read_records(key)
            return [RecommendationLogEntry(**record) for record in records]
        except (IOError, TypeError, ValidationError) as e:
            self.logger.warning(
                "Recommendation log corrupt, treating as empty",
                user_id=resolve_user_id(user_id),
                error=str(e)[:200],
            )
            return []

    def write(
        self, user_id: Optional[str], entries: Sequence[RecommendationLogEntry]
    ) -> None:
        self.store.write_records(log_key(user_id), entries)


class LocalProfileStore(ProfileRepository):
    """Profiles stored as JSON objects under "profile_<user>"."""

    def __init__(self, store: LocalStore):
        self.store = store
        self.logger = get_logger(
            correlation_id="profile-store",
            phase="storage",
            component="profile_store",
        )

    def get(self, user_id: Optional[str]) -> UserProfile:
        try:
            raw = self.store.read_json(profile_key(user_id), default={})
            if not isinstance(raw, dict):
                raise TypeError(f"expected object, found {type(raw).__name__}")
            return UserProfile(**raw)
        except (IOError, TypeError, ValidationError) as e:
            self.logger.warning(
                "Stored profile unreadable, using empty profile",
                user_id=resolve_user_id(user_id),
                error=str(e)[:200],
            )
            return UserProfile()

    def save(self, user_id: Optional[str], profile: UserProfile) -> None:
        self.store.write_json(profile_key(user_id), profile.model_dump(mode="json"))
