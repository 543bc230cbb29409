"""Course catalog data models."""

import hashlib
from typing import Any

from pydantic import AliasChoices, BaseModel, Field, field_validator


class CourseCatalogEntry(BaseModel):
    """User-contributed course stored in the local course catalog.

    Attributes:
        id: Unique identifier (uuid4 for new entries)
        title: Course title
        platform: Hosting platform (Coursera, Udemy, ...), may be empty
        url: Course URL, may be empty
        tags: Free-form topic tags
        teacher_name: Name of the contributing teacher, may be empty

    Entries written by the web client use ``teacherName`` and may carry
    nulls or non-string tags; both are accepted.
    """

    id: str
    title: str
    platform: str = ""
    url: str = ""
    tags: list[str] = Field(default_factory=list)
    teacher_name: str = Field(
        default="", validation_alias=AliasChoices("teacher_name", "teacherName")
    )

    @field_validator("id", "title", mode="before")
    @classmethod
    def coerce_identity(cls, v: Any) -> Any:
        """Numeric ids and titles are stored as text."""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("platform", "url", "teacher_name", mode="before")
    @classmethod
    def null_to_empty(cls, v: Any) -> Any:
        if v is None:
            return ""
        return v

    @field_validator("tags", mode="before")
    @classmethod
    def normalize_tag_values(cls, v: Any) -> Any:
        """Missing tags become an empty list; scalar tags are stringified."""
        if v is None:
            return []
        if isinstance(v, str):
            v = [v]
        if isinstance(v, (list, tuple)):
            return [str(t) for t in v if t is not None]
        return v

    @staticmethod
    def generate_id(title: str, platform: str) -> str:
        """Generate a stable ID for a stored entry that has none.

        Args:
            title: Course title
            platform: Hosting platform

        Returns:
            First 16 characters of SHA256 hash of "title:platform"
        """
        composite_key = f"{title.strip().lower()}:{platform.strip().lower()}"
        hash_digest = hashlib.sha256(composite_key.encode("utf-8")).hexdigest()
        return hash_digest[:16]

    def normalized_tags(self) -> list[str]:
        """Lower-cased tags for matching."""
        return [t.lower() for t in self.tags]


class CourseLink(BaseModel):
    """Course as shown in a recommendation."""

    title: str
    url: str
