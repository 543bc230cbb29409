"""
Curated Content Models

One configuration-driven table keyed by category holds the taxonomy synonyms,
curated courses, repositories, community groups, skill bundles, project ideas
and the global events list.
"""

import json
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from career_roadmap.models.course import CourseLink
from career_roadmap.models.recommendation import EventLink
from career_roadmap.utils.validator import CONTENT_SCHEMA, ConfigValidator


DEFAULT_CONTENT_PATH = Path(__file__).resolve().parent.parent / "data" / "curated_content.json"


class SkillBundle(BaseModel):
    """Skills for a group of categories."""

    core: list[str] = Field(default_factory=list)
    advanced: list[str] = Field(default_factory=list)


class CategoryContent(BaseModel):
    """Curated entries attached to one category key."""

    synonyms: list[str] = Field(default_factory=list)
    skill_bundle: Optional[str] = None
    project_ideas: Optional[str] = None
    courses: list[CourseLink] = Field(default_factory=list)
    repos: list[str] = Field(default_factory=list)
    groups: list[str] = Field(default_factory=list)


class CuratedContent(BaseModel):
    """Static curated content, loaded once at startup."""

    repo_host: str = "https://github.com/"
    default_skills: list[str] = Field(default_factory=list)
    skill_bundles: dict[str, SkillBundle] = Field(default_factory=dict)
    project_ideas: dict[str, list[str]] = Field(default_factory=dict)
    categories: dict[str, CategoryContent] = Field(default_factory=dict)
    events: list[EventLink] = Field(default_factory=list)

    @field_validator("categories")
    @classmethod
    def validate_bundle_references(
        cls, v: dict[str, CategoryContent], info: ValidationInfo
    ) -> dict[str, CategoryContent]:
        """Every bundle/idea reference must point at a defined entry."""
        bundles = info.data.get("skill_bundles", {})
        ideas = info.data.get("project_ideas", {})

        for key, category in v.items():
            if category.skill_bundle and category.skill_bundle not in bundles:
                raise ValueError(
                    f"Category '{key}' references unknown skill bundle "
                    f"'{category.skill_bundle}'"
                )
            if category.project_ideas and category.project_ideas not in ideas:
                raise ValueError(
                    f"Category '{key}' references unknown project ideas "
                    f"'{category.project_ideas}'"
                )
        return v

    @property
    def taxonomy(self) -> dict[str, list[str]]:
        """Category key -> synonym tokens, in scoring order."""
        return {
            key: [s.lower() for s in category.synonyms]
            for key, category in self.categories.items()
        }

    def category(self, key: str) -> Optional[CategoryContent]:
        return self.categories.get(key)

    @classmethod
    def load(
        cls, content_path: Path | str | None = None, validate_schema: bool = True
    ) -> "CuratedContent":
        """Load curated content from JSON.

        Args:
            content_path: Path to the content table (defaults to the packaged
                data/curated_content.json)
            validate_schema: Run JSON schema validation before model parsing

        Returns:
            CuratedContent: Validated content table

        Raises:
            FileNotFoundError: If the content file doesn't exist
            ConfigurationError: If schema validation fails
            ValueError: If model validation fails
        """
        path = Path(content_path) if content_path is not None else DEFAULT_CONTENT_PATH
        if not path.exists():
            raise FileNotFoundError(f"Curated content file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)

        if validate_schema:
            ConfigValidator().validate(data, CONTENT_SCHEMA, source=path.name)

        return cls(**data)
