"""
Shared test fixtures.
"""

import pytest

from career_roadmap.models.content import CuratedContent
from career_roadmap.models.course import CourseCatalogEntry


@pytest.fixture(scope="session")
def content() -> CuratedContent:
    """Packaged curated content table."""
    return CuratedContent.load()


@pytest.fixture
def taxonomy(content) -> dict[str, list[str]]:
    return content.taxonomy


@pytest.fixture
def local_catalog() -> list[CourseCatalogEntry]:
    """Small user-contributed catalog."""
    return [
        CourseCatalogEntry(
            id="c1",
            title="Hands-on ML with Python",
            platform="Udemy",
            url="https://example.com/ml",
            tags=["ML", "Python"],
            teacher_name="Dr. Rao",
        ),
        CourseCatalogEntry(
            id="c2",
            title="React Basics",
            platform="",
            url="",
            tags=["react", "javascript"],
        ),
        CourseCatalogEntry(
            id="c3",
            title="Pandas for Data Analysis",
            platform="YouTube",
            url="https://example.com/pandas",
            tags=["data"],
        ),
        CourseCatalogEntry(
            id="c4",
            title="Advanced python patterns",
            platform="Coursera",
            url="https://example.com/py",
            tags=[],
        ),
    ]
