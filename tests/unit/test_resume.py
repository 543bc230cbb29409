"""
Unit tests for resume module.
"""

from career_roadmap.engine.course_ranker import ScoredCourse
from career_roadmap.engine.resume import generate_resume_text, resume_filename
from career_roadmap.models.course import CourseCatalogEntry
from career_roadmap.models.profile import UserProfile


def scored(title: str, score: int) -> ScoredCourse:
    return ScoredCourse(course=CourseCatalogEntry(id=title, title=title), score=score)


def test_resume_text_layout():
    # Arrange
    profile = UserProfile(
        name="Asha Verma",
        year="3",
        branch="CSE",
        summary="Aspiring ML engineer",
        skills=["Python", "SQL"],
    )
    ranked = [scored("A", 9), scored("B", 7), scored("C", 5), scored("D", 3)]

    # Act
    text = generate_resume_text(profile, ranked)

    # Assert
    assert text.splitlines() == [
        "Name: Asha Verma",
        "Branch/Year: CSE 3",
        "Summary: Aspiring ML engineer",
        "Skills: Python, SQL",
        "Recommended Courses: A; B; C",
    ]


def test_resume_text_without_courses():
    text = generate_resume_text(UserProfile(name="X"))

    assert text.endswith("Recommended Courses: ")


def test_resume_filename():
    assert resume_filename(UserProfile(name="Asha  Verma")) == "Asha_Verma.txt"
    assert resume_filename(UserProfile()) == "resume.txt"
    assert resume_filename(UserProfile(name="../etc/x")) == ".._etc_x.txt"
