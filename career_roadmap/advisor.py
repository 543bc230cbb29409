"""
Career Advisor Module

Runs the recommendation pipeline (tag scoring, category resolution, content
lookup, roadmap generation, suggestion logging) and the profile, catalog,
resume and analytics operations around it.
"""

import logging
import uuid
from datetime import datetime
from pathlib import Path
from typing import Optional, Sequence

from rich.console import Console

from career_roadmap.engine import (
    category_resolver,
    content_lookup,
    course_ranker,
    roadmap_generator,
    tag_scorer,
)
from career_roadmap.engine.analytics import CareerAnalytics, summarize
from career_roadmap.engine.resume import generate_resume_text, resume_filename
from career_roadmap.engine.suggestion_logger import SuggestionLogger, utc_now
from career_roadmap.models.config import SystemParams
from career_roadmap.models.content import CuratedContent
from career_roadmap.models.course import CourseCatalogEntry
from career_roadmap.models.profile import InterestProfile, SkillLevel, UserProfile
from career_roadmap.models.recommendation import (
    RecommendationLogEntry,
    RecommendationResult,
)
from career_roadmap.utils.local_store import LocalStore
from career_roadmap.utils.logger import get_logger
from career_roadmap.utils.report import render_analytics, render_recommendation
from career_roadmap.utils.repositories import (
    LocalCourseCatalog,
    LocalProfileStore,
    LocalRecommendationLog,
    resolve_user_id,
)


def build_recommendation(
    profile: InterestProfile,
    local_catalog: Sequence[CourseCatalogEntry],
    content: CuratedContent,
    params: Optional[SystemParams] = None,
    correlation_id: Optional[str] = None,
    now: Optional[datetime] = None,
) -> RecommendationResult:
    """
    Generate a recommendation without touching storage.

    Args:
        profile: Learner inputs
        local_catalog: Courses from the local catalog
        content: Curated content table
        params: System parameters (defaults to SystemParams())
        correlation_id: Correlation ID for logging
        now: Generation timestamp (defaults to current UTC time)

    Returns:
        RecommendationResult
    """
    params = params or SystemParams()
    logger = get_logger(
        correlation_id=correlation_id,
        phase="recommendation",
        component="career_advisor",
    )
    taxonomy = content.taxonomy
    mode = params.matching.mode

    tags = tag_scorer.parse_tags(profile.interests)
    scores = tag_scorer.score(
        profile.interests, profile.branch, taxonomy, mode, correlation_id
    )
    primary = category_resolver.resolve(scores, tags, correlation_id)

    flags = category_resolver.fallback_flags(primary, scores)
    if params.matching.flag_ambiguous:
        ambiguous = tag_scorer.find_ambiguous_tags(tags, taxonomy, mode)
        if ambiguous:
            logger.warning(
                "Ambiguous interest tags",
                ambiguous=ambiguous,
                primary_interest=primary,
            )
            flags.append("ambiguous_tag_match")

    bundle = content_lookup.lookup(
        primary,
        tags,
        local_catalog,
        content,
        skill_level=profile.skill_level,
        limits=params.limits,
    )
    if bundle.local_course_count == 0:
        flags.append("no_local_courses")

    top_course = bundle.courses[0].title if bundle.courses else None
    roadmap = roadmap_generator.generate(
        profile.skill_level, primary, top_course, correlation_id
    )

    return RecommendationResult(
        primary_interest=primary,
        skills=bundle.skills,
        courses=bundle.courses,
        project_repos=bundle.project_repos,
        project_ideas=bundle.project_ideas,
        community_groups=bundle.community_groups,
        events=bundle.events,
        roadmap=roadmap,
        generated_at=now or utc_now(),
        flags=flags,
    )


class CareerAdvisor:
    """
    Entry point for recommendation requests.

    Wires configuration, curated content and file-backed repositories, then
    exposes one call per user-facing operation.
    """

    def __init__(
        self,
        config_path: str | Path | None = None,
        storage_dir: str | None = None,
        correlation_id: str | None = None,
        params: SystemParams | None = None,
        content: CuratedContent | None = None,
    ):
        """
        Initialize CareerAdvisor.

        Args:
            config_path: Optional path to system parameters JSON file
            storage_dir: Overrides the configured storage directory
            correlation_id: Correlation ID for logging (auto-generated if None)
            params: Pre-built system parameters (skips config_path loading)
            content: Pre-loaded curated content (skips loading the content file)

        Raises:
            FileNotFoundError: If config_path or the content file is missing
            ConfigurationError: If curated content fails schema validation
        """
        self.system_params = params or SystemParams.load(config_path)
        if storage_dir is not None:
            storage = self.system_params.storage.model_copy(
                update={"storage_dir": storage_dir}
            )
            self.system_params = self.system_params.model_copy(
                update={"storage": storage}
            )

        self.content = content or CuratedContent.load(
            self.system_params.storage.content_path
        )

        self.store = LocalStore(storage_dir=self.system_params.storage.storage_dir)
        self.catalog = LocalCourseCatalog(self.store)
        self.profiles = LocalProfileStore(self.store)
        self.suggestion_logger = SuggestionLogger(
            LocalRecommendationLog(self.store),
            retention=self.system_params.log_retention,
        )

        if correlation_id is None:
            correlation_id = str(uuid.uuid4())
        self.correlation_id = correlation_id

        logging.getLogger().setLevel(self.system_params.log_level)
        self.logger = get_logger(
            correlation_id=correlation_id,
            phase="advisor",
            component="career_advisor",
        )
        self.logger.info(
            "Career advisor initialized",
            storage_dir=self.system_params.storage.storage_dir,
            categories=len(self.content.categories),
            matching_mode=self.system_params.matching.mode,
        )

    def recommend(
        self, profile: InterestProfile, user_id: Optional[str] = None
    ) -> RecommendationResult:
        """
        Generate, log and return a recommendation.

        Never raises for storage problems: an unreadable catalog counts as
        empty and logging failures are only reported.

        Args:
            profile: Learner inputs
            user_id: Current user; missing ids are treated as "anon"

        Returns:
            RecommendationResult
        """
        uid = resolve_user_id(user_id)
        request_id = f"{self.correlation_id}:{uuid.uuid4().hex[:8]}"

        result = build_recommendation(
            profile,
            self.catalog.list_courses(),
            self.content,
            self.system_params,
            correlation_id=request_id,
        )
        self.suggestion_logger.log(uid, profile, result, correlation_id=request_id)

        self.logger.info(
            "Recommendation generated",
            user_id=uid,
            primary_interest=result.primary_interest,
            course_count=len(result.courses),
            flags=result.flags,
        )
        return result

    def recommend_from_profile(
        self,
        user_id: Optional[str] = None,
        skill_level: SkillLevel = SkillLevel.BEGINNER,
    ) -> RecommendationResult:
        """Recommend using the branch, year, interests and location stored in the profile."""
        profile = self.profiles.get(user_id)
        return self.recommend(profile.to_interest_profile(skill_level), user_id=user_id)

    def show_recommendation(
        self, result: RecommendationResult, console: Optional[Console] = None
    ) -> None:
        render_recommendation(result, console=console)

    def history(self, user_id: Optional[str] = None) -> list[RecommendationLogEntry]:
        """Recommendation log for a user, newest first."""
        return self.suggestion_logger.history(user_id)

    def get_profile(self, user_id: Optional[str] = None) -> UserProfile:
        return self.profiles.get(user_id)

    def save_profile(self, profile: UserProfile, user_id: Optional[str] = None) -> None:
        self.profiles.save(user_id, profile)

    def add_skill(self, skill: str, user_id: Optional[str] = None) -> UserProfile:
        """Add a skill to the stored profile (blank and duplicate skills ignored)."""
        profile = self.profiles.get(user_id)
        if profile.add_skill(skill):
            self.profiles.save(user_id, profile)
        return profile

    def remove_skill(self, skill: str, user_id: Optional[str] = None) -> UserProfile:
        profile = self.profiles.get(user_id)
        if profile.remove_skill(skill):
            self.profiles.save(user_id, profile)
        return profile

    def add_course(
        self,
        title: str,
        platform: str = "",
        url: str = "",
        tags: Optional[list[str]] = None,
        teacher_name: str = "",
    ) -> CourseCatalogEntry:
        """Add a course to the shared local catalog."""
        return self.catalog.add_course(title, platform, url, tags, teacher_name)

    def rank_courses(
        self, user_id: Optional[str] = None, interests: Optional[str] = None
    ) -> list[course_ranker.ScoredCourse]:
        """
        Rank catalog courses for a user's interests and skills.

        Args:
            user_id: Current user
            interests: Overrides the interests stored in the profile

        Returns:
            Positively scored courses, highest first
        """
        profile = self.profiles.get(user_id)
        text = interests if interests is not None else profile.interests
        return course_ranker.rank_courses(text, profile.skills, self.catalog.list_courses())

    def resume_text(self, user_id: Optional[str] = None) -> str:
        profile = self.profiles.get(user_id)
        return generate_resume_text(profile, self.rank_courses(user_id))

    def save_resume(self, output_dir: str | Path, user_id: Optional[str] = None) -> Path:
        """
        Write the resume as "<Name>.txt" under output_dir.

        Returns:
            Path of the written file

        Raises:
            IOError: If the file cannot be written
        """
        profile = self.profiles.get(user_id)
        path = Path(output_dir) / resume_filename(profile)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            generate_resume_text(profile, self.rank_courses(user_id)), encoding="utf-8"
        )
        self.logger.info("Resume written", user_id=resolve_user_id(user_id), path=str(path))
        return path

    def analytics(self, user_id: Optional[str] = None) -> CareerAnalytics:
        """Analytics summary for a user."""
        return summarize(
            self.profiles.get(user_id),
            self.history(user_id),
            self.catalog.list_courses(),
        )

    def show_analytics(
        self, user_id: Optional[str] = None, console: Optional[Console] = None
    ) -> CareerAnalytics:
        """Print the analytics summary for a user and return it."""
        summary = self.analytics(user_id)
        render_analytics(summary, console=console)
        return summary
