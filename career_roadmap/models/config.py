"""
Configuration Models

Pydantic models for system configuration validation.
"""

import os
from pathlib import Path
from typing import Literal, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationInfo, field_validator

from career_roadmap.utils.validator import (
    SYSTEM_PARAMS_SCHEMA,
    ConfigValidator,
    read_json_document,
)


ENV_STORAGE_DIR = "CAREER_ROADMAP_STORAGE_DIR"
ENV_LOG_LEVEL = "CAREER_ROADMAP_LOG_LEVEL"


class RecommendationLimits(BaseModel):
    """Caps applied to each section of a recommendation."""

    max_courses: int = Field(default=4, gt=0, le=4)
    max_local_courses: int = Field(default=3, gt=0, le=4)
    max_repos: int = Field(default=3, gt=0, le=3)
    max_groups: int = Field(default=3, gt=0, le=3)
    max_events: int = Field(default=5, gt=0, le=5)

    @field_validator("max_local_courses")
    @classmethod
    def validate_local_within_total(cls, v: int, info: ValidationInfo) -> int:
        """Local catalog picks can never exceed the overall course cap."""
        max_courses = info.data.get("max_courses", 4)
        if v > max_courses:
            raise ValueError(
                f"max_local_courses ({v}) must not exceed max_courses ({max_courses})"
            )
        return v


class LogRetention(BaseModel):
    """Retention policy for the per-user recommendation log.

    Both limits default to None, which keeps every entry.
    """

    max_entries: Optional[int] = Field(default=None, gt=0)
    max_age_days: Optional[int] = Field(default=None, gt=0)


class MatchingConfig(BaseModel):
    """Tag-to-category matching behaviour."""

    mode: Literal["substring", "exact"] = "substring"
    flag_ambiguous: bool = True


class StorageConfig(BaseModel):
    """Local storage locations."""

    storage_dir: str = Field(default="storage", min_length=1)
    content_path: Optional[str] = None


class SystemParams(BaseModel):
    """System parameters configuration model."""

    limits: RecommendationLimits = Field(default_factory=RecommendationLimits)
    log_retention: LogRetention = Field(default_factory=LogRetention)
    matching: MatchingConfig = Field(default_factory=MatchingConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is valid."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {', '.join(valid_levels)}")
        return v.upper()

    @classmethod
    def load(
        cls,
        config_path: Path | str | None = None,
        env_file: Path | str | None = ".env",
    ) -> "SystemParams":
        """Load system parameters from config file and environment.

        Args:
            config_path: Path to system_params.json. When None, built-in
                defaults are used.
            env_file: Optional .env file read before applying environment
                overrides (CAREER_ROADMAP_STORAGE_DIR, CAREER_ROADMAP_LOG_LEVEL)

        Returns:
            SystemParams: Validated configuration

        Raises:
            FileNotFoundError: If an explicit config file doesn't exist
            ConfigurationError: If the file is not valid JSON or violates
                system_params_schema.json
            ValueError: If config validation fails
        """
        config_data: dict = {}

        if config_path is not None:
            config_path = Path(config_path)
            if not config_path.exists():
                raise FileNotFoundError(
                    f"Config file not found: {config_path}. "
                    f"Copy {config_path.stem}.example.json to {config_path.name}"
                )

            config_data = read_json_document(config_path)
            ConfigValidator().validate(
                config_data, SYSTEM_PARAMS_SCHEMA, source=config_path.name
            )

        if env_file is not None and Path(env_file).exists():
            load_dotenv(env_file, override=False)

        storage_dir = os.getenv(ENV_STORAGE_DIR)
        if storage_dir:
            config_data.setdefault("storage", {})["storage_dir"] = storage_dir

        log_level = os.getenv(ENV_LOG_LEVEL)
        if log_level:
            config_data["log_level"] = log_level

        return cls(**config_data)
