"""
Structured Logger Module

Configures structlog for JSON-formatted structured logging with correlation IDs.
Every recommendation run binds one correlation ID so the scorer, resolver,
lookup and suggestion log lines of a single request can be traced together.

Example Usage:
    from career_roadmap.utils.logger import get_logger

    logger = get_logger(
        correlation_id="a1b2c3d4-e5f6-7890-abcd-ef1234567890",
        phase="recommendation",
        component="tag_scorer"
    )

    logger.info("Scored interest tags", tag_count=3)
    logger.warning("Ambiguous tag match", tag="da", categories=["data", "dsp"])

Log Levels:
    - DEBUG: Per-step scores, lookup sizes
    - INFO: Recommendation generated, log entries written
    - WARNING: Corrupt stored data, ambiguous or fallback categories
    - ERROR: Storage write failures
"""

import logging
import sys
import uuid
from pathlib import Path
from typing import Optional
import structlog
from structlog.types import BindableLogger, EventDict, WrappedLogger


PERSONAL_FIELDS = {"email", "phone", "full_name", "location_preference"}


def mask_personal_fields(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """
    Processor to mask personal learner data in log output.

    Args:
        logger: Logger instance
        method_name: Logging method name
        event_dict: Event dictionary to process

    Returns:
        Event dictionary with personal fields replaced by "***MASKED***"

    Top-level keys are matched exactly; nested dicts (e.g. a dumped
    InterestProfile passed as ``inputs``) are masked one level deep.
    """
    for key in list(event_dict.keys()):
        value = event_dict[key]
        if key.lower() in PERSONAL_FIELDS:
            event_dict[key] = "***MASKED***"
        elif isinstance(value, dict):
            event_dict[key] = {
                k: ("***MASKED***" if str(k).lower() in PERSONAL_FIELDS else v)
                for k, v in value.items()
            }

    return event_dict


def configure_logging(
    log_file: str = "logs/career-roadmap.log", log_level: str = "INFO"
) -> None:
    """
    Configure structlog with JSON output and file logging.

    Args:
        log_file: Path to log file (default: "logs/career-roadmap.log")
        log_level: Logging level (default: "INFO")

    Log Format (JSON):
        {
            "timestamp": "2024-10-06T10:30:45Z",
            "level": "info",
            "correlation_id": "a1b2c3d4-...",
            "phase": "recommendation",
            "component": "suggestion_logger",
            "event": "Recommendation logged",
            "user_id": "u-42"
        }
    """
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, log_level.upper()),
        handlers=[logging.FileHandler(log_file), logging.StreamHandler(sys.stdout)],
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            mask_personal_fields,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(
    correlation_id: Optional[str] = None,
    phase: Optional[str] = None,
    component: Optional[str] = None,
) -> BindableLogger:
    """
    Get structured logger with bound context.

    Args:
        correlation_id: Correlation ID for request tracing (generates UUID if not provided)
        phase: Pipeline phase (e.g., "recommendation", "analytics")
        component: Component name (e.g., "tag_scorer", "local_store")

    Returns:
        BoundLogger with correlation_id, phase, and component bound to context
    """
    if correlation_id is None:
        correlation_id = str(uuid.uuid4())

    logger = structlog.get_logger()

    if correlation_id:
        logger = logger.bind(correlation_id=correlation_id)
    if phase:
        logger = logger.bind(phase=phase)
    if component:
        logger = logger.bind(component=component)

    return logger


# Initialize logging on module import with default settings
configure_logging()
