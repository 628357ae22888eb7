"""Data models for Swiss pairing schedules."""

from swiss_pairing.models.schedule import (
    ErrorType,
    Match,
    Round,
    ScheduleResult,
    ValidationResult,
)

__all__ = [
    "ErrorType",
    "Match",
    "Round",
    "ScheduleResult",
    "ValidationResult",
]
