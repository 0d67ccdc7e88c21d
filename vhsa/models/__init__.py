"""Data models for the VHSA screening API."""
from .enums import (
    Gender,
    EnrollmentStatus,
    ScreeningType,
    ScreeningDay,
)
from .screening import StudentSnapshot, RequirementSet, CompletionStatus
from .submission import (
    DayResult,
    VisionDayResult,
    HearingDayResult,
    ScreeningSubmission,
)

__all__ = [
    "Gender",
    "EnrollmentStatus",
    "ScreeningType",
    "ScreeningDay",
    "StudentSnapshot",
    "RequirementSet",
    "CompletionStatus",
    "DayResult",
    "VisionDayResult",
    "HearingDayResult",
    "ScreeningSubmission",
]
