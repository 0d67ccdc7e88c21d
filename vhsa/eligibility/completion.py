"""Screening completion against a student's requirements."""
from typing import Any, Mapping, Optional

from vhsa.models.enums import ScreeningDay, ScreeningType
from vhsa.models.screening import CompletionStatus, RequirementSet


def result_recorded(screening_result: Mapping[str, Any], screening: ScreeningType) -> bool:
    """Whether a day-1 or day-2 result exists for the screening."""
    return any(
        bool(screening_result.get(f"{screening.value}_{day.value}_result"))
        for day in ScreeningDay
    )


def completion_status(
    requirements: RequirementSet,
    screening_result: Optional[Mapping[str, Any]] = None,
) -> CompletionStatus:
    """A screening is complete when it was not required or a result is recorded."""
    screening_result = screening_result or {}
    return CompletionStatus(**{
        s.value: (not requirements.is_required(s)) or result_recorded(screening_result, s)
        for s in ScreeningType
    })
