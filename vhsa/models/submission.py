"""Screening result submissions as posted by screeners.

Field names are snake_case in Python and camelCase on the wire
(``rightEye``, ``right1000``, ``screeningYear``).
"""
from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Accepts camelCase keys from clients and snake_case from Python callers."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DayResult(CamelModel):
    """Acanthosis and scoliosis results for one screening day."""
    screener: Optional[str] = None
    result: Optional[str] = None


class VisionDayResult(DayResult):
    right_eye: Optional[str] = None
    left_eye: Optional[str] = None


class HearingDayResult(DayResult):
    """Pure-tone results per ear at 1000, 2000 and 4000 Hz."""
    right_1000: Optional[str] = None
    right_2000: Optional[str] = None
    right_4000: Optional[str] = None
    left_1000: Optional[str] = None
    left_2000: Optional[str] = None
    left_4000: Optional[str] = None


class VisionResults(CamelModel):
    day1: Optional[VisionDayResult] = None
    day2: Optional[VisionDayResult] = None


class HearingResults(CamelModel):
    day1: Optional[HearingDayResult] = None
    day2: Optional[HearingDayResult] = None


class DayResults(CamelModel):
    day1: Optional[DayResult] = None
    day2: Optional[DayResult] = None


class ScreeningSubmission(CamelModel):
    """Partial or complete screening results for one student."""
    unique_id: Optional[str] = Field(default=None, description="Student unique identifier")
    absent: Optional[bool] = None
    notes: Optional[str] = None
    vision: Optional[VisionResults] = None
    hearing: Optional[HearingResults] = None
    acanthosis: Optional[DayResults] = None
    scoliosis: Optional[DayResults] = None
    screening_year: Optional[int] = Field(default=None, description="Program year; defaults to the current year")
    screening_event_date: Optional[date] = Field(default=None, description="Defaults to today for new records")
