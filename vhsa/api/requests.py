"""Request models for VHSA API endpoints."""
from datetime import date
from typing import Optional

from pydantic import Field

from vhsa.models.submission import CamelModel, ScreeningSubmission


class QuickAddStudentRequest(CamelModel):
    """Student created on the fly during a screening event.

    Presence of required fields is checked by the route so missing fields
    get a single 400 listing all of them.
    """
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    grade: Optional[str] = Field(default=None, description="Grade label, e.g. 'Kindergarten'")
    gender: Optional[str] = Field(default=None, description="male, female or other")
    school: Optional[str] = Field(default=None, description="School name including its code, e.g. 'Lincoln (st01)'")
    teacher: Optional[str] = None
    dob: Optional[date] = None
    status: Optional[str] = Field(default=None, description="new or returning")


class SchoolCreateRequest(CamelModel):
    name: Optional[str] = None
    active: bool = True


class SchoolUpdateRequest(CamelModel):
    name: Optional[str] = None
    active: Optional[bool] = None


__all__ = [
    "QuickAddStudentRequest",
    "SchoolCreateRequest",
    "SchoolUpdateRequest",
    "ScreeningSubmission",
]
