"""Screening requirement and completion models."""
from datetime import date
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .enums import EnrollmentStatus, Gender, ScreeningType


class StudentSnapshot(BaseModel):
    """The student attributes the eligibility rules read."""
    model_config = ConfigDict(frozen=True)

    grade: Optional[str] = Field(default=None, description="Grade label, e.g. 'Kindergarten' or '5th grade'")
    gender: Optional[Union[Gender, str]] = Field(default=None, description="male, female or other")
    status: Optional[Union[EnrollmentStatus, str]] = Field(default=None, description="new or returning")
    dob: Optional[date] = Field(default=None, description="Date of birth")


class RequirementSet(BaseModel):
    """Which screenings a student must receive this program year."""
    model_config = ConfigDict(frozen=True)

    vision: bool = False
    hearing: bool = False
    acanthosis: bool = False
    scoliosis: bool = False

    def names(self) -> List[str]:
        """Required screening names in reporting order."""
        return [s.value for s in ScreeningType if getattr(self, s.value)]

    def is_required(self, screening: Union[ScreeningType, str]) -> bool:
        return bool(getattr(self, ScreeningType(screening).value))


class CompletionStatus(BaseModel):
    """Per-screening completion for one student and program year."""
    vision: bool = False
    hearing: bool = False
    acanthosis: bool = False
    scoliosis: bool = False

    @property
    def all_complete(self) -> bool:
        return all(getattr(self, s.value) for s in ScreeningType)
