"""Enumeration types for the VHSA screening API."""
from enum import Enum


class Gender(str, Enum):
    """Student gender as recorded on the roster."""
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class EnrollmentStatus(str, Enum):
    """Enrollment status; gates screening requirements for several grades."""
    NEW = "new"
    RETURNING = "returning"


class ScreeningType(str, Enum):
    """Screenings tracked by the program, in reporting order."""
    VISION = "vision"
    HEARING = "hearing"
    ACANTHOSIS = "acanthosis"
    SCOLIOSIS = "scoliosis"


class ScreeningDay(str, Enum):
    """Screening event days; a student may be screened on either."""
    DAY1 = "day1"
    DAY2 = "day2"
