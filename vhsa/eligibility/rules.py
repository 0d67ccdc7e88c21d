"""Screening Eligibility Rules: pure decision table.

Maps a student's grade, gender, enrollment status and date of birth to the
screenings required for the current program year.

Design principles:
- Pure function: no DB, no clock reads beyond the optional ``as_of`` default
- Ordered table, first matching row wins; rows for a grade are mutually exclusive
- Never raises: anything unmatched (unknown grade, malformed gender) gets no screenings
"""
from dataclasses import dataclass
from datetime import date
from typing import FrozenSet, List, Optional, Tuple, Union

from vhsa.eligibility.age_cutoff import DateLike, meets_age_cutoff
from vhsa.eligibility.grades import is_pre_k, normalize_grade
from vhsa.models.enums import EnrollmentStatus, Gender
from vhsa.models.screening import RequirementSet, StudentSnapshot

NONE = RequirementSet()
VISION_HEARING = RequirementSet(vision=True, hearing=True)
VISION_HEARING_ACANTHOSIS = RequirementSet(vision=True, hearing=True, acanthosis=True)
ALL_SCREENINGS = RequirementSet(vision=True, hearing=True, acanthosis=True, scoliosis=True)
SCOLIOSIS_ONLY = RequirementSet(scoliosis=True)

PRE_K4_MIN_AGE = 4

MALE = frozenset({Gender.MALE.value})
FEMALE = frozenset({Gender.FEMALE.value})
OTHER = frozenset({Gender.OTHER.value})
FEMALE_OR_OTHER = FEMALE | OTHER


@dataclass(frozen=True)
class EligibilityRule:
    """One row of the eligibility table.

    ``new_student`` is True for rows that apply only to new students, False
    for rows that apply to everyone else, None when status is irrelevant.
    ``genders`` of None matches any gender, including a missing one.
    """
    name: str
    grades: FrozenSet[int]
    requirements: RequirementSet
    pre_k: bool = False
    genders: Optional[FrozenSet[str]] = None
    new_student: Optional[bool] = None
    min_age: Optional[int] = None

    def matches(
        self,
        grade: int,
        pre_k: bool,
        gender: Optional[str],
        is_new: bool,
        dob: Optional[DateLike],
        as_of: Optional[date],
    ) -> bool:
        if grade not in self.grades or pre_k != self.pre_k:
            return False
        if self.genders is not None and gender not in self.genders:
            return False
        if self.new_student is not None and is_new != self.new_student:
            return False
        if self.min_age is not None and not meets_age_cutoff(dob, self.min_age, as_of):
            return False
        return True


def _grades(*values: int) -> FrozenSet[int]:
    return frozenset(values)


ELIGIBILITY_RULES: Tuple[EligibilityRule, ...] = (
    # Pre-K (3) is not reported to the state
    EligibilityRule("pre_k3", _grades(-1), NONE, pre_k=True),
    EligibilityRule("pre_k4_age_met", _grades(0), VISION_HEARING, pre_k=True, min_age=PRE_K4_MIN_AGE),
    EligibilityRule("pre_k4_under_age", _grades(0), NONE, pre_k=True),
    EligibilityRule("kindergarten", _grades(0), VISION_HEARING),
    EligibilityRule("grades_1_3", _grades(1, 3), VISION_HEARING_ACANTHOSIS),
    EligibilityRule("grades_2_4_6_new", _grades(2, 4, 6), VISION_HEARING_ACANTHOSIS, new_student=True),
    EligibilityRule("grades_2_4_6_returning", _grades(2, 4, 6), NONE, new_student=False),
    EligibilityRule("grades_5_7_female_other", _grades(5, 7), ALL_SCREENINGS, genders=FEMALE_OR_OTHER),
    EligibilityRule("grades_5_7", _grades(5, 7), VISION_HEARING_ACANTHOSIS),
    EligibilityRule("grade_8_male_new", _grades(8), ALL_SCREENINGS, genders=MALE, new_student=True),
    EligibilityRule("grade_8_male_returning", _grades(8), SCOLIOSIS_ONLY, genders=MALE, new_student=False),
    EligibilityRule("grade_8_female_new", _grades(8), VISION_HEARING_ACANTHOSIS, genders=FEMALE, new_student=True),
    EligibilityRule("grade_8_female_returning", _grades(8), NONE, genders=FEMALE, new_student=False),
    EligibilityRule("grade_8_other", _grades(8), ALL_SCREENINGS, genders=OTHER),
    EligibilityRule("grades_9_12_new", _grades(9, 10, 11, 12), VISION_HEARING_ACANTHOSIS, new_student=True),
    EligibilityRule("grades_9_12_returning", _grades(9, 10, 11, 12), NONE, new_student=False),
)


def _raw(value) -> Optional[str]:
    """Enum members and plain strings compare by their string value."""
    value = getattr(value, "value", value)
    return value if isinstance(value, str) else None


def match_rule(
    grade: Optional[str],
    gender: Optional[Union[Gender, str]] = None,
    status: Optional[Union[EnrollmentStatus, str]] = None,
    dob: Optional[DateLike] = None,
    as_of: Optional[date] = None,
) -> Optional[EligibilityRule]:
    """First table row matching the student, or None."""
    ordinal = normalize_grade(grade)
    if ordinal is None:
        return None
    pre_k = is_pre_k(grade)
    gender_value = _raw(gender)
    is_new = _raw(status) == EnrollmentStatus.NEW.value
    for rule in ELIGIBILITY_RULES:
        if rule.matches(ordinal, pre_k, gender_value, is_new, dob, as_of):
            return rule
    return None


def required_screenings(
    grade: Optional[str],
    gender: Optional[Union[Gender, str]] = None,
    status: Optional[Union[EnrollmentStatus, str]] = None,
    dob: Optional[DateLike] = None,
    as_of: Optional[date] = None,
) -> RequirementSet:
    """Screenings required for a student this program year.

    Args:
        grade: Grade label such as "Pre-K (4)", "Kindergarten" or "8th grade"
        gender: Gender member or its value ("male", "female", "other")
        status: EnrollmentStatus member or its value ("new", "returning")
        dob: Date of birth; only consulted for Pre-K (4)
        as_of: Evaluation date fixing the program year; defaults to today

    Returns:
        A fresh RequirementSet; all-false when no row matches
    """
    rule = match_rule(grade, gender, status, dob, as_of)
    if rule is None:
        return NONE.model_copy()
    return rule.requirements.model_copy()


def required_screening_names(requirements: RequirementSet) -> List[str]:
    """Names of the required screenings, in reporting order."""
    return requirements.names()


def screenings_for(snapshot: StudentSnapshot, as_of: Optional[date] = None) -> RequirementSet:
    """Requirements for a stored student's snapshot."""
    return required_screenings(snapshot.grade, snapshot.gender, snapshot.status, snapshot.dob, as_of=as_of)
