"""Screening eligibility: grade normalization, age cutoff, and the rule table."""
from vhsa.eligibility.grades import GRADE_LABELS, normalize_grade, is_pre_k, grade_catalog
from vhsa.eligibility.age_cutoff import cutoff_date, age_at_cutoff, meets_age_cutoff
from vhsa.eligibility.rules import (
    ELIGIBILITY_RULES,
    EligibilityRule,
    match_rule,
    required_screenings,
    required_screening_names,
    screenings_for,
)
from vhsa.eligibility.completion import completion_status

__all__ = [
    # Grades
    "GRADE_LABELS",
    "normalize_grade",
    "is_pre_k",
    "grade_catalog",
    # Age cutoff
    "cutoff_date",
    "age_at_cutoff",
    "meets_age_cutoff",
    # Rules
    "ELIGIBILITY_RULES",
    "EligibilityRule",
    "match_rule",
    "required_screenings",
    "required_screening_names",
    "screenings_for",
    # Completion
    "completion_status",
]
