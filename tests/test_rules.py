"""Eligibility decision table, one case per row."""

from datetime import date

import pytest

from vhsa.eligibility.rules import (
    ELIGIBILITY_RULES,
    match_rule,
    required_screening_names,
    required_screenings,
)
from vhsa.models.enums import EnrollmentStatus, Gender
from vhsa.models.screening import RequirementSet

AS_OF = date(2025, 10, 15)
DOB = date(2014, 2, 2)


def flags(v, h, a, s) -> RequirementSet:
    return RequirementSet(vision=bool(v), hearing=bool(h), acanthosis=bool(a), scoliosis=bool(s))


@pytest.mark.parametrize(
    "grade, gender, status, expected",
    [
        ("Kindergarten", "male", "returning", flags(1, 1, 0, 0)),
        ("1st grade", "male", "returning", flags(1, 1, 1, 0)),
        ("2nd grade", "male", "new", flags(1, 1, 1, 0)),
        ("2nd grade", "male", "returning", flags(0, 0, 0, 0)),
        ("3rd", "female", "returning", flags(1, 1, 1, 0)),
        ("4th grade", "female", "new", flags(1, 1, 1, 0)),
        ("4th grade", "female", "returning", flags(0, 0, 0, 0)),
        ("5th grade", "female", "returning", flags(1, 1, 1, 1)),
        ("5th grade", "other", "new", flags(1, 1, 1, 1)),
        ("5th grade", "male", "returning", flags(1, 1, 1, 0)),
        ("6th grade", "other", "new", flags(1, 1, 1, 0)),
        ("6th grade", "other", "returning", flags(0, 0, 0, 0)),
        ("7th", "female", "new", flags(1, 1, 1, 1)),
        ("7th", "male", "new", flags(1, 1, 1, 0)),
        ("8th grade", "male", "new", flags(1, 1, 1, 1)),
        ("8th grade", "male", "returning", flags(0, 0, 0, 1)),
        ("8th grade", "female", "new", flags(1, 1, 1, 0)),
        ("8th grade", "female", "returning", flags(0, 0, 0, 0)),
        ("8th grade", "other", "new", flags(1, 1, 1, 1)),
        ("8th grade", "other", "returning", flags(1, 1, 1, 1)),
        ("9th grade", "male", "new", flags(1, 1, 1, 0)),
        ("10th", "female", "returning", flags(0, 0, 0, 0)),
        ("11th grade", "other", "new", flags(1, 1, 1, 0)),
        ("12th grade", "male", "returning", flags(0, 0, 0, 0)),
    ],
)
def test_decision_table(grade, gender, status, expected):
    assert required_screenings(grade, gender, status, DOB, as_of=AS_OF) == expected


@pytest.mark.parametrize("gender", ["male", "female", "other"])
@pytest.mark.parametrize("status", ["new", "returning"])
def test_pre_k3_never_requires(gender, status):
    assert required_screenings("Pre-K (3)", gender, status, date(2021, 1, 1), as_of=AS_OF) == flags(0, 0, 0, 0)


def test_pre_k4_requires_vision_hearing_when_four_by_cutoff():
    result = required_screenings("Pre-K (4)", "female", "new", date(2021, 9, 1), as_of=AS_OF)
    assert result == flags(1, 1, 0, 0)


def test_pre_k4_under_age_requires_nothing():
    assert required_screenings("Pre-K (4)", "female", "new", date(2021, 9, 2), as_of=AS_OF) == flags(0, 0, 0, 0)


def test_pre_k4_without_dob_requires_nothing():
    assert required_screenings("Pre-K (4)", "male", "new", None, as_of=AS_OF) == flags(0, 0, 0, 0)


def test_kindergarten_ignores_age():
    assert required_screenings("Kindergarten", "male", "new", None, as_of=AS_OF) == flags(1, 1, 0, 0)


@pytest.mark.parametrize("grade", [None, "", "Grade 5", "13th grade"])
def test_unrecognized_grade_is_safe_default(grade):
    assert required_screenings(grade, "male", "new", DOB, as_of=AS_OF) == flags(0, 0, 0, 0)
    assert match_rule(grade, "male", "new", DOB, as_of=AS_OF) is None


def test_grade_8_unknown_gender_requires_nothing():
    assert required_screenings("8th grade", "unknown", "new", DOB, as_of=AS_OF) == flags(0, 0, 0, 0)
    assert required_screenings("8th grade", None, "new", DOB, as_of=AS_OF) == flags(0, 0, 0, 0)


def test_malformed_status_is_treated_as_not_new():
    assert required_screenings("2nd grade", "male", "transfer", DOB, as_of=AS_OF) == flags(0, 0, 0, 0)
    assert required_screenings("8th grade", "male", None, DOB, as_of=AS_OF) == flags(0, 0, 0, 1)


def test_enum_members_match_like_strings():
    by_enum = required_screenings("8th grade", Gender.MALE, EnrollmentStatus.NEW, DOB, as_of=AS_OF)
    by_str = required_screenings("8th grade", "male", "new", DOB, as_of=AS_OF)
    assert by_enum == by_str == flags(1, 1, 1, 1)


def test_identical_inputs_give_identical_output():
    first = required_screenings("Pre-K (4)", "other", "new", date(2021, 5, 5), as_of=AS_OF)
    second = required_screenings("Pre-K (4)", "other", "new", date(2021, 5, 5), as_of=AS_OF)
    assert first == second
    assert first.model_dump() == second.model_dump()


def test_each_call_returns_a_fresh_value():
    assert required_screenings("1st", "male", "new", as_of=AS_OF) is not required_screenings(
        "1st", "male", "new", as_of=AS_OF
    )


def test_rows_for_a_grade_are_reachable():
    """Every table row is hit by at least one student."""
    students = [
        ("Pre-K (3)", "male", "new", None),
        ("Pre-K (4)", "male", "new", date(2020, 1, 1)),
        ("Pre-K (4)", "male", "new", None),
        ("Kindergarten", "male", "new", None),
        ("1st", "male", "new", None),
        ("2nd", "male", "new", None),
        ("2nd", "male", "returning", None),
        ("5th", "female", "new", None),
        ("5th", "male", "new", None),
        ("8th", "male", "new", None),
        ("8th", "male", "returning", None),
        ("8th", "female", "new", None),
        ("8th", "female", "returning", None),
        ("8th", "other", "new", None),
        ("9th", "male", "new", None),
        ("9th", "male", "returning", None),
    ]
    hit = {match_rule(*s, as_of=AS_OF).name for s in students}
    assert hit == {rule.name for rule in ELIGIBILITY_RULES}


def test_required_screening_names_in_reporting_order():
    requirements = required_screenings("8th grade", "male", "new", as_of=AS_OF)
    assert required_screening_names(requirements) == ["vision", "hearing", "acanthosis", "scoliosis"]
    assert required_screening_names(flags(0, 1, 0, 1)) == ["hearing", "scoliosis"]
    assert required_screening_names(flags(0, 0, 0, 0)) == []
