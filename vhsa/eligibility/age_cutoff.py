"""Age cutoff evaluation against the state reporting date.

Ages are taken as of September 1 of the program year. The program year is
the calendar year of ``as_of``, which defaults to today; pass ``as_of`` to
evaluate against a fixed date.
"""
from datetime import date, datetime
from typing import Optional, Union

CUTOFF_MONTH = 9
CUTOFF_DAY = 1

DateLike = Union[date, datetime, str]


def cutoff_date(as_of: Optional[date] = None) -> date:
    """September 1 of the program year containing ``as_of``."""
    as_of = as_of or date.today()
    return date(as_of.year, CUTOFF_MONTH, CUTOFF_DAY)


def parse_dob(value: Optional[DateLike]) -> Optional[date]:
    """Coerce a stored date of birth to a date; None when missing or unparseable."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value)[:10])
    except ValueError:
        return None


def age_at_cutoff(date_of_birth: date, as_of: Optional[date] = None) -> int:
    """Whole years of age on the cutoff date."""
    cutoff = cutoff_date(as_of)
    age = cutoff.year - date_of_birth.year
    # Birthday not yet reached by the cutoff
    if (date_of_birth.month, date_of_birth.day) > (cutoff.month, cutoff.day):
        age -= 1
    return age


def meets_age_cutoff(
    date_of_birth: Optional[DateLike],
    required_age: int,
    as_of: Optional[date] = None,
) -> bool:
    """Whether the student is at least ``required_age`` on the cutoff date.

    A missing date of birth never meets the cutoff.
    """
    dob = parse_dob(date_of_birth)
    if dob is None:
        return False
    return age_at_cutoff(dob, as_of) >= required_age
