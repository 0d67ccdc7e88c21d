"""Shared FastAPI dependencies."""
from datetime import date


def get_as_of() -> date:
    """Evaluation date for eligibility; the program year is its calendar year."""
    return date.today()
