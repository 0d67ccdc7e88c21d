"""Grade label normalization.

Roster grades arrive as free-form labels from a fixed vocabulary; the rules
work on ordinals: -1 for Pre-K (3), 0 for Pre-K (4) and Kindergarten,
1-12 for numbered grades.
"""
from typing import Dict, List, Optional, Tuple

PRE_K3 = "Pre-K (3)"
PRE_K4 = "Pre-K (4)"
KINDERGARTEN = "Kindergarten"

_ORDINAL_SUFFIXES = {1: "st", 2: "nd", 3: "rd"}


def _ordinal(n: int) -> str:
    suffix = "th" if 11 <= n <= 13 else _ORDINAL_SUFFIXES.get(n % 10, "th")
    return f"{n}{suffix}"


def _build_grade_map() -> Dict[str, int]:
    grade_map = {PRE_K3: -1, PRE_K4: 0, KINDERGARTEN: 0}
    for n in range(1, 13):
        grade_map[_ordinal(n)] = n
        grade_map[f"{_ordinal(n)} grade"] = n
    return grade_map


GRADE_MAP: Dict[str, int] = _build_grade_map()

# Canonical labels offered to clients, lowest grade first
GRADE_LABELS: List[str] = [PRE_K3, PRE_K4, KINDERGARTEN] + [f"{_ordinal(n)} grade" for n in range(1, 13)]


def normalize_grade(grade_label: Optional[str]) -> Optional[int]:
    """Map a grade label to its ordinal; None for missing or unknown labels."""
    if not isinstance(grade_label, str):
        return None
    return GRADE_MAP.get(grade_label)


def is_pre_k(grade_label: Optional[str]) -> bool:
    """True for the Pre-K labels, which share ordinals with other grades."""
    return grade_label in (PRE_K3, PRE_K4)


def grade_catalog() -> List[Tuple[str, int]]:
    """(label, ordinal) pairs for the canonical labels."""
    return [(label, GRADE_MAP[label]) for label in GRADE_LABELS]
