"""Grade vocabulary route."""
from fastapi import APIRouter

from vhsa.api.responses import GradeEntry, GradesResponse
from vhsa.eligibility.grades import grade_catalog

router = APIRouter(prefix="/grades", tags=["Grades"])


@router.get("", response_model=GradesResponse)
async def list_grades():
    """Grade labels accepted by the eligibility rules, lowest first."""
    return GradesResponse(grades=[GradeEntry(label=label, ordinal=ordinal) for label, ordinal in grade_catalog()])
