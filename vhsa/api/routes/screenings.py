"""Screening result submission and listing routes."""
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from vhsa.api.dependencies import get_as_of
from vhsa.api.requests import ScreeningSubmission
from vhsa.config.settings import get_settings
from vhsa.directory.exceptions import StudentNotFoundError
from vhsa.directory.screenings import get_screening_results_store

router = APIRouter(prefix="/screenings", tags=["Screenings"])


@router.post("")
async def submit_screening(submission: ScreeningSubmission, as_of: date = Depends(get_as_of)):
    """
    Submit screening results, creating or partially updating the year's record.

    Only fields with values are written; anything omitted keeps its stored value.
    """
    if not submission.unique_id:
        raise HTTPException(status_code=400, detail="Unique ID is required")

    try:
        record, created = await get_screening_results_store().upsert(
            submission.unique_id, submission, today=as_of
        )
    except StudentNotFoundError:
        raise HTTPException(status_code=404, detail="Student not found")

    return {
        "success": True,
        "message": "Screening created successfully" if created else "Screening updated successfully",
        "screening": record.to_dict(),
    }


@router.get("/{student_id}")
async def get_student_screenings(
    student_id: str,
    screening_year: Optional[int] = Query(default=None, alias="screeningYear"),
):
    """Screening records for one student, newest first."""
    records = await get_screening_results_store().list_for_student(student_id, screening_year)
    return {
        "screenings": [r.to_dict() for r in records],
        "total": len(records),
    }


@router.get("")
async def list_screenings(
    school: Optional[str] = None,
    screening_year: Optional[int] = Query(default=None, alias="screeningYear"),
    page: int = Query(default=1, ge=1),
    limit: Optional[int] = Query(default=None, ge=1),
):
    """All screening records for the admin panel, paginated."""
    settings = get_settings()
    limit = min(limit or settings.screenings_page_size, settings.max_page_size)

    rows, total = await get_screening_results_store().list_all(
        school=school, screening_year=screening_year, page=page, limit=limit
    )
    return {
        "screenings": [{**record.to_dict(), "students": student.summary()} for record, student in rows],
        "total": total,
        "page": page,
        "limit": limit,
    }
