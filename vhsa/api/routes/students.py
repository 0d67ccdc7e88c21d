"""Student lookup, quick-add and admin roster routes."""
from datetime import date

from fastapi import APIRouter, Depends, HTTPException

from vhsa.api.dependencies import get_as_of
from vhsa.api.requests import QuickAddStudentRequest
from vhsa.directory.screenings import get_screening_results_store
from vhsa.directory.students import get_student_directory, snapshot_of
from vhsa.eligibility.completion import completion_status
from vhsa.eligibility.rules import screenings_for
from vhsa.models.enums import EnrollmentStatus, Gender
from vhsa.storage.models import StudentModel

router = APIRouter(prefix="/students", tags=["Students"])

REQUIRED_FIELDS = ("firstName", "lastName", "grade", "gender", "school", "status")


def _requirements_for(student: StudentModel, as_of: date):
    return screenings_for(snapshot_of(student), as_of=as_of)


@router.get("")
async def list_students(as_of: date = Depends(get_as_of)):
    """All students with required screenings and completion for the program year."""
    students = await get_student_directory().list_students()
    results = await get_screening_results_store().results_by_student(
        (s.id for s in students), screening_year=as_of.year
    )

    rows = []
    for student in students:
        requirements = _requirements_for(student, as_of)
        record = results.get(student.id)
        completion = completion_status(requirements, record.to_dict() if record else None)
        rows.append({
            **student.to_dict(),
            "requiredScreenings": requirements.model_dump(),
            "completionStatus": completion.model_dump(),
            "allComplete": completion.all_complete,
        })

    completed = sum(1 for row in rows if row["allComplete"])
    return {
        "students": rows,
        "total": len(rows),
        "completed": completed,
        "incomplete": len(rows) - completed,
    }


@router.post("/quick-add", status_code=201)
async def quick_add_student(request: QuickAddStudentRequest, as_of: date = Depends(get_as_of)):
    """Create a student on the fly with an auto-generated unique id."""
    values = request.model_dump(by_alias=True)
    missing = [field for field in REQUIRED_FIELDS if not values.get(field)]
    if missing:
        raise HTTPException(
            status_code=400,
            detail=f"Missing required fields: {', '.join(missing)}",
        )
    if request.gender not in {g.value for g in Gender}:
        raise HTTPException(status_code=400, detail=f"Invalid gender: {request.gender}")
    if request.status not in {s.value for s in EnrollmentStatus}:
        raise HTTPException(status_code=400, detail=f"Invalid status: {request.status}")

    student = await get_student_directory().quick_add(
        first_name=request.first_name,
        last_name=request.last_name,
        grade=request.grade,
        gender=request.gender,
        school=request.school,
        status=request.status,
        teacher=request.teacher,
        dob=request.dob,
    )
    return {
        "success": True,
        "student": student.to_dict(),
        "requiredScreenings": _requirements_for(student, as_of).model_dump(),
    }


@router.get("/{unique_id}")
async def get_student(unique_id: str, as_of: date = Depends(get_as_of)):
    """Look up a student by unique id along with the screenings they need."""
    student = await get_student_directory().get_by_unique_id(unique_id)
    if student is None:
        return {"found": False}

    return {
        "found": True,
        "student": student.to_dict(),
        "requiredScreenings": _requirements_for(student, as_of).model_dump(),
    }
