"""School list management routes."""
from typing import Optional

from fastapi import APIRouter, HTTPException

from vhsa.api.requests import SchoolCreateRequest, SchoolUpdateRequest
from vhsa.directory.exceptions import DuplicateSchoolError, SchoolNotFoundError
from vhsa.directory.schools import get_schools_directory

router = APIRouter(prefix="/schools", tags=["Schools"])


@router.get("")
async def list_schools(active: Optional[bool] = None):
    """Schools for the frontend dropdown, optionally only active ones."""
    schools = await get_schools_directory().list_schools(active=active)
    return {
        "schools": [s.to_dict() for s in schools],
        "total": len(schools),
    }


@router.post("", status_code=201)
async def create_school(request: SchoolCreateRequest):
    if not request.name or not request.name.strip():
        raise HTTPException(status_code=400, detail="School name is required")

    try:
        school = await get_schools_directory().create(request.name, active=request.active)
    except DuplicateSchoolError:
        raise HTTPException(status_code=409, detail="School with this name already exists")

    return {"success": True, "school": school.to_dict()}


@router.put("/{school_id}")
async def update_school(school_id: str, request: SchoolUpdateRequest):
    if request.name is None and request.active is None:
        raise HTTPException(status_code=400, detail="No fields to update")
    if request.name is not None and not request.name.strip():
        raise HTTPException(status_code=400, detail="School name cannot be empty")

    try:
        school = await get_schools_directory().update(school_id, name=request.name, active=request.active)
    except SchoolNotFoundError:
        raise HTTPException(status_code=404, detail="School not found")
    except DuplicateSchoolError:
        raise HTTPException(status_code=409, detail="School with this name already exists")

    return {"success": True, "school": school.to_dict()}


@router.delete("/{school_id}")
async def deactivate_school(school_id: str):
    """Soft delete: the school is marked inactive and kept for history."""
    try:
        school = await get_schools_directory().deactivate(school_id)
    except SchoolNotFoundError:
        raise HTTPException(status_code=404, detail="School not found")

    return {
        "success": True,
        "message": "School deactivated successfully",
        "school": school.to_dict(),
    }
