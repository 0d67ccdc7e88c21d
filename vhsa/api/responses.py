"""Response models for VHSA API endpoints."""
from typing import List
from pydantic import BaseModel


class HealthCheckResponse(BaseModel):
    """Health check response."""
    status: str
    timestamp: str
    uptime: float
    version: str


class GradeEntry(BaseModel):
    label: str
    ordinal: int


class GradesResponse(BaseModel):
    """Canonical grade vocabulary."""
    grades: List[GradeEntry]
