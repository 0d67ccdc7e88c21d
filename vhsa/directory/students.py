"""Student Directory: roster lookups and quick-add with generated identifiers."""
import re
import time
from datetime import date
from typing import List, Optional
from uuid import uuid4

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from vhsa.config.logging_config import get_logger
from vhsa.config.settings import get_settings
from vhsa.models.screening import StudentSnapshot
from vhsa.storage.database import get_db
from vhsa.storage.models import StudentModel

logger = get_logger(__name__)

# School names carry their code in parentheses, e.g. "Lincoln Elementary (st01)"
SCHOOL_CODE_PATTERN = re.compile(r"\(([^)]+)\)")
SEQUENCE_WIDTH = 2


def school_code_for(school: str, default: Optional[str] = None) -> str:
    """Extract the parenthesized school code from a school name."""
    match = SCHOOL_CODE_PATTERN.search(school or "")
    if match:
        return match.group(1)
    return default or get_settings().default_school_code


def next_unique_id(school_code: str, existing_ids: List[str]) -> str:
    """Next ``<code><sequence>`` id after the highest existing sequence for the code."""
    highest = 0
    for unique_id in existing_ids:
        suffix = unique_id[len(school_code):]
        if unique_id.startswith(school_code) and suffix.isdigit():
            highest = max(highest, int(suffix))
    return f"{school_code}{str(highest + 1).zfill(SEQUENCE_WIDTH)}"


def snapshot_of(student: StudentModel) -> StudentSnapshot:
    """Eligibility-relevant fields of a stored student."""
    return StudentSnapshot(
        grade=student.grade,
        gender=student.gender,
        status=student.status,
        dob=student.dob,
    )


class StudentDirectory:
    """Async access to the students table."""

    async def get_by_unique_id(self, unique_id: str) -> Optional[StudentModel]:
        async with get_db() as session:
            stmt = select(StudentModel).where(StudentModel.unique_id == unique_id)
            result = await session.execute(stmt)
            return result.scalar_one_or_none()

    async def list_students(self) -> List[StudentModel]:
        """All students ordered by last name."""
        async with get_db() as session:
            stmt = select(StudentModel).order_by(StudentModel.last_name.asc(), StudentModel.first_name.asc())
            result = await session.execute(stmt)
            return list(result.scalars().all())

    async def generate_unique_id(self, school: str) -> str:
        """Derive the next identifier for a school.

        Falls back to a timestamp-suffixed id when existing ids cannot be read.
        """
        school_code = school_code_for(school)
        try:
            async with get_db() as session:
                stmt = select(StudentModel.unique_id).where(
                    StudentModel.unique_id.startswith(school_code, autoescape=True)
                )
                result = await session.execute(stmt)
                existing_ids = list(result.scalars().all())
        except SQLAlchemyError as e:
            fallback = f"{school_code}{str(int(time.time() * 1000))[-4:]}"
            logger.warning("Unique id lookup failed, using timestamp id", school_code=school_code,
                           unique_id=fallback, error=str(e))
            return fallback
        return next_unique_id(school_code, existing_ids)

    async def quick_add(
        self,
        first_name: str,
        last_name: str,
        grade: str,
        gender: str,
        school: str,
        status: str,
        teacher: Optional[str] = None,
        dob: Optional[date] = None,
    ) -> StudentModel:
        """Create a student with a generated unique id."""
        unique_id = await self.generate_unique_id(school)
        student = StudentModel(
            id=str(uuid4()),
            unique_id=unique_id,
            first_name=first_name,
            last_name=last_name,
            grade=grade,
            gender=gender,
            school=school,
            teacher=teacher or None,
            dob=dob,
            status=status,
        )
        async with get_db() as session:
            session.add(student)
            await session.flush()

        logger.info("Student created", unique_id=unique_id, school=school, grade=grade)
        return student


# Global instance
_student_directory: Optional[StudentDirectory] = None


def get_student_directory() -> StudentDirectory:
    """Get or create global StudentDirectory."""
    global _student_directory
    if _student_directory is None:
        _student_directory = StudentDirectory()
    return _student_directory
