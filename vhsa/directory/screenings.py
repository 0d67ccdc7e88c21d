"""Screening Results Store: one record per student and program year.

Submissions upsert: values that are provided and non-empty overwrite the
stored columns, everything else is left as it was.
"""
from datetime import date
from typing import Any, Dict, Iterable, List, Optional, Tuple
from uuid import uuid4

from sqlalchemy import func, select

from vhsa.config.logging_config import get_logger
from vhsa.directory.exceptions import StudentNotFoundError
from vhsa.models.enums import ScreeningDay, ScreeningType
from vhsa.models.submission import ScreeningSubmission
from vhsa.storage.database import get_db
from vhsa.storage.models import ScreeningResultModel, StudentModel

logger = get_logger(__name__)


def flatten_submission(submission: ScreeningSubmission) -> Dict[str, Any]:
    """Per-day sub-results as ``<screening>_<day>_<field>`` column values.

    Empty values are dropped so they never overwrite stored results.
    """
    flat: Dict[str, Any] = {}
    if submission.absent is not None:
        flat["absent"] = submission.absent
    if submission.notes is not None:
        flat["notes"] = submission.notes

    for screening in ScreeningType:
        days = getattr(submission, screening.value)
        if days is None:
            continue
        for day in ScreeningDay:
            day_result = getattr(days, day.value)
            if day_result is None:
                continue
            for field, value in day_result.model_dump().items():
                if value:
                    flat[f"{screening.value}_{day.value}_{field}"] = value
    return flat


class ScreeningResultsStore:
    """Async access to the screening_results table."""

    async def upsert(
        self,
        unique_id: str,
        submission: ScreeningSubmission,
        today: Optional[date] = None,
    ) -> Tuple[ScreeningResultModel, bool]:
        """Create or update the student's record for the submission's year.

        Returns:
            (record, created) where created is False for updates

        Raises:
            StudentNotFoundError: no student has ``unique_id``
        """
        today = today or date.today()
        year = submission.screening_year or today.year
        fields = flatten_submission(submission)
        if submission.screening_event_date is not None:
            fields["screening_event_date"] = submission.screening_event_date

        async with get_db() as session:
            stmt = select(StudentModel).where(StudentModel.unique_id == unique_id)
            student = (await session.execute(stmt)).scalar_one_or_none()
            if student is None:
                raise StudentNotFoundError(unique_id)

            stmt = select(ScreeningResultModel).where(
                ScreeningResultModel.student_id == student.id,
                ScreeningResultModel.screening_year == year,
            )
            record = (await session.execute(stmt)).scalar_one_or_none()
            created = record is None

            if created:
                record = ScreeningResultModel(
                    id=str(uuid4()),
                    student_id=student.id,
                    school=student.school,
                    screening_year=year,
                    screening_event_date=today,
                )
                session.add(record)
            for column, value in fields.items():
                setattr(record, column, value)
            await session.flush()
            await session.refresh(record)

        logger.info(
            "Screening saved",
            unique_id=unique_id,
            screening_year=year,
            created=created,
            fields=len(fields),
        )
        return record, created

    async def list_for_student(
        self,
        student_id: str,
        screening_year: Optional[int] = None,
    ) -> List[ScreeningResultModel]:
        """A student's records, newest first."""
        async with get_db() as session:
            stmt = select(ScreeningResultModel).where(ScreeningResultModel.student_id == student_id)
            if screening_year is not None:
                stmt = stmt.where(ScreeningResultModel.screening_year == screening_year)
            stmt = stmt.order_by(ScreeningResultModel.created_at.desc())
            result = await session.execute(stmt)
            return list(result.scalars().all())

    async def list_all(
        self,
        school: Optional[str] = None,
        screening_year: Optional[int] = None,
        page: int = 1,
        limit: int = 50,
    ) -> Tuple[List[Tuple[ScreeningResultModel, StudentModel]], int]:
        """One page of records joined with their students, plus the total match count."""
        filters = []
        if school:
            filters.append(ScreeningResultModel.school == school)
        if screening_year is not None:
            filters.append(ScreeningResultModel.screening_year == screening_year)

        async with get_db() as session:
            count_stmt = select(func.count(ScreeningResultModel.id)).where(*filters)
            total = (await session.execute(count_stmt)).scalar_one()

            stmt = (
                select(ScreeningResultModel, StudentModel)
                .join(StudentModel, ScreeningResultModel.student_id == StudentModel.id)
                .where(*filters)
                .order_by(ScreeningResultModel.created_at.desc())
                .offset((page - 1) * limit)
                .limit(limit)
            )
            result = await session.execute(stmt)
            rows = [(record, student) for record, student in result.all()]
        return rows, total

    async def results_by_student(
        self,
        student_ids: Iterable[str],
        screening_year: int,
    ) -> Dict[str, ScreeningResultModel]:
        """Records for the given students in one program year, keyed by student id."""
        student_ids = list(student_ids)
        if not student_ids:
            return {}
        async with get_db() as session:
            stmt = select(ScreeningResultModel).where(
                ScreeningResultModel.student_id.in_(student_ids),
                ScreeningResultModel.screening_year == screening_year,
            )
            result = await session.execute(stmt)
            return {record.student_id: record for record in result.scalars().all()}


# Global instance
_screening_results_store: Optional[ScreeningResultsStore] = None


def get_screening_results_store() -> ScreeningResultsStore:
    """Get or create global ScreeningResultsStore."""
    global _screening_results_store
    if _screening_results_store is None:
        _screening_results_store = ScreeningResultsStore()
    return _screening_results_store
