"""Schools Directory: campus list with soft delete."""
from typing import List, Optional
from uuid import uuid4

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from vhsa.config.logging_config import get_logger
from vhsa.directory.exceptions import DuplicateSchoolError, SchoolNotFoundError
from vhsa.storage.database import get_db
from vhsa.storage.models import SchoolModel

logger = get_logger(__name__)


class SchoolsDirectory:
    """Async access to the schools table. Schools are deactivated, never deleted."""

    async def list_schools(self, active: Optional[bool] = None) -> List[SchoolModel]:
        async with get_db() as session:
            stmt = select(SchoolModel).order_by(SchoolModel.name.asc())
            if active is not None:
                stmt = stmt.where(SchoolModel.active == active)
            result = await session.execute(stmt)
            return list(result.scalars().all())

    async def _ensure_name_free(self, session, name: str, school_id: Optional[str] = None) -> None:
        stmt = select(SchoolModel.id).where(SchoolModel.name == name)
        if school_id is not None:
            stmt = stmt.where(SchoolModel.id != school_id)
        result = await session.execute(stmt)
        if result.first() is not None:
            raise DuplicateSchoolError(name)

    async def create(self, name: str, active: bool = True) -> SchoolModel:
        name = name.strip()
        school = SchoolModel(id=str(uuid4()), name=name, active=active)
        try:
            async with get_db() as session:
                await self._ensure_name_free(session, name)
                session.add(school)
                await session.flush()
        except IntegrityError as e:
            raise DuplicateSchoolError(name) from e

        logger.info("School created", school_id=school.id, name=name)
        return school

    async def update(
        self,
        school_id: str,
        name: Optional[str] = None,
        active: Optional[bool] = None,
    ) -> SchoolModel:
        """Apply the provided fields; omitted fields keep their values."""
        try:
            async with get_db() as session:
                school = await session.get(SchoolModel, school_id)
                if school is None:
                    raise SchoolNotFoundError(school_id)
                if name is not None:
                    name = name.strip()
                    await self._ensure_name_free(session, name, school_id)
                    school.name = name
                if active is not None:
                    school.active = active
                await session.flush()
        except IntegrityError as e:
            raise DuplicateSchoolError(name) from e

        logger.info("School updated", school_id=school_id, name=school.name, active=school.active)
        return school

    async def deactivate(self, school_id: str) -> SchoolModel:
        """Soft delete: mark the school inactive."""
        async with get_db() as session:
            school = await session.get(SchoolModel, school_id)
            if school is None:
                raise SchoolNotFoundError(school_id)
            school.active = False

        logger.info("School deactivated", school_id=school_id)
        return school


# Global instance
_schools_directory: Optional[SchoolsDirectory] = None


def get_schools_directory() -> SchoolsDirectory:
    """Get or create global SchoolsDirectory."""
    global _schools_directory
    if _schools_directory is None:
        _schools_directory = SchoolsDirectory()
    return _schools_directory
