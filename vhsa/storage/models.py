"""SQLAlchemy ORM models for the VHSA database tables."""
from datetime import datetime, timezone

from sqlalchemy import (
    Boolean, Column, Date, DateTime, ForeignKey, Index, Integer, String, Text, UniqueConstraint,
)
from sqlalchemy.orm import declarative_base, relationship


def _utcnow():
    """Return current UTC time (timezone-aware)."""
    return datetime.now(timezone.utc)


Base = declarative_base()


def _iso(value):
    return value.isoformat() if value else None


class SchoolModel(Base):
    """Campus participating in the screening program."""
    __tablename__ = "schools"

    id = Column(String(36), primary_key=True)
    name = Column(String(200), nullable=False, unique=True)
    active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "active": self.active,
            "createdAt": _iso(self.created_at),
        }


class StudentModel(Base):
    """Roster entry; ``unique_id`` is the school code plus a sequence number."""
    __tablename__ = "students"

    id = Column(String(36), primary_key=True)
    unique_id = Column(String(50), nullable=False, unique=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    grade = Column(String(30), nullable=False)
    gender = Column(String(20), nullable=False)
    school = Column(String(200), nullable=False)
    teacher = Column(String(200), nullable=True)
    dob = Column(Date, nullable=True)
    status = Column(String(20), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)

    screening_results = relationship("ScreeningResultModel", back_populates="student")

    __table_args__ = (
        Index('ix_students_last_name', 'last_name'),
        Index('ix_students_school', 'school'),
    )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "uniqueId": self.unique_id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "grade": self.grade,
            "gender": self.gender,
            "school": self.school,
            "teacher": self.teacher,
            "dob": _iso(self.dob),
            "status": self.status,
            "createdAt": _iso(self.created_at),
        }

    def summary(self) -> dict:
        """Fields shown alongside screening results in admin listings."""
        return {
            "id": self.id,
            "uniqueId": self.unique_id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "grade": self.grade,
            "gender": self.gender,
            "school": self.school,
            "teacher": self.teacher,
        }


class ScreeningResultModel(Base):
    """One student's screening results for one program year.

    Per-day sub-results are flattened into ``<screening>_<day>_<field>`` columns.
    """
    __tablename__ = "screening_results"

    id = Column(String(36), primary_key=True)
    student_id = Column(String(36), ForeignKey("students.id"), nullable=False)
    school = Column(String(200), nullable=True)
    screening_year = Column(Integer, nullable=False)
    screening_event_date = Column(Date, nullable=True)
    absent = Column(Boolean, nullable=True)
    notes = Column(Text, nullable=True)

    vision_day1_screener = Column(String(100), nullable=True)
    vision_day1_result = Column(String(50), nullable=True)
    vision_day1_right_eye = Column(String(20), nullable=True)
    vision_day1_left_eye = Column(String(20), nullable=True)
    vision_day2_screener = Column(String(100), nullable=True)
    vision_day2_result = Column(String(50), nullable=True)
    vision_day2_right_eye = Column(String(20), nullable=True)
    vision_day2_left_eye = Column(String(20), nullable=True)

    hearing_day1_screener = Column(String(100), nullable=True)
    hearing_day1_result = Column(String(50), nullable=True)
    hearing_day1_right_1000 = Column(String(20), nullable=True)
    hearing_day1_right_2000 = Column(String(20), nullable=True)
    hearing_day1_right_4000 = Column(String(20), nullable=True)
    hearing_day1_left_1000 = Column(String(20), nullable=True)
    hearing_day1_left_2000 = Column(String(20), nullable=True)
    hearing_day1_left_4000 = Column(String(20), nullable=True)
    hearing_day2_screener = Column(String(100), nullable=True)
    hearing_day2_result = Column(String(50), nullable=True)
    hearing_day2_right_1000 = Column(String(20), nullable=True)
    hearing_day2_right_2000 = Column(String(20), nullable=True)
    hearing_day2_right_4000 = Column(String(20), nullable=True)
    hearing_day2_left_1000 = Column(String(20), nullable=True)
    hearing_day2_left_2000 = Column(String(20), nullable=True)
    hearing_day2_left_4000 = Column(String(20), nullable=True)

    acanthosis_day1_screener = Column(String(100), nullable=True)
    acanthosis_day1_result = Column(String(50), nullable=True)
    acanthosis_day2_screener = Column(String(100), nullable=True)
    acanthosis_day2_result = Column(String(50), nullable=True)

    scoliosis_day1_screener = Column(String(100), nullable=True)
    scoliosis_day1_result = Column(String(50), nullable=True)
    scoliosis_day2_screener = Column(String(100), nullable=True)
    scoliosis_day2_result = Column(String(50), nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)

    student = relationship("StudentModel", back_populates="screening_results")

    __table_args__ = (
        UniqueConstraint('student_id', 'screening_year', name='uq_screening_student_year'),
        Index('ix_screening_results_school_year', 'school', 'screening_year'),
    )

    def to_dict(self) -> dict:
        data = {}
        for column in self.__table__.columns:
            value = getattr(self, column.name)
            if hasattr(value, "isoformat"):
                value = value.isoformat()
            data[column.name] = value
        return data
