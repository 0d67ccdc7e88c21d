"""Student, school and screening-result directories backed by the database."""
from vhsa.directory.exceptions import (
    StudentNotFoundError,
    SchoolNotFoundError,
    DuplicateSchoolError,
)
from vhsa.directory.students import StudentDirectory, get_student_directory
from vhsa.directory.schools import SchoolsDirectory, get_schools_directory
from vhsa.directory.screenings import (
    ScreeningResultsStore,
    flatten_submission,
    get_screening_results_store,
)

__all__ = [
    # Exceptions
    "StudentNotFoundError",
    "SchoolNotFoundError",
    "DuplicateSchoolError",
    # Directories
    "StudentDirectory",
    "get_student_directory",
    "SchoolsDirectory",
    "get_schools_directory",
    "ScreeningResultsStore",
    "flatten_submission",
    "get_screening_results_store",
]
