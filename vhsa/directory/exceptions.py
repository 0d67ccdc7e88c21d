"""Exceptions raised by the student, school and screening directories."""


class StudentNotFoundError(Exception):
    """No student with the requested identifier."""
    pass


class SchoolNotFoundError(Exception):
    """No school with the requested id."""
    pass


class DuplicateSchoolError(Exception):
    """A school with this name already exists."""
    pass
