"""Student operations.

Responsibilities:
- Register students (advisory email/phone checks)
- List, search and look up active students

Every call appends one outcome entry to the store's operation log.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import structlog

from registrar.core.errors import CapacityExceededError, StudentNotFoundError
from registrar.db.record_store import STUDENTS, RecordStore
from registrar.db.records import Student
from registrar.utils.validators import is_valid_email, is_valid_phone

logger = structlog.get_logger(__name__)

OP_ADD = "Add Student"
OP_LIST = "List Students"
OP_SEARCH = "Search Student"
OP_DISPLAY = "Display Student"


@dataclass
class StudentInput:
    """Profile fields collected for a new student."""

    name: str
    email: str = ""
    phone: str = ""
    address: str = ""
    admission_year: int = 0
    major: str = ""


@dataclass
class RegistrationResult:
    """Result of student registration."""

    student: Student
    warnings: list[str] = field(default_factory=list)


def register_student(store: RecordStore, data: StudentInput) -> RegistrationResult:
    """Register a new active student.

    Malformed email or phone only produces a warning; the student is created.

    Raises:
        CapacityExceededError: If the students table is full
    """
    try:
        store.ensure_room(STUDENTS)
    except CapacityExceededError:
        store.log.error(OP_ADD, "Maximum student limit exceeded")
        raise

    warnings: list[str] = []
    if not is_valid_email(data.email):
        warnings.append("Email format may be invalid")
        store.log.warning(OP_ADD, f"Invalid email format: {data.email}")
    if not is_valid_phone(data.phone):
        warnings.append("Phone number format may be invalid")
        store.log.warning(OP_ADD, f"Invalid phone format: {data.phone}")

    student = store.add_student(
        name=data.name,
        email=data.email,
        phone=data.phone,
        address=data.address,
        admission_year=data.admission_year,
        major=data.major,
        is_active=True,
    )

    store.log.success(OP_ADD, f"Added student: {student.name} (ID: {student.student_id})")
    logger.info(
        "students.registered",
        student_id=student.student_id,
        warnings=len(warnings),
    )
    return RegistrationResult(student=student, warnings=warnings)


def list_students(store: RecordStore) -> list[Student]:
    """All active students in registration order."""
    students = [s for s in store.students if s.is_active]
    store.log.info(OP_LIST, f"Listed {len(students)} student(s)")
    return students


def search_students(store: RecordStore, fragment: str) -> list[Student]:
    """Active students whose name contains `fragment` (case-sensitive)."""
    matches = [s for s in store.students if s.is_active and fragment in s.name]
    store.log.info(OP_SEARCH, f"Search '{fragment}' matched {len(matches)} student(s)")
    return matches


def get_student(store: RecordStore, student_id: int) -> Student:
    """Look up an active student.

    Raises:
        StudentNotFoundError: If no active student has this id
    """
    student = store.find_student(student_id)
    if student is None or not student.is_active:
        store.log.warning(OP_DISPLAY, f"Student ID not found: {student_id}")
        logger.warning("students.rejected", reason="StudentNotFoundError", student_id=student_id)
        raise StudentNotFoundError(student_id)

    store.log.info(OP_DISPLAY, f"Displayed student {student_id}")
    return student
