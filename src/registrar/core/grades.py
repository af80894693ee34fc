"""Grade recording and per-student GPA."""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from registrar.core.errors import (
    EnrollmentNotFoundError,
    InvalidGradeError,
    StudentNotFoundError,
)
from registrar.db.record_store import RecordStore
from registrar.db.records import Enrollment, EnrollmentStatus, Student
from registrar.utils.validators import grade_points, is_valid_grade, letter_grade

logger = structlog.get_logger(__name__)

OP_RECORD = "Record Grade"
OP_GPA = "Student GPA"


@dataclass
class GpaReport:
    """GPA over a student's completed enrollments.

    gpa is None when the student has no completed course (not applicable).
    """

    student: Student
    completed_courses: int
    gpa: float | None


def record_grade(store: RecordStore, enrollment_id: int, score: float) -> Enrollment:
    """Record a 0-100 score on an enrollment and mark it completed.

    Raises:
        InvalidGradeError: If score is outside [0, 100]
        EnrollmentNotFoundError: If no enrollment has this id
    """
    if not is_valid_grade(score):
        store.log.error(OP_RECORD, f"Invalid grade value: {score:g}")
        logger.warning("grades.rejected", reason="InvalidGradeError", grade=score)
        raise InvalidGradeError(score)

    enrollment = store.find_enrollment(enrollment_id)
    if enrollment is None:
        store.log.error(OP_RECORD, f"Enrollment not found: {enrollment_id}")
        logger.warning(
            "grades.rejected", reason="EnrollmentNotFoundError", enrollment_id=enrollment_id
        )
        raise EnrollmentNotFoundError(enrollment_id)

    letter = letter_grade(score)
    enrollment.grade = score
    enrollment.letter_grade = letter
    enrollment.grade_points = grade_points(letter)
    enrollment.status = EnrollmentStatus.COMPLETED

    store.log.success(OP_RECORD, f"Recorded grade {score:.2f} for enrollment {enrollment_id}")
    logger.info(
        "grades.recorded",
        enrollment_id=enrollment_id,
        grade=score,
        letter=letter,
    )
    return enrollment


def student_gpa(store: RecordStore, student_id: int) -> GpaReport:
    """Average grade points over the student's completed enrollments.

    Raises:
        StudentNotFoundError: If no student has this id
    """
    student = store.find_student(student_id)
    if student is None:
        store.log.warning(OP_GPA, f"Student ID not found: {student_id}")
        logger.warning("grades.rejected", reason="StudentNotFoundError", student_id=student_id)
        raise StudentNotFoundError(student_id)

    completed = [e for e in store.enrollments_for_student(student_id) if e.is_completed]
    gpa = None
    if completed:
        gpa = sum(e.grade_points for e in completed) / len(completed)

    details = f"GPA {gpa:.2f}" if gpa is not None else "GPA N/A"
    store.log.info(OP_GPA, f"Student {student_id}: {details} over {len(completed)} course(s)")
    return GpaReport(student=student, completed_courses=len(completed), gpa=gpa)
