"""Enrollment operations.

Responsibilities:
- Enroll an active student into a course with free seats
- Reject duplicates (a non-dropped enrollment for the same pair)
- Show a student's enrollments together with their courses

All checks run before anything is written. The course counter is only
incremented once the enrollment row has been appended.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NoReturn

import structlog

from registrar.core.errors import (
    CapacityExceededError,
    CourseFullError,
    CourseNotFoundError,
    DuplicateEnrollmentError,
    StudentNotFoundError,
)
from registrar.db.record_store import ENROLLMENTS, RecordStore
from registrar.db.records import Course, Enrollment

logger = structlog.get_logger(__name__)

OP_ENROLL = "Enrollment"
OP_VIEW = "Student Enrollments"


@dataclass
class EnrollmentView:
    """An enrollment with its course (None if the course is unknown)."""

    enrollment: Enrollment
    course: Course | None


def _reject(store: RecordStore, error: Exception, details: str, warning: bool = False) -> NoReturn:
    """Log a rejected enrollment to both logs, then raise `error`."""
    if warning:
        store.log.warning(OP_ENROLL, details)
    else:
        store.log.error(OP_ENROLL, details)
    logger.warning("enrollments.rejected", reason=type(error).__name__, details=details)
    raise error


def enroll(store: RecordStore, student_id: int, course_id: int) -> Enrollment:
    """Enroll a student in a course.

    Args:
        store: Record store
        student_id: Identifier of an active student
        course_id: Identifier of an existing course

    Returns:
        The new pending Enrollment

    Raises:
        CapacityExceededError: If the enrollments table is full
        StudentNotFoundError: If no active student has this id
        CourseNotFoundError: If no course has this id
        DuplicateEnrollmentError: If the pair is already enrolled
        CourseFullError: If the course has no free seats
    """
    if store.is_full(ENROLLMENTS):
        _reject(
            store,
            CapacityExceededError(ENROLLMENTS, store.capacities.enrollments),
            "Maximum enrollment limit exceeded",
        )

    student = store.find_student(student_id)
    if student is None or not student.is_active:
        _reject(store, StudentNotFoundError(student_id), f"Student not found: {student_id}")

    course = store.find_course(course_id)
    if course is None:
        _reject(store, CourseNotFoundError(course_id), f"Course not found: {course_id}")

    existing = store.find_open_enrollment(student_id, course_id)
    if existing is not None:
        _reject(
            store,
            DuplicateEnrollmentError(student_id, course_id, existing.enrollment_id),
            f"Duplicate enrollment attempt: student {student_id}, course {course_id}",
            warning=True,
        )

    if course.is_full:
        _reject(
            store,
            CourseFullError(course_id, course.max_capacity),
            f"Course {course_id} at maximum capacity",
        )

    enrollment = store.add_enrollment(student_id, course_id)
    course.current_enrollment += 1

    store.log.success(OP_ENROLL, f"Enrolled student {student_id} in course {course_id}")
    logger.info(
        "enrollments.created",
        enrollment_id=enrollment.enrollment_id,
        student_id=student_id,
        course_id=course_id,
        seats_left=course.available_seats,
    )
    return enrollment


def student_enrollments(store: RecordStore, student_id: int) -> list[EnrollmentView]:
    """All enrollments of a student, in enrollment order.

    Raises:
        StudentNotFoundError: If no student has this id
    """
    if store.find_student(student_id) is None:
        store.log.warning(OP_VIEW, f"Student ID not found: {student_id}")
        logger.warning("enrollments.rejected", reason="StudentNotFoundError", student_id=student_id)
        raise StudentNotFoundError(student_id)

    views = [
        EnrollmentView(enrollment=e, course=store.find_course(e.course_id))
        for e in store.enrollments_for_student(student_id)
    ]
    store.log.info(OP_VIEW, f"Student {student_id} has {len(views)} enrollment(s)")
    return views
