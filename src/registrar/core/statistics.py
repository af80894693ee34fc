"""Aggregate statistics.

- class_statistics: grade distribution of one course (completed only)
- system_statistics: table counts, system GPA, mean enrollment rate
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from registrar.core.errors import CourseNotFoundError
from registrar.db.record_store import RecordStore
from registrar.db.records import Course

logger = structlog.get_logger(__name__)

OP_CLASS = "Class Statistics"
OP_SYSTEM = "System Statistics"


@dataclass
class ClassStatistics:
    """Grade summary for one course.

    Numeric fields are None when no enrollment is graded yet.
    """

    course: Course
    graded_count: int
    average: float | None = None
    highest: float | None = None
    lowest: float | None = None
    grade_range: float | None = None

    @property
    def has_grades(self) -> bool:
        return self.graded_count > 0


@dataclass
class SystemStatistics:
    """Aggregate counts and averages across all tables."""

    total_students: int
    total_courses: int
    total_enrollments: int
    total_log_entries: int
    completed_enrollments: int
    average_gpa: float | None
    average_enrollment_rate: float | None


def class_statistics(store: RecordStore, course_id: int) -> ClassStatistics:
    """Compute mean/max/min/range of grades for a course.

    Raises:
        CourseNotFoundError: If no course has this id
    """
    course = store.find_course(course_id)
    if course is None:
        store.log.warning(OP_CLASS, f"Course ID not found: {course_id}")
        logger.warning("statistics.rejected", reason="CourseNotFoundError", course_id=course_id)
        raise CourseNotFoundError(course_id)

    grades = [e.grade for e in store.enrollments_for_course(course_id) if e.is_completed]
    if not grades:
        store.log.info(OP_CLASS, f"Course {course_id}: no grades")
        return ClassStatistics(course=course, graded_count=0)

    highest = max(grades)
    lowest = min(grades)
    stats = ClassStatistics(
        course=course,
        graded_count=len(grades),
        average=sum(grades) / len(grades),
        highest=highest,
        lowest=lowest,
        grade_range=highest - lowest,
    )
    store.log.info(
        OP_CLASS,
        f"Course {course_id}: {stats.graded_count} graded, average {stats.average:.2f}",
    )
    return stats


def system_statistics(store: RecordStore) -> SystemStatistics:
    """Compute system-wide statistics.

    The enrollment rate averages current/max over courses with a positive
    capacity only.
    """
    completed = [e for e in store.enrollments if e.is_completed]
    average_gpa = None
    if completed:
        average_gpa = sum(e.grade_points for e in completed) / len(completed)

    rates = [c.enrollment_rate for c in store.courses if c.enrollment_rate is not None]
    average_rate = sum(rates) / len(rates) if rates else None

    stats = SystemStatistics(
        total_students=len(store.students),
        total_courses=len(store.courses),
        total_enrollments=len(store.enrollments),
        total_log_entries=len(store.log),
        completed_enrollments=len(completed),
        average_gpa=average_gpa,
        average_enrollment_rate=average_rate,
    )
    store.log.info(
        OP_SYSTEM,
        f"{stats.total_students} students, {stats.total_courses} courses, "
        f"{stats.total_enrollments} enrollments",
    )
    logger.debug("statistics.system", completed=len(completed), rated_courses=len(rates))
    return stats
