"""Course operations: register, list and look up courses."""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from registrar.core.errors import CapacityExceededError, CourseNotFoundError
from registrar.db.record_store import RecordStore
from registrar.db.records import Course

logger = structlog.get_logger(__name__)

OP_ADD = "Add Course"
OP_LIST = "List Courses"
OP_DISPLAY = "Display Course"


@dataclass
class CourseInput:
    """Fields collected for a new course."""

    code: str
    name: str
    description: str = ""
    credits: int = 0
    max_capacity: int = 0
    difficulty: float = 0.0


def register_course(store: RecordStore, data: CourseInput) -> Course:
    """Register a new course with no enrollments.

    Raises:
        CapacityExceededError: If the courses table is full
    """
    try:
        course = store.add_course(
            code=data.code,
            name=data.name,
            description=data.description,
            credits=data.credits,
            max_capacity=data.max_capacity,
            difficulty=data.difficulty,
            current_enrollment=0,
        )
    except CapacityExceededError:
        store.log.error(OP_ADD, "Maximum course limit exceeded")
        raise

    store.log.success(OP_ADD, f"Added course: {course.name} ({course.code})")
    logger.info("courses.registered", course_id=course.course_id, code=course.code)
    return course


def list_courses(store: RecordStore) -> list[Course]:
    """All courses in creation order."""
    courses = list(store.courses)
    store.log.info(OP_LIST, f"Listed {len(courses)} course(s)")
    return courses


def get_course(store: RecordStore, course_id: int) -> Course:
    """Look up a course.

    Raises:
        CourseNotFoundError: If no course has this id
    """
    course = store.find_course(course_id)
    if course is None:
        store.log.warning(OP_DISPLAY, f"Course ID not found: {course_id}")
        logger.warning("courses.rejected", reason="CourseNotFoundError", course_id=course_id)
        raise CourseNotFoundError(course_id)

    store.log.info(OP_DISPLAY, f"Displayed course {course_id}")
    return course
