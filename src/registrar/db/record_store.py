"""In-memory record store.

Owns the student, course and enrollment tables plus the operation log for
the lifetime of one run. Each table is an ordered list (insertion order is
listing and export order) with a dict index from identifier to record.

Identifiers are assigned as `offset + current row count`. Rows are never
removed, so identifiers are unique within a run.
"""

from __future__ import annotations

from typing import Any

import structlog

from registrar.config.app_config import AppConfig, CapacityConfig, IdOffsetConfig
from registrar.core.errors import CapacityExceededError
from registrar.core.operation_log import OperationLog
from registrar.db.records import Course, Enrollment, EnrollmentStatus, Student

logger = structlog.get_logger(__name__)

STUDENTS = "students"
COURSES = "courses"
ENROLLMENTS = "enrollments"


class RecordStore:
    """Owner of every table. Created once and passed into each operation."""

    def __init__(
        self,
        capacities: CapacityConfig | None = None,
        id_offsets: IdOffsetConfig | None = None,
    ):
        self.capacities = capacities or CapacityConfig()
        self.id_offsets = id_offsets or IdOffsetConfig()

        self._students: list[Student] = []
        self._courses: list[Course] = []
        self._enrollments: list[Enrollment] = []

        self._student_index: dict[int, Student] = {}
        self._course_index: dict[int, Course] = {}
        self._enrollment_index: dict[int, Enrollment] = {}

        self.log = OperationLog(capacity=self.capacities.log_entries)

    @classmethod
    def from_config(cls, config: AppConfig) -> RecordStore:
        """Build an empty store sized by the application config."""
        return cls(capacities=config.capacities, id_offsets=config.id_offsets)

    # =========================================================================
    # CAPACITY
    # =========================================================================

    def _capacity_of(self, table: str) -> int:
        return getattr(self.capacities, table)

    def _rows_of(self, table: str) -> list[Any]:
        return {
            STUDENTS: self._students,
            COURSES: self._courses,
            ENROLLMENTS: self._enrollments,
        }[table]

    def is_full(self, table: str) -> bool:
        """True when the named table reached its capacity."""
        return len(self._rows_of(table)) >= self._capacity_of(table)

    def ensure_room(self, table: str) -> None:
        """Raise CapacityExceededError if the named table is full."""
        if self.is_full(table):
            capacity = self._capacity_of(table)
            logger.warning("record_store.table_full", table=table, capacity=capacity)
            raise CapacityExceededError(table, capacity)

    # =========================================================================
    # STUDENTS
    # =========================================================================

    @property
    def students(self) -> tuple[Student, ...]:
        return tuple(self._students)

    def next_student_id(self) -> int:
        return self.id_offsets.students + len(self._students)

    def add_student(self, **fields: Any) -> Student:
        """Append a new student with the next identifier.

        Raises:
            CapacityExceededError: If the students table is full
        """
        self.ensure_room(STUDENTS)
        student = Student(student_id=self.next_student_id(), **fields)
        self._students.append(student)
        self._student_index[student.student_id] = student
        logger.debug("record_store.student_added", student_id=student.student_id)
        return student

    def find_student(self, student_id: int) -> Student | None:
        return self._student_index.get(student_id)

    # =========================================================================
    # COURSES
    # =========================================================================

    @property
    def courses(self) -> tuple[Course, ...]:
        return tuple(self._courses)

    def next_course_id(self) -> int:
        return self.id_offsets.courses + len(self._courses)

    def add_course(self, **fields: Any) -> Course:
        """Append a new course with the next identifier.

        Raises:
            CapacityExceededError: If the courses table is full
        """
        self.ensure_room(COURSES)
        course = Course(course_id=self.next_course_id(), **fields)
        self._courses.append(course)
        self._course_index[course.course_id] = course
        logger.debug("record_store.course_added", course_id=course.course_id)
        return course

    def find_course(self, course_id: int) -> Course | None:
        return self._course_index.get(course_id)

    # =========================================================================
    # ENROLLMENTS
    # =========================================================================

    @property
    def enrollments(self) -> tuple[Enrollment, ...]:
        return tuple(self._enrollments)

    def next_enrollment_id(self) -> int:
        return self.id_offsets.enrollments + len(self._enrollments)

    def add_enrollment(self, student_id: int, course_id: int) -> Enrollment:
        """Append a new pending enrollment with the next identifier.

        Does not touch the course counter; see core.enrollments.enroll.

        Raises:
            CapacityExceededError: If the enrollments table is full
        """
        self.ensure_room(ENROLLMENTS)
        enrollment = Enrollment(
            enrollment_id=self.next_enrollment_id(),
            student_id=student_id,
            course_id=course_id,
        )
        self._enrollments.append(enrollment)
        self._enrollment_index[enrollment.enrollment_id] = enrollment
        logger.debug(
            "record_store.enrollment_added",
            enrollment_id=enrollment.enrollment_id,
        )
        return enrollment

    def find_enrollment(self, enrollment_id: int) -> Enrollment | None:
        return self._enrollment_index.get(enrollment_id)

    def enrollments_for_student(self, student_id: int) -> list[Enrollment]:
        return [e for e in self._enrollments if e.student_id == student_id]

    def enrollments_for_course(self, course_id: int) -> list[Enrollment]:
        return [e for e in self._enrollments if e.course_id == course_id]

    def find_open_enrollment(self, student_id: int, course_id: int) -> Enrollment | None:
        """Find a non-dropped enrollment linking the pair."""
        for enrollment in self._enrollments:
            if (
                enrollment.student_id == student_id
                and enrollment.course_id == course_id
                and enrollment.status is not EnrollmentStatus.DROPPED
            ):
                return enrollment
        return None
