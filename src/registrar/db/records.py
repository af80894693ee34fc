"""Entity records held by the record store.

Student, Course and Enrollment are mutable dataclasses: operations update
fields in place on the object returned by a store lookup. Timestamps are
ISO-8601 UTC strings, filled in on creation when not provided.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from registrar.utils.text_utils import utc_now

# Letter shown for an enrollment that has not been graded yet
UNGRADED_LETTER = "-"


class EnrollmentStatus(Enum):
    """Lifecycle of an enrollment.

    PENDING: created by enroll, not graded
    ACTIVE: reserved, no operation sets it
    COMPLETED: a grade has been recorded
    DROPPED: reserved, excluded from the duplicate check
    """

    PENDING = "pending"
    ACTIVE = "active"
    COMPLETED = "completed"
    DROPPED = "dropped"


@dataclass
class Student:
    """A registered student."""

    student_id: int
    name: str
    email: str = ""
    phone: str = ""
    address: str = ""
    admission_year: int = 0
    major: str = ""
    registered_at: str = ""
    is_active: bool = True

    def __post_init__(self):
        if not self.registered_at:
            self.registered_at = utc_now()


@dataclass
class Course:
    """A course offering with a seat limit."""

    course_id: int
    code: str
    name: str
    description: str = ""
    credits: int = 0
    max_capacity: int = 0
    current_enrollment: int = 0
    difficulty: float = 0.0
    created_at: str = ""

    def __post_init__(self):
        if not self.created_at:
            self.created_at = utc_now()

    @property
    def is_full(self) -> bool:
        """True when no seat is left."""
        return self.current_enrollment >= self.max_capacity

    @property
    def available_seats(self) -> int:
        return self.max_capacity - self.current_enrollment

    @property
    def enrollment_rate(self) -> float | None:
        """Fraction of seats taken, None for zero-capacity courses."""
        if self.max_capacity <= 0:
            return None
        return self.current_enrollment / self.max_capacity


@dataclass
class Enrollment:
    """Link between one student and one course, with grading state."""

    enrollment_id: int
    student_id: int
    course_id: int
    grade: float = 0.0
    letter_grade: str = UNGRADED_LETTER
    grade_points: float = 0.0
    status: EnrollmentStatus = EnrollmentStatus.PENDING
    enrolled_at: str = ""

    def __post_init__(self):
        if not self.enrolled_at:
            self.enrolled_at = utc_now()

    @property
    def is_completed(self) -> bool:
        return self.status is EnrollmentStatus.COMPLETED
