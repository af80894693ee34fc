"""Domain errors.

Every failure an operation reports derives from RegistrarError so the shell
can catch them in one place. Errors carry the identifiers involved.
"""


class RegistrarError(Exception):
    """Base class for all reported operation failures."""

    pass


class CapacityExceededError(RegistrarError):
    """Raised when appending to a table that reached its configured size."""

    def __init__(self, table: str, capacity: int):
        self.table = table
        self.capacity = capacity
        super().__init__(f"Maximum {table} limit reached ({capacity})")


class NotFoundError(RegistrarError):
    """Raised when a lookup by identifier finds nothing."""

    entity = "record"

    def __init__(self, entity_id: int):
        self.entity_id = entity_id
        super().__init__(f"{self.entity.capitalize()} not found: {entity_id}")


class StudentNotFoundError(NotFoundError):
    entity = "student"


class CourseNotFoundError(NotFoundError):
    entity = "course"


class EnrollmentNotFoundError(NotFoundError):
    entity = "enrollment"


class CourseFullError(RegistrarError):
    """Raised when enrolling into a course with no seats left."""

    def __init__(self, course_id: int, max_capacity: int):
        self.course_id = course_id
        self.max_capacity = max_capacity
        super().__init__(
            f"Course {course_id} is at maximum capacity ({max_capacity})"
        )


class DuplicateEnrollmentError(RegistrarError):
    """Raised when a non-dropped enrollment already links the pair."""

    def __init__(self, student_id: int, course_id: int, existing_enrollment_id: int):
        self.student_id = student_id
        self.course_id = course_id
        self.existing_enrollment_id = existing_enrollment_id
        super().__init__(
            f"Student {student_id} is already enrolled in course {course_id} "
            f"(enrollment {existing_enrollment_id})"
        )


class InvalidGradeError(RegistrarError):
    """Raised for a score outside [0, 100]."""

    def __init__(self, score: float):
        self.score = score
        super().__init__(f"Grade must be between 0 and 100, got {score:g}")


class ExportError(RegistrarError):
    """Raised when the export destination cannot be written."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not write export file {path}: {reason}")
