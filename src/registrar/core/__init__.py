"""Core business logic module.

Modules:
- errors: RegistrarError hierarchy
- operation_log: append-only audit trail of operations
- students: register, list, search and look up students
- courses: register, list and look up courses
- enrollments: enroll students, view a student's enrollments
- grades: record grades, per-student GPA
- statistics: class and system statistics
- exporter: flat-text export of the record store
"""

__all__ = [
    "errors",
    "operation_log",
    "students",
    "courses",
    "enrollments",
    "grades",
    "statistics",
    "exporter",
]
