"""In-memory storage for the registrar.

Provides:
- Entity records (Student, Course, Enrollment)
- RecordStore: the single owner of all tables for one run
"""

from registrar.db.record_store import RecordStore
from registrar.db.records import Course, Enrollment, EnrollmentStatus, Student

__all__ = ["Course", "Enrollment", "EnrollmentStatus", "RecordStore", "Student"]
