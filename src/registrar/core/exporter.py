"""Flat-text export of the record store.

Output structure (UTF-8, overwritten on every export):
- title and export date
- STUDENTS, COURSES, ENROLLMENTS sections, in that order, each with a
  "Total <Name>: N" line and one "Field: value | ..." line per record
- END OF EXPORT trailer

The report is for humans; there is no import routine.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

import structlog

from registrar.core.errors import ExportError
from registrar.db.record_store import RecordStore
from registrar.db.records import Course, Enrollment, Student
from registrar.utils.text_utils import DISPLAY_TIME_FORMAT

logger = structlog.get_logger(__name__)

OP_EXPORT = "Export Data"


@dataclass
class ExportResult:
    """Result of an export: destination and per-section record counts."""

    path: Path
    students: int
    courses: int
    enrollments: int


def _section_header(title: str) -> str:
    return f"\n============ {title} ============\n"


def _student_line(student: Student) -> str:
    return (
        f"ID: {student.student_id} | Name: {student.name} | Email: {student.email} "
        f"| Phone: {student.phone} | Major: {student.major}"
    )


def _course_line(course: Course) -> str:
    return (
        f"ID: {course.course_id} | Code: {course.code} | Name: {course.name} "
        f"| Credits: {course.credits} "
        f"| Enrolled: {course.current_enrollment}/{course.max_capacity}"
    )


def _enrollment_line(enrollment: Enrollment) -> str:
    return (
        f"Enrollment ID: {enrollment.enrollment_id} | Student: {enrollment.student_id} "
        f"| Course: {enrollment.course_id} | Grade: {enrollment.grade:.2f} "
        f"| Status: {enrollment.status.value}"
    )


def render_report(store: RecordStore) -> str:
    """Build the full report text for the current store contents."""
    students = store.students
    courses = store.courses
    enrollments = store.enrollments

    lines = [
        "================== SYSTEM DATA EXPORT ==================",
        f"Export Date: {datetime.now().strftime(DISPLAY_TIME_FORMAT)}",
        "",
        _section_header("STUDENTS"),
        f"Total Students: {len(students)}",
        "",
    ]
    lines.extend(_student_line(s) for s in students)

    lines += [_section_header("COURSES"), f"Total Courses: {len(courses)}", ""]
    lines.extend(_course_line(c) for c in courses)

    lines += [_section_header("ENROLLMENTS"), f"Total Enrollments: {len(enrollments)}", ""]
    lines.extend(_enrollment_line(e) for e in enrollments)

    lines += ["", "========== END OF EXPORT =========="]
    return "\n".join(lines) + "\n"


def export_report(store: RecordStore, path: Path) -> ExportResult:
    """Write the report to `path`, replacing any previous file.

    Args:
        store: Record store to export
        path: Destination file (the shell passes the configured export path)

    Returns:
        ExportResult with the destination and counts written

    Raises:
        ExportError: If the file cannot be created or written
    """
    report = render_report(store)

    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(report)
    except OSError as e:
        store.log.error(OP_EXPORT, f"Failed to create file: {path}")
        logger.error("export.failed", path=str(path), error=str(e))
        raise ExportError(path, e.strerror or str(e)) from e

    result = ExportResult(
        path=path,
        students=len(store.students),
        courses=len(store.courses),
        enrollments=len(store.enrollments),
    )
    store.log.success(OP_EXPORT, f"Data exported to {path}")
    logger.info(
        "export.written",
        path=str(path),
        students=result.students,
        courses=result.courses,
        enrollments=result.enrollments,
    )
    return result
