"""Tests for enrollment operations."""

import pytest

from registrar.core.courses import register_course
from registrar.core.enrollments import enroll, student_enrollments
from registrar.core.errors import (
    CapacityExceededError,
    CourseFullError,
    CourseNotFoundError,
    DuplicateEnrollmentError,
    StudentNotFoundError,
)
from registrar.core.operation_log import LogLevel
from registrar.core.students import register_student
from registrar.db.records import UNGRADED_LETTER, EnrollmentStatus


class TestEnroll:
    """Tests for enroll."""

    def test_enroll_creates_pending_enrollment(self, seeded_store):
        enrollment = enroll(seeded_store, 1001, 5001)

        assert enrollment.enrollment_id == 7001
        assert enrollment.status is EnrollmentStatus.PENDING
        assert enrollment.grade == 0.0
        assert enrollment.letter_grade == UNGRADED_LETTER
        assert seeded_store.find_course(5001).current_enrollment == 1
        assert seeded_store.log.entries[-1].level is LogLevel.SUCCESS

    def test_student_not_found(self, seeded_store):
        before = len(seeded_store.log)

        with pytest.raises(StudentNotFoundError):
            enroll(seeded_store, 9999, 5001)

        assert len(seeded_store.enrollments) == 0
        assert len(seeded_store.log) == before + 1
        assert seeded_store.log.entries[-1].level is LogLevel.ERROR

    def test_inactive_student_rejected(self, seeded_store):
        seeded_store.find_student(1001).is_active = False
        with pytest.raises(StudentNotFoundError):
            enroll(seeded_store, 1001, 5001)

    def test_course_not_found(self, seeded_store):
        with pytest.raises(CourseNotFoundError):
            enroll(seeded_store, 1001, 5999)
        assert len(seeded_store.enrollments) == 0

    def test_duplicate_rejected(self, seeded_store):
        first = enroll(seeded_store, 1001, 5001)

        with pytest.raises(DuplicateEnrollmentError) as exc_info:
            enroll(seeded_store, 1001, 5001)

        assert exc_info.value.existing_enrollment_id == first.enrollment_id
        assert seeded_store.find_course(5001).current_enrollment == 1
        assert len(seeded_store.enrollments) == 1
        assert seeded_store.log.entries[-1].level is LogLevel.WARNING

    def test_duplicate_check_ignores_dropped(self, seeded_store):
        first = enroll(seeded_store, 1001, 5001)
        first.status = EnrollmentStatus.DROPPED

        second = enroll(seeded_store, 1001, 5001)
        assert second.enrollment_id == 7002

    def test_completed_enrollment_still_blocks_duplicate(self, seeded_store):
        first = enroll(seeded_store, 1001, 5001)
        first.status = EnrollmentStatus.COMPLETED

        with pytest.raises(DuplicateEnrollmentError):
            enroll(seeded_store, 1001, 5001)

    def test_duplicate_reported_before_course_full(self, seeded_store):
        first = enroll(seeded_store, 1001, 5002)

        with pytest.raises(DuplicateEnrollmentError) as exc_info:
            enroll(seeded_store, 1001, 5002)

        assert exc_info.value.existing_enrollment_id == first.enrollment_id
        assert seeded_store.find_course(5002).current_enrollment == 1
        assert len(seeded_store.enrollments) == 1

    def test_course_full_does_not_increment(self, seeded_store):
        enroll(seeded_store, 1001, 5002)

        with pytest.raises(CourseFullError) as exc_info:
            enroll(seeded_store, 1002, 5002)

        course = seeded_store.find_course(5002)
        assert exc_info.value.max_capacity == 1
        assert course.current_enrollment == 1
        assert course.current_enrollment <= course.max_capacity
        assert len(seeded_store.enrollments) == 1

    def test_enrollment_table_full(self, tiny_store, student_input, course_input):
        register_student(tiny_store, student_input("Ada"))
        register_course(tiny_store, course_input("CS101"))
        enroll(tiny_store, 1001, 5001)
        tiny_store.find_enrollment(7001).status = EnrollmentStatus.DROPPED

        with pytest.raises(CapacityExceededError):
            enroll(tiny_store, 1001, 5001)

        assert tiny_store.find_course(5001).current_enrollment == 1

    def test_ids_not_reused_after_failures(self, seeded_store):
        enroll(seeded_store, 1001, 5001)
        with pytest.raises(DuplicateEnrollmentError):
            enroll(seeded_store, 1001, 5001)

        second = enroll(seeded_store, 1002, 5001)
        assert second.enrollment_id == 7002


class TestStudentEnrollments:
    """Tests for student_enrollments."""

    def test_views_include_course(self, seeded_store):
        enroll(seeded_store, 1001, 5001)
        enroll(seeded_store, 1001, 5002)
        enroll(seeded_store, 1002, 5001)

        views = student_enrollments(seeded_store, 1001)
        assert [v.enrollment.enrollment_id for v in views] == [7001, 7002]
        assert [v.course.code for v in views] == ["CS101", "MA201"]

    def test_no_enrollments(self, seeded_store):
        assert student_enrollments(seeded_store, 1002) == []

    def test_unknown_student(self, seeded_store):
        with pytest.raises(StudentNotFoundError):
            student_enrollments(seeded_store, 4242)
