"""Tests for class and system statistics."""

import pytest

from registrar.core.courses import register_course
from registrar.core.enrollments import enroll
from registrar.core.errors import CourseNotFoundError
from registrar.core.grades import record_grade
from registrar.core.statistics import class_statistics, system_statistics
from registrar.core.students import register_student


class TestClassStatistics:
    """Tests for class_statistics."""

    def test_no_grades(self, seeded_store):
        enroll(seeded_store, 1001, 5001)

        stats = class_statistics(seeded_store, 5001)
        assert stats.graded_count == 0
        assert stats.has_grades is False
        assert stats.average is None
        assert stats.grade_range is None

    def test_completed_only(self, seeded_store, student_input):
        register_student(seeded_store, student_input("Linus"))
        enroll(seeded_store, 1001, 5001)
        enroll(seeded_store, 1002, 5001)
        enroll(seeded_store, 1003, 5001)
        record_grade(seeded_store, 7001, 90)
        record_grade(seeded_store, 7002, 70)
        # 7003 stays pending

        stats = class_statistics(seeded_store, 5001)
        assert stats.graded_count == 2
        assert stats.average == pytest.approx(80.0)
        assert stats.highest == 90
        assert stats.lowest == 70
        assert stats.grade_range == pytest.approx(20.0)

    def test_single_grade_zero_range(self, seeded_store):
        enroll(seeded_store, 1001, 5002)
        record_grade(seeded_store, 7001, 0)

        stats = class_statistics(seeded_store, 5002)
        assert stats.highest == 0
        assert stats.lowest == 0
        assert stats.grade_range == 0

    def test_unknown_course(self, seeded_store):
        with pytest.raises(CourseNotFoundError):
            class_statistics(seeded_store, 5999)


class TestSystemStatistics:
    """Tests for system_statistics."""

    def test_empty_store(self, store):
        stats = system_statistics(store)
        assert stats.total_students == 0
        assert stats.total_courses == 0
        assert stats.total_enrollments == 0
        assert stats.average_gpa is None
        assert stats.average_enrollment_rate is None

    def test_counts(self, seeded_store):
        enroll(seeded_store, 1001, 5001)
        log_before = len(seeded_store.log)

        stats = system_statistics(seeded_store)
        assert stats.total_students == 2
        assert stats.total_courses == 2
        assert stats.total_enrollments == 1
        assert stats.total_log_entries == log_before

    def test_gpa_over_completed_only(self, seeded_store):
        enroll(seeded_store, 1001, 5001)
        enroll(seeded_store, 1002, 5001)
        enroll(seeded_store, 1001, 5002)
        record_grade(seeded_store, 7001, 95)  # A 4.0
        record_grade(seeded_store, 7002, 65)  # D 1.0
        # 7003 pending

        stats = system_statistics(seeded_store)
        assert stats.completed_enrollments == 2
        assert stats.average_gpa == pytest.approx(2.5)

    def test_enrollment_rate(self, seeded_store):
        enroll(seeded_store, 1001, 5001)  # 1/30
        enroll(seeded_store, 1001, 5002)  # 1/1

        stats = system_statistics(seeded_store)
        assert stats.average_enrollment_rate == pytest.approx((1 / 30 + 1.0) / 2)

    def test_zero_capacity_courses_excluded(self, seeded_store, course_input):
        register_course(seeded_store, course_input("ZERO", max_capacity=0))
        enroll(seeded_store, 1001, 5002)  # 1/1

        stats = system_statistics(seeded_store)
        # 5001: 0/30, 5002: 1/1, 5003 excluded
        assert stats.total_courses == 3
        assert stats.average_enrollment_rate == pytest.approx(0.5)

    def test_only_zero_capacity_courses(self, store, course_input):
        register_course(store, course_input("ZERO", max_capacity=0))
        stats = system_statistics(store)
        assert stats.average_enrollment_rate is None
