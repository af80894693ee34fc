"""Tests for course operations."""

import pytest

from registrar.core.courses import get_course, list_courses, register_course
from registrar.core.errors import CapacityExceededError, CourseNotFoundError
from registrar.core.operation_log import LogLevel


class TestRegisterCourse:
    """Tests for register_course."""

    def test_register_course(self, store, course_input):
        course = register_course(store, course_input("CS101", max_capacity=1))

        assert course.course_id == 5001
        assert course.current_enrollment == 0
        assert course.max_capacity == 1
        assert course.created_at
        assert store.log.entries[-1].level is LogLevel.SUCCESS
        assert "CS101" in store.log.entries[-1].details

    def test_capacity_exceeded(self, tiny_store, course_input):
        register_course(tiny_store, course_input("CS101"))

        with pytest.raises(CapacityExceededError):
            register_course(tiny_store, course_input("CS102"))

        assert len(tiny_store.courses) == 1
        assert tiny_store.log.entries[-1].level is LogLevel.ERROR


class TestCourseQueries:
    """Tests for list_courses, get_course and derived properties."""

    def test_list_courses(self, seeded_store):
        assert [c.code for c in list_courses(seeded_store)] == ["CS101", "MA201"]

    def test_get_course_not_found(self, seeded_store):
        with pytest.raises(CourseNotFoundError):
            get_course(seeded_store, 5999)
        assert seeded_store.log.entries[-1].level is LogLevel.WARNING

    def test_enrollment_rate_and_seats(self, seeded_store):
        course = get_course(seeded_store, 5001)
        course.current_enrollment = 3

        assert course.enrollment_rate == pytest.approx(0.1)
        assert course.available_seats == 27

    def test_zero_capacity_rate_is_none(self, store, course_input):
        course = register_course(store, course_input("ZERO", max_capacity=0))
        assert course.enrollment_rate is None
        assert course.is_full is True
