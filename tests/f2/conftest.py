"""Fixtures for F2 tests - Domain Operations."""

import pytest

from registrar.config.app_config import CapacityConfig
from registrar.core.courses import CourseInput, register_course
from registrar.core.students import StudentInput, register_student
from registrar.db.record_store import RecordStore


def make_student(name: str = "Ada") -> StudentInput:
    """Student input with well-formed contact fields."""
    return StudentInput(
        name=name,
        email=f"{name.lower()}@example.com",
        phone="555-123-4567",
        address="1 Main St",
        admission_year=2024,
        major="Mathematics",
    )


def make_course(code: str = "CS101", max_capacity: int = 30) -> CourseInput:
    return CourseInput(
        code=code,
        name=f"{code} Course",
        description="Intro",
        credits=3,
        max_capacity=max_capacity,
        difficulty=2.5,
    )


@pytest.fixture
def store() -> RecordStore:
    """Empty store with default capacities and offsets."""
    return RecordStore()


@pytest.fixture
def seeded_store(store: RecordStore) -> RecordStore:
    """Store with students 1001, 1002 and courses 5001 (30 seats), 5002 (1 seat)."""
    register_student(store, make_student("Ada"))
    register_student(store, make_student("Grace"))
    register_course(store, make_course("CS101", max_capacity=30))
    register_course(store, make_course("MA201", max_capacity=1))
    return store


@pytest.fixture
def tiny_store() -> RecordStore:
    """Store where every table holds one row."""
    return RecordStore(
        capacities=CapacityConfig(students=1, courses=1, enrollments=1, log_entries=100)
    )


@pytest.fixture
def student_input():
    """Factory for StudentInput with well-formed contact fields."""
    return make_student


@pytest.fixture
def course_input():
    """Factory for CourseInput."""
    return make_course
