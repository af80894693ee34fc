"""Fixtures for F3 tests - Export and Interactive Shell."""

from pathlib import Path

import pytest

from registrar.config.app_config import CONFIG_ENV_VAR, clear_config_cache
from registrar.core.courses import CourseInput, register_course
from registrar.core.enrollments import enroll
from registrar.core.grades import record_grade
from registrar.core.students import StudentInput, register_student
from registrar.db.record_store import RecordStore


@pytest.fixture
def populated_store() -> RecordStore:
    """Three students, two courses, three enrollments (one graded)."""
    store = RecordStore()
    for name in ["Ada", "Grace", "Linus"]:
        register_student(
            store,
            StudentInput(name=name, email=f"{name.lower()}@uni.edu", phone="555-000-1111"),
        )
    register_course(store, CourseInput(code="CS101", name="Intro", credits=3, max_capacity=10))
    register_course(store, CourseInput(code="MA201", name="Algebra", credits=4, max_capacity=5))
    enroll(store, 1001, 5001)
    enroll(store, 1002, 5001)
    enroll(store, 1001, 5002)
    record_grade(store, 7001, 91.5)
    return store


@pytest.fixture
def isolated_config(tmp_path, monkeypatch) -> Path:
    """Point the CLI at a temporary config whose export lands in tmp_path."""
    export_path = tmp_path / "export.txt"
    config_file = tmp_path / "app_config.yaml"
    config_file.write_text(
        "capacities:\n"
        "  students: 500\n"
        "  courses: 100\n"
        "  enrollments: 5000\n"
        "  log_entries: 10000\n"
        "export:\n"
        f"  path: {export_path.as_posix()}\n",
        encoding="utf-8",
    )
    monkeypatch.setenv(CONFIG_ENV_VAR, str(config_file))
    clear_config_cache()
    yield export_path
    clear_config_cache()
