"""Fixtures for F1 tests - Store, Validators, Operation Log, Config."""

import pytest

from registrar.config.app_config import CapacityConfig
from registrar.db.record_store import RecordStore


@pytest.fixture
def store() -> RecordStore:
    """Empty store with default capacities and offsets."""
    return RecordStore()


@pytest.fixture
def tiny_store() -> RecordStore:
    """Store where every table holds two rows."""
    return RecordStore(
        capacities=CapacityConfig(students=2, courses=2, enrollments=2, log_entries=2)
    )
