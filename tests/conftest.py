"""Shared pytest fixtures and configuration."""

from __future__ import annotations

import random
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from gradebook.records import Attempt, Marks, RecordStore, Student, StudentRegistry
from gradebook.records.grading import grade_for, status_for

BASE_TIME = datetime(2025, 3, 14, 9, 30, 15, 123456, tzinfo=timezone(timedelta(hours=1)))


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")


# Shared fixtures


@pytest.fixture
def records_dir(tmp_path: Path) -> Path:
    """Empty student records directory."""
    path = tmp_path / "StudentRecords"
    path.mkdir()
    return path


@pytest.fixture
def store(records_dir: Path) -> RecordStore:
    return RecordStore(records_dir)


@pytest.fixture
def registry(store: RecordStore) -> StudentRegistry:
    """Loaded (empty) registry with a seeded ID generator."""
    registry = StudentRegistry(store, rng=random.Random(1234))
    registry.load()
    return registry


def make_attempt(
    average: float,
    sequence_number: int = 1,
    timestamp: datetime | None = None,
) -> Attempt:
    """Attempt with a chosen average; marks are filler and not consistent with it."""
    return Attempt(
        marks=Marks.from_sequence([int(average)] * 6),
        average=average,
        grade=grade_for(average),
        status=status_for(average),
        timestamp=timestamp or BASE_TIME + timedelta(days=sequence_number),
        sequence_number=sequence_number,
    )


def make_student(student_id: str, name: str, averages: list[float], email: str = "") -> Student:
    """Student whose attempts have the given averages, in order."""
    student = Student(id=student_id, name=name, email=email)
    for number, average in enumerate(averages, start=1):
        student.add_attempt(make_attempt(average, sequence_number=number))
    return student


@pytest.fixture
def attempt_factory():
    return make_attempt


@pytest.fixture
def student_factory():
    return make_student
