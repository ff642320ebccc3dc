"""StudentRegistry - in-memory collection of students, written through to disk."""

from __future__ import annotations

import logging
import random
from collections.abc import Iterator, Sequence

from gradebook.records.exceptions import (
    DuplicateAttemptError,
    StudentNotFoundError,
    ValidationError,
)
from gradebook.records.models import Attempt, Marks, Student
from gradebook.records.store import RecordStore

logger = logging.getLogger(__name__)

ID_MIN = 10_000_000
ID_MAX = 99_999_999


class StudentRegistry:
    """All students known to this run, keyed by ID.

    Loaded once from the RecordStore at startup. Every mutation is saved
    straight away; if the save fails the in-memory change is kept and the
    StorageError is raised to the caller.
    """

    def __init__(self, store: RecordStore, rng: random.Random | None = None) -> None:
        """Initialize an empty registry.

        Args:
            store: RecordStore used for persistence.
            rng: Random source for ID generation (seedable in tests).
        """
        self.store = store
        self._rng = rng if rng is not None else random.Random()
        self._students: dict[str, Student] = {}
        self._loaded = False

    def load(self) -> int:
        """Populate the registry from the record store.

        Only the first call reads from disk.

        Returns:
            Number of students in the registry.
        """
        if self._loaded:
            return len(self._students)
        for student in self.store.load_all():
            self._students[student.id] = student
        self._loaded = True
        return len(self._students)

    def __len__(self) -> int:
        return len(self._students)

    def __contains__(self, student_id: object) -> bool:
        return student_id in self._students

    def __iter__(self) -> Iterator[Student]:
        return iter(self._students.values())

    def generate_id(self) -> str:
        """Return a random 8-digit ID not used by any student."""
        while True:
            student_id = str(self._rng.randint(ID_MIN, ID_MAX))
            if student_id not in self._students:
                return student_id

    def create(self, name: str | None, email: str | None = "") -> Student:
        """Create, register and save a new student.

        Args:
            name: Student name (required, trimmed).
            email: Email address (optional, trimmed).

        Returns:
            The new Student.

        Raises:
            ValidationError: If the name is blank.
            StorageError: If the record file cannot be written.
        """
        student = Student.new(self.generate_id(), name, email)
        self._students[student.id] = student
        logger.info("Created student %s", student.id)
        self.store.save(student)
        return student

    def find_by_id(self, student_id: str | None) -> Student | None:
        """Exact ID lookup after trimming; blank input returns None."""
        if student_id is None or not student_id.strip():
            return None
        return self._students.get(student_id.strip())

    def get(self, student_id: str | None) -> Student:
        """Like find_by_id, but raises when there is no match.

        Raises:
            StudentNotFoundError: If no student has this ID.
        """
        student = self.find_by_id(student_id)
        if student is None:
            raise StudentNotFoundError(f"Student with id '{(student_id or '').strip()}' not found")
        return student

    def search_by_name(self, query: str | None) -> list[Student]:
        """Case-insensitive substring search on student names.

        Raises:
            ValidationError: If the query is blank.
        """
        if query is None or not query.strip():
            raise ValidationError("Search name cannot be empty.")
        needle = query.strip().casefold()
        return [s for s in self._students.values() if needle in s.name.casefold()]

    def list_all(self) -> list[Student]:
        """All students in load/creation order."""
        return list(self._students.values())

    def record_attempt(
        self, student_id: str | None, marks: Marks | Sequence[int], is_resit: bool = False
    ) -> Attempt:
        """Record a new attempt for a student and save the student.

        Args:
            student_id: ID of the student sitting the exam.
            marks: Six marks in subject order.
            is_resit: False for a first attempt, which is refused if marks exist.

        Returns:
            The new Attempt.

        Raises:
            StudentNotFoundError: If no student has this ID.
            DuplicateAttemptError: If a first attempt is requested but one exists.
            ValidationError: If the marks are invalid.
            StorageError: If the record file cannot be written.
        """
        student = self.get(student_id)
        if not is_resit and student.has_attempts:
            raise DuplicateAttemptError(
                "Student already has marks entered. Use resit option for additional attempts."
            )
        if not isinstance(marks, Marks):
            marks = Marks.from_sequence(marks)

        attempt = Attempt.create(marks, student.next_sequence_number())
        student.add_attempt(attempt)
        logger.info(
            "Recorded attempt %d for student %s: average=%.2f grade=%s",
            attempt.sequence_number,
            student.id,
            attempt.average,
            attempt.grade,
        )
        self.store.save(student)
        return attempt
