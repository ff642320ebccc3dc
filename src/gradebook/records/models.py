"""Data models for student records."""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field, fields
from datetime import datetime
from enum import StrEnum

from gradebook.records.exceptions import ValidationError
from gradebook.records.grading import Grade, Status, evaluate

MIN_MARK = 0
MAX_MARK = 100


class Subject(StrEnum):
    """Examined subjects, in the fixed order marks are entered and stored."""

    MATHEMATICS = "Mathematics"
    PHYSICS = "Physics"
    CHEMISTRY = "Chemistry"
    BIOLOGY = "Biology"
    ENGLISH = "English"
    ART = "Art"


SUBJECTS: tuple[Subject, ...] = tuple(Subject)


def validate_mark(value: object, subject: Subject | str = "mark") -> int:
    """Check a single mark is an integer in [0, 100] and return it."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{subject} must be a whole number, got {value!r}")
    if not MIN_MARK <= value <= MAX_MARK:
        raise ValidationError(f"{subject} must be between {MIN_MARK} and {MAX_MARK}, got {value}")
    return value


@dataclass(frozen=True)
class Marks:
    """Marks for one sitting, one field per subject.

    Field order matches ``SUBJECTS`` and is the order used for storage.
    """

    mathematics: int
    physics: int
    chemistry: int
    biology: int
    english: int
    art: int

    @classmethod
    def from_sequence(cls, values: Sequence[int]) -> Marks:
        """Build Marks from six values in subject order.

        Raises:
            ValidationError: If there are not exactly six integer marks in [0, 100].
        """
        if isinstance(values, str | bytes):
            raise ValidationError("Marks must be a sequence of integers")
        values = list(values)
        if len(values) != len(SUBJECTS):
            raise ValidationError(
                f"Expected {len(SUBJECTS)} marks ({', '.join(SUBJECTS)}), got {len(values)}"
            )
        return cls(*(validate_mark(v, s) for v, s in zip(values, SUBJECTS, strict=True)))

    def __iter__(self) -> Iterator[int]:
        return (getattr(self, f.name) for f in fields(self))

    def as_tuple(self) -> tuple[int, ...]:
        return tuple(self)

    def by_subject(self) -> dict[Subject, int]:
        """Return an ordered subject -> mark mapping."""
        return dict(zip(SUBJECTS, self, strict=True))


@dataclass(frozen=True)
class Attempt:
    """One exam sitting: marks plus derived results.

    Attributes:
        marks: Subject marks.
        average: Mean of the marks.
        grade: Letter grade earned by the average.
        status: Pass/Fail earned by the average.
        timestamp: Timezone-aware time the attempt was recorded.
        sequence_number: 1-based position in the student's history.
    """

    marks: Marks
    average: float
    grade: Grade
    status: Status
    timestamp: datetime
    sequence_number: int

    @classmethod
    def create(cls, marks: Marks, sequence_number: int, now: datetime | None = None) -> Attempt:
        """Create a new attempt, computing its results from the marks."""
        if sequence_number < 1:
            raise ValidationError(f"Attempt number must be 1 or more, got {sequence_number}")
        if now is None:
            now = datetime.now().astimezone()
        result = evaluate(marks)
        return cls(
            marks=marks,
            average=result.average,
            grade=result.grade,
            status=result.status,
            timestamp=now,
            sequence_number=sequence_number,
        )

    def is_consistent(self) -> bool:
        """Whether stored average/grade/status agree with the marks."""
        result = evaluate(self.marks)
        return (
            math.isclose(result.average, self.average, abs_tol=1e-9)
            and result.grade == self.grade
            and result.status == self.status
        )


@dataclass
class Student:
    """A student and their attempt history.

    Attributes:
        id: Unique 8-digit student ID.
        name: Display name.
        email: Email address, empty when not given.
        attempts: Attempts in the order they were recorded.
    """

    id: str
    name: str
    email: str = ""
    attempts: list[Attempt] = field(default_factory=list)

    @classmethod
    def new(cls, student_id: str, name: str | None, email: str | None = "") -> Student:
        """Create a student with no attempts, validating name and email.

        Raises:
            ValidationError: If the name is blank or a field spans several lines.
        """
        name = (name or "").strip()
        email = (email or "").strip()
        if not name:
            raise ValidationError("Student name cannot be empty.")
        for label, value in (("name", name), ("email", email)):
            if "\n" in value or "\r" in value:
                raise ValidationError(f"Student {label} cannot contain line breaks.")
        return cls(id=student_id, name=name, email=email)

    def add_attempt(self, attempt: Attempt) -> None:
        """Append an attempt. Persisting it is the caller's job."""
        self.attempts.append(attempt)

    def next_sequence_number(self) -> int:
        return len(self.attempts) + 1

    def best_attempt(self) -> Attempt | None:
        """Attempt with the highest average; the earliest one wins a tie."""
        if not self.attempts:
            return None
        return max(self.attempts, key=lambda a: a.average)

    def latest_attempt(self) -> Attempt | None:
        """Attempt with the latest timestamp; the earliest one wins a tie."""
        if not self.attempts:
            return None
        return max(self.attempts, key=lambda a: a.timestamp)

    @property
    def has_attempts(self) -> bool:
        return bool(self.attempts)

    def __repr__(self) -> str:
        return f"<Student(id={self.id!r}, name={self.name!r}, attempts={len(self.attempts)})>"
