"""Grade calculation: marks -> average, letter grade, pass/fail status."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from gradebook.records.exceptions import ValidationError

PASS_MARK = 40.0


class Grade(StrEnum):
    """Letter grade."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"


class Status(StrEnum):
    """Pass/fail outcome of an attempt."""

    PASS = "Pass"
    FAIL = "Fail"


# Inclusive lower bounds, highest first. Anything below the last bound is an F.
GRADE_BOUNDARIES: tuple[tuple[float, Grade], ...] = (
    (70.0, Grade.A),
    (60.0, Grade.B),
    (50.0, Grade.C),
    (40.0, Grade.D),
)


@dataclass(frozen=True)
class GradeResult:
    """Derived results for a set of marks."""

    average: float
    grade: Grade
    status: Status


def grade_for(average: float) -> Grade:
    """Return the letter grade for an average."""
    for bound, grade in GRADE_BOUNDARIES:
        if average >= bound:
            return grade
    return Grade.F


def status_for(average: float) -> Status:
    """Return Pass/Fail for an average."""
    return Status.PASS if average >= PASS_MARK else Status.FAIL


def evaluate(marks: Iterable[int]) -> GradeResult:
    """Compute average, grade and status for a set of marks.

    Range checking of the individual marks is the caller's job
    (see ``Marks.from_sequence``).

    Args:
        marks: Subject marks.

    Returns:
        GradeResult with the mean of the marks and the grade/status it earns.

    Raises:
        ValidationError: If no marks are given.
    """
    values = list(marks)
    if not values:
        raise ValidationError("Cannot grade an empty set of marks")
    average = sum(values) / len(values)
    return GradeResult(average=average, grade=grade_for(average), status=status_for(average))
