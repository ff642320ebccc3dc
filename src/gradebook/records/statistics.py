"""Class-wide statistics over each student's best attempt."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field

from gradebook.records.grading import Grade, Status
from gradebook.records.models import Student


@dataclass
class ClassStatistics:
    """Aggregated results across students.

    Only students with at least one attempt count towards the figures;
    each contributes their best attempt.

    Attributes:
        total_students: All registered students.
        students_with_records: Students with at least one attempt.
        passed: Students whose best attempt is a Pass.
        failed: Students whose best attempt is a Fail.
        pass_rate: passed / students_with_records, as a percentage.
        class_average: Mean of best averages.
        highest: Highest best average.
        lowest: Lowest best average.
        grade_distribution: Grade -> student count, in grade order.
    """

    total_students: int
    students_with_records: int
    passed: int
    failed: int
    pass_rate: float
    class_average: float
    highest: float
    lowest: float
    grade_distribution: dict[Grade, int] = field(default_factory=dict)


def compute_statistics(students: Iterable[Student]) -> ClassStatistics | None:
    """Compute statistics for a group of students.

    Returns:
        ClassStatistics, or None if no student has an attempt yet.
    """
    students = list(students)
    best = [a for a in (s.best_attempt() for s in students) if a is not None]
    if not best:
        return None

    averages = [a.average for a in best]
    passed = sum(1 for a in best if a.status == Status.PASS)
    counts = Counter(a.grade for a in best)

    return ClassStatistics(
        total_students=len(students),
        students_with_records=len(best),
        passed=passed,
        failed=len(best) - passed,
        pass_rate=passed / len(best) * 100,
        class_average=sum(averages) / len(averages),
        highest=max(averages),
        lowest=min(averages),
        grade_distribution={grade: counts[grade] for grade in sorted(counts)},
    )
