"""Unit tests for class statistics."""

import pytest

from gradebook.records import ClassStatistics, Grade, Student, compute_statistics


@pytest.mark.unit
class TestComputeStatistics:
    """Tests for compute_statistics."""

    def test_three_students(self, student_factory) -> None:
        students = [
            student_factory("10000001", "A", [82]),
            student_factory("10000002", "B", [45]),
            student_factory("10000003", "C", [30]),
        ]

        stats = compute_statistics(students)

        assert isinstance(stats, ClassStatistics)
        assert stats.students_with_records == 3
        assert stats.passed == 2
        assert stats.failed == 1
        assert stats.pass_rate == pytest.approx(66.7, abs=0.1)
        assert stats.class_average == pytest.approx(52.33, abs=0.01)
        assert stats.highest == 82
        assert stats.lowest == 30
        assert stats.grade_distribution == {Grade.A: 1, Grade.D: 1, Grade.F: 1}

    def test_uses_best_attempt(self, student_factory) -> None:
        students = [student_factory("10000001", "Resitter", [20, 35, 65, 50])]

        stats = compute_statistics(students)

        assert stats.class_average == 65
        assert stats.passed == 1
        assert stats.grade_distribution == {Grade.B: 1}

    def test_students_without_attempts_excluded(self, student_factory) -> None:
        students = [
            student_factory("10000001", "Done", [55]),
            Student(id="10000002", name="New"),
        ]

        stats = compute_statistics(students)

        assert stats.total_students == 2
        assert stats.students_with_records == 1
        assert stats.failed == 0
        assert stats.pass_rate == 100.0

    def test_distribution_in_grade_order(self, student_factory) -> None:
        students = [
            student_factory("10000001", "F", [10]),
            student_factory("10000002", "B", [65]),
            student_factory("10000003", "A", [90]),
            student_factory("10000004", "B2", [61]),
        ]

        stats = compute_statistics(students)

        assert list(stats.grade_distribution) == [Grade.A, Grade.B, Grade.F]
        assert stats.grade_distribution[Grade.B] == 2

    def test_no_records_returns_none(self) -> None:
        assert compute_statistics([Student(id="10000001", name="New")]) is None

    def test_no_students_returns_none(self) -> None:
        assert compute_statistics([]) is None
