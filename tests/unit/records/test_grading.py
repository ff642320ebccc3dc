"""Unit tests for the grade calculator."""

import pytest

from gradebook.records import Grade, Status, ValidationError, evaluate
from gradebook.records.grading import grade_for, status_for


@pytest.mark.unit
class TestGradeBoundaries:
    """Inclusive lower bounds, checked at each edge."""

    @pytest.mark.parametrize(
        ("average", "grade", "status"),
        [
            (0, Grade.F, Status.FAIL),
            (39, Grade.F, Status.FAIL),
            (39.99, Grade.F, Status.FAIL),
            (40, Grade.D, Status.PASS),
            (49, Grade.D, Status.PASS),
            (50, Grade.C, Status.PASS),
            (59, Grade.C, Status.PASS),
            (60, Grade.B, Status.PASS),
            (69, Grade.B, Status.PASS),
            (70, Grade.A, Status.PASS),
            (100, Grade.A, Status.PASS),
        ],
    )
    def test_boundary(self, average: float, grade: Grade, status: Status) -> None:
        assert grade_for(average) == grade
        assert status_for(average) == status

    @pytest.mark.parametrize(
        ("mark", "grade"), [(39, "F"), (40, "D"), (50, "C"), (60, "B"), (70, "A")]
    )
    def test_evaluate_uniform_marks(self, mark: int, grade: str) -> None:
        result = evaluate([mark] * 6)

        assert result.average == mark
        assert result.grade == grade


@pytest.mark.unit
class TestEvaluate:
    """Tests for evaluate."""

    def test_average_is_arithmetic_mean(self) -> None:
        result = evaluate([100, 90, 80, 70, 60, 55])

        assert result.average == pytest.approx(455 / 6)
        assert result.grade == Grade.A
        assert result.status == Status.PASS

    def test_fractional_average_below_pass_mark(self) -> None:
        # 239 / 6 = 39.83
        result = evaluate([40, 40, 40, 40, 40, 39])

        assert result.average < 40
        assert result.grade == Grade.F
        assert result.status == Status.FAIL

    def test_all_zero(self) -> None:
        result = evaluate([0] * 6)

        assert result.average == 0.0
        assert result.status == Status.FAIL

    def test_empty_marks_rejected(self) -> None:
        with pytest.raises(ValidationError):
            evaluate([])

    def test_enums_render_as_text(self) -> None:
        result = evaluate([75] * 6)

        assert str(result.grade) == "A"
        assert str(result.status) == "Pass"
