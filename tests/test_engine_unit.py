import math

import pytest

from polysolver import engine
from polysolver.polynomial import ErrorKind, ParseError, Polynomial


def test_split_equation() -> None:
    assert engine.split_equation("2 = X") == ("2 ", " X")
    with pytest.raises(ParseError):
        engine.split_equation("X + 2")
    with pytest.raises(ParseError):
        engine.split_equation("X = 1 = 2")


def test_degree_name() -> None:
    assert engine._degree_name(2) == "quadratic"
    assert engine._degree_name(7) == "degree-7 polynomial"


def test_solve_equation_required_fields_type_and_range_checks() -> None:
    result = engine.solve_equation("2 * X = 4")

    required_fields = {
        "equation",
        "given",
        "method",
        "steps",
        "reduced_form",
        "degree",
        "case",
        "solutions",
        "final_answer",
        "verification_steps",
        "summary",
        "error",
    }
    assert required_fields.issubset(set(result.keys()))

    summary = result["summary"]
    assert isinstance(summary["runtime_ms"], (int, float)) and summary["runtime_ms"] >= 0
    assert summary["total_steps"] == len(result["steps"])
    assert summary["verification_steps"] == 1
    assert summary["validation_status"] == "pass"
    assert [s["step_number"] for s in result["steps"]] == list(range(1, len(result["steps"]) + 1))


def test_usage_example_two_real_roots() -> None:
    result = engine.solve_equation("5 * X^2 + 2 = 6 * X^2 + 1 * X^1")
    assert result["reduced"] == Polynomial({0: 2.0, 1: -1.0, 2: -1.0})
    assert result["reduced_form"] == "2 - X - X^2 = 0"
    assert result["degree"] == 2
    assert result["case"] == "two_real"
    assert result["discriminant"] == 9.0
    assert result["roots"] == pytest.approx([-2.0, 1.0])
    assert result["summary"]["validation_status"] == "pass"


def test_discriminant_five() -> None:
    result = engine.solve_equation("5 * X^2 + 1 = 6 * X^2 + 1 * X^1")
    reduced = result["reduced"]
    assert (reduced.coefficient(2), reduced.coefficient(1), reduced.coefficient(0)) == (-1.0, -1.0, 1.0)
    assert result["discriminant"] == 5.0
    expected = [(1 + math.sqrt(5)) / -2, (1 - math.sqrt(5)) / -2]
    assert result["roots"] == pytest.approx(expected)


def test_one_real_root_from_zero_discriminant() -> None:
    result = engine.solve_equation("X^2 - 2X + 1 = 0")
    assert result["case"] == "one_real"
    assert result["discriminant"] == 0.0
    assert result["solutions"] == ["1"]


def test_complex_pair() -> None:
    result = engine.solve_equation("X^2 + 2X + 5 = 0")
    assert result["case"] == "complex_pair"
    assert result["discriminant"] == -16.0
    first, second = result["roots"]
    assert first == pytest.approx(complex(-1, 2))
    assert second == pytest.approx(complex(-1, -2))
    assert result["solutions"][0].startswith("-1 + ")
    assert result["solutions"][0].endswith("i")
    assert result["solutions"][1].startswith("-1 - ")
    assert result["summary"]["validation_status"] == "pass"


def test_linear() -> None:
    result = engine.solve_equation("5 * X^0 + 4 * X^1 = 4 * X^0")
    assert result["degree"] == 1
    assert result["solutions"] == ["-0.25"]
    assert result["final_answer"] == "-0.25"


def test_linear_zero_root_has_no_negative_sign() -> None:
    assert engine.solve_equation("2X = 0")["solutions"] == ["0"]


def test_all_reals_and_no_solution() -> None:
    identity = engine.solve_equation("X + 1 = 1 + X")
    assert identity["case"] == "all_reals"
    assert identity["reduced_form"] == "0 = 0"
    assert identity["roots"] == []
    assert identity["summary"]["validation_status"] == "skipped"

    contradiction = engine.solve_equation("X + 1 = X + 2")
    assert contradiction["case"] == "no_solution"
    assert contradiction["reduced_form"] == "-1 = 0"


def test_degree_too_high_reports_without_roots() -> None:
    result = engine.solve_equation("8 * X^0 - 6 * X^1 + 0 * X^2 - 5.6 * X^3 = 3 * X^0")
    assert result["degree"] == 3
    assert result["case"] == "degree_too_high"
    assert result["error"] == ErrorKind.DEGREE_TOO_HIGH.value
    assert result["roots"] == []
    assert result["solutions"] == []
    assert result["discriminant"] is None
    assert result["summary"]["validation_status"] == "fail"


def test_high_degree_terms_that_cancel_are_solvable() -> None:
    result = engine.solve_equation("X^3 + X = X^3 + 2")
    assert result["degree"] == 1
    assert result["solutions"] == ["2"]


def test_malformed_input_is_rejected() -> None:
    with pytest.raises(ParseError) as excinfo:
        engine.solve_equation("5 * X^2 ++ 2 = 6")
    assert excinfo.value.kind is ErrorKind.INVALID_SYNTAX


@pytest.mark.parametrize("equation", ["X + 2", "X = 1 = 2", "= 5", "5 =", ""])
def test_invalid_top_level_split(equation) -> None:
    with pytest.raises(ParseError, match="Invalid input"):
        engine.solve_equation(equation)


def test_exponent_overflow() -> None:
    with pytest.raises(ParseError) as excinfo:
        engine.solve_equation("X^4294967296 = 0")
    assert excinfo.value.kind is ErrorKind.EXPONENT_OVERFLOW


def test_custom_variable() -> None:
    result = engine.solve_equation("y^2 = 4", variable="y")
    assert result["reduced_form"] == "-4 + y^2 = 0"
    assert sorted(result["roots"]) == pytest.approx([-2.0, 2.0])


def test_unknown_mode() -> None:
    with pytest.raises(ValueError, match="Unknown mode"):
        engine.solve_equation("X = 1", mode="symbolic")


class TestReportLines:
    def test_linear(self):
        lines = engine.report_lines(engine.solve_equation("2 * X = 4"))
        assert lines == ["Reduced form: -4 + 2X = 0", "Polynomial degree: 1", "2 is a solution"]

    def test_zero_discriminant(self):
        lines = engine.report_lines(engine.solve_equation("X^2 - 2X + 1 = 0"))
        assert lines == [
            "Reduced form: 1 - 2X + X^2 = 0",
            "Polynomial degree: 2",
            "Discriminant: 0",
            "Discriminant is 0, there is 1 real solution:",
            "1",
        ]

    def test_two_real(self):
        lines = engine.report_lines(engine.solve_equation("5 * X^2 + 2 = 6 * X^2 + 1 * X^1"))
        assert lines[:4] == [
            "Reduced form: 2 - X - X^2 = 0",
            "Polynomial degree: 2",
            "Discriminant: 9",
            "Positive discriminant, there are 2 real solutions:",
        ]
        assert len(lines) == 6

    def test_complex(self):
        lines = engine.report_lines(engine.solve_equation("X^2 + 2X + 5 = 0"))
        assert lines[3] == "Negative discriminant, there are 2 complex solutions:"
        assert len(lines) == 6

    def test_identity_and_contradiction(self):
        assert engine.report_lines(engine.solve_equation("X = X"))[-1] == "Every number is a solution"
        assert engine.report_lines(engine.solve_equation("1 = 2"))[-1] == "There is no solution"

    def test_degree_too_high(self):
        lines = engine.report_lines(engine.solve_equation("X^3 = 1"))
        assert lines == [
            "Reduced form: -1 + X^3 = 0",
            "Polynomial degree: 3",
            "The polynomial degree is strictly greater than 2, I can't solve.",
        ]
