import pytest

from solver import engine
from solver.engine import extract_linear_form, solve_equation
from solver.errors import ValidationError
from solver.formatting import fmt_fixed, fmt_num
from solver.types import LinearForm, SolutionKind


# ── Number formatting ───────────────────────────────────────────────────

class TestFmtNum:
    def test_integer(self):
        assert fmt_num(7.0) == "7"

    def test_clean_decimal(self):
        assert fmt_num(2.5) == "2.5"

    def test_trailing_zeros_stripped(self):
        assert fmt_num(1.50000) == "1.5"

    def test_very_small_rounds_to_int(self):
        assert fmt_num(3.0000000000001) == "3"

    def test_negative_zero(self):
        assert fmt_num(-0.0) == "0"

    def test_float_noise_hidden(self):
        assert fmt_num(0.1 + 0.2) == "0.3"

    def test_fixed_two_decimals(self):
        assert fmt_fixed(1.41421356) == "1.41"
        assert fmt_fixed(-0.001) == "0.00"


# ── Coefficient extraction ──────────────────────────────────────────────

@pytest.mark.parametrize(
    "side,expected",
    [
        ("2x+3", LinearForm(2.0, 3.0)),
        ("3x-2", LinearForm(3.0, -2.0)),
        ("x+4", LinearForm(1.0, 4.0)),
        ("+x", LinearForm(1.0, 0.0)),
        ("-x-4", LinearForm(-1.0, -4.0)),
        ("5", LinearForm(0.0, 5.0)),
        ("3+2x", LinearForm(2.0, 3.0)),
        ("0.5x+1.25", LinearForm(0.5, 1.25)),
        (".5x-.25", LinearForm(0.5, -0.25)),
    ],
)
def test_extract_linear_form(side: str, expected: LinearForm) -> None:
    assert extract_linear_form(side) == expected


def test_extract_linear_form_keeps_first_constant_only() -> None:
    assert extract_linear_form("x+1+1") == LinearForm(1.0, 1.0)


# ── Solving ─────────────────────────────────────────────────────────────

class TestSolve:
    def test_simple_equation(self):
        result = solve_equation("2x+3=5")
        assert result.kind is SolutionKind.UNIQUE
        assert result.solution == 1.0
        assert result.final_answer == "x = 1"

    def test_variable_on_both_sides(self):
        result = solve_equation("3x-2=x+4")
        assert result.kind is SolutionKind.UNIQUE
        assert result.solution == 3.0

    def test_contradiction(self):
        result = solve_equation("x=x+1")
        assert result.kind is SolutionKind.NONE
        assert result.solution is None
        assert result.final_answer == "∅ (no solution)"

    def test_identity(self):
        result = solve_equation("x+1=x+1")
        assert result.kind is SolutionKind.INFINITE
        assert result.solution is None
        assert result.final_answer == "∞ (infinitely many solutions)"

    def test_negative_solution(self):
        result = solve_equation("-x-4=2")
        assert result.solution == -6.0

    def test_decimal_coefficients(self):
        result = solve_equation("0.5x + 1.25 = 2")
        assert result.solution == pytest.approx(1.5)

    def test_whitespace_is_ignored(self):
        assert solve_equation("  2 x + 3 =  5 ").solution == 1.0

    def test_linear_forms_are_exposed(self):
        result = solve_equation("3x-2=x+4")
        assert result.left == LinearForm(3.0, -2.0)
        assert result.right == LinearForm(1.0, 4.0)


class TestSteps:
    def test_unique_solution_trace(self):
        assert solve_equation("2x+3=5").steps == [
            "Initial equation: 2x+3=5",
            "Split sides: left = 2x+3, right = 5",
            "Left side: 2x + 3",
            "Right side: 0x + 5",
            "Simplified: 2x = 2",
            "Solution: x = 2 / 2 = 1",
        ]

    def test_negative_constant_trace(self):
        steps = solve_equation("3x-2=x+4").steps
        assert steps[2] == "Left side: 3x - 2"
        assert steps[3] == "Right side: 1x + 4"
        assert steps[4] == "Simplified: 2x = 6"
        assert steps[5] == "Solution: x = 6 / 2 = 3"

    def test_no_solution_trace(self):
        steps = solve_equation("x=x+1").steps
        assert steps[-2] == "Simplified: 0x = 1"
        assert steps[-1] == "1 ≠ 0 → no solution"

    def test_infinite_trace(self):
        steps = solve_equation("x+1=x+1").steps
        assert steps[-2] == "Simplified: 0x = 0"
        assert steps[-1] == "0 = 0 → infinitely many solutions"

    def test_initial_step_keeps_original_text(self):
        steps = solve_equation("2x + 3 = 5").steps
        assert steps[0] == "Initial equation: 2x + 3 = 5"
        assert steps[1] == "Split sides: left = 2x+3, right = 5"

    def test_repeated_calls_are_identical(self):
        first = solve_equation("3x-2=x+4")
        second = solve_equation("3x-2=x+4")
        assert first.steps == second.steps
        assert first.solution == second.solution
        assert first.verification_steps == second.verification_steps


class TestVerification:
    def test_unique_solution_is_verified(self):
        result = solve_equation("2x+3=5")
        assert result.verified is True
        assert result.verification_steps == [
            "Substitute x = 1 into both sides",
            "Left side: 2(1)+3 = 5",
            "Right side: 5 = 5",
            "Both sides equal 5 ✓",
        ]

    def test_no_verification_without_unique_solution(self):
        for eq in ("x=x+1", "x+1=x+1"):
            result = solve_equation(eq)
            assert result.verified is None
            assert result.verification_steps == []

    def test_extra_constants_fail_verification(self):
        result = solve_equation("x+1+1=3")
        assert result.solution == 2.0
        assert result.verified is False
        assert result.verification_steps[-1] == "4 ≠ 3 ✗"

    def test_parse_side_handles_leading_zeros(self):
        expr = engine._parse_side("007x+01")
        assert float(expr.subs(engine.x, 1)) == 8.0


# ── Validation ──────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "equation,code,message",
    [
        ("2x+3", "MISSING_EQUALS", "missing equals sign"),
        ("3=5", "MISSING_VARIABLE", "missing variable"),
        ("2X+3=5", "MISSING_VARIABLE", "missing variable"),
        ("x=1=2", "MULTIPLE_EQUALS", "multiple equals signs"),
    ],
)
def test_required_structure(equation: str, code: str, message: str) -> None:
    with pytest.raises(ValidationError) as exc:
        solve_equation(equation)
    assert exc.value.code == code
    assert str(exc.value) == message


def test_missing_equals_wins_over_missing_variable() -> None:
    with pytest.raises(ValidationError) as exc:
        solve_equation("3+5")
    assert exc.value.code == "MISSING_EQUALS"


@pytest.mark.parametrize(
    "equation,code",
    [
        ("=5x", "EMPTY_SIDE"),
        ("2x+3=", "EMPTY_SIDE"),
        ("x^2=4", "INVALID_CHARACTER"),
        ("2(x+1)=4", "INVALID_CHARACTER"),
        ("2*x=4", "INVALID_CHARACTER"),
        ("x2=4", "MALFORMED_TERM"),
        ("2x3=4", "MALFORMED_TERM"),
        ("xx=1", "MALFORMED_TERM"),
        ("2x+-3=1", "MALFORMED_TERM"),
        ("2x+3x=5", "MULTIPLE_VARIABLE_TERMS"),
        ("1=x-x", "MULTIPLE_VARIABLE_TERMS"),
        ("1" + "0" * 400 + "x=1", "NUMBER_OUT_OF_RANGE"),
        ("x=1" + "0" * 400, "NUMBER_OUT_OF_RANGE"),
        # each coefficient fits, their difference does not
        ("1" + "0" * 308 + "x=-1" + "0" * 308 + "x+1", "NUMBER_OUT_OF_RANGE"),
        ("0.001x=1" + "0" * 308, "NUMBER_OUT_OF_RANGE"),
    ],
)
def test_unsupported_forms_are_rejected(equation: str, code: str) -> None:
    with pytest.raises(ValidationError) as exc:
        solve_equation(equation)
    assert exc.value.code == code
