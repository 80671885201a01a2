"""Step-by-step linear equation solver."""

"""
Parses a single-variable linear equation of the form ``ax + b = cx + d``
(e.g. "2x + 3 = 5"), reduces each side to a coefficient / constant pair,
solves with plain float arithmetic and produces a human-readable step trace.
A unique solution is then checked by substituting it back into both sides
with SymPy.
"""

import logging
import math
import re
from tokenize import TokenError

from sympy import Float, symbols
from sympy.parsing.sympy_parser import parse_expr, standard_transformations

from solver.errors import ValidationError
from solver.formatting import fmt_num
from solver.types import LinearForm, SolutionKind, SolveResult

logger = logging.getLogger(__name__)

x = symbols('x')

TRANSFORMATIONS = standard_transformations

# An unsigned decimal: "2", "2.", "2.5" or ".5".
_NUMBER = r'(?:\d+(?:\.\d*)?|\.\d+)'
_TERM = rf'(?:{_NUMBER}?x|{_NUMBER})'
# A side is one optionally signed term followed by signed terms.
_SIDE_RE = re.compile(rf'[+-]?{_TERM}(?:[+-]{_TERM})*')

# Coefficient immediately preceding the variable symbol.
_VAR_TERM_RE = re.compile(r'([+-]?\d*\.?\d*)x')
_CONST_RE = re.compile(r'[+-]?(?:\d+\.?\d*|\.\d+)')

_ALLOWED_CHARS = set("0123456789.+-x")

_VERIFY_TOLERANCE = 1e-9


# ── Validation ──────────────────────────────────────────────────────────

def _validate_characters(side: str) -> None:
    """Reject sides that contain characters outside ``0-9 . + - x``."""
    bad = {ch for ch in side if ch not in _ALLOWED_CHARS}
    if bad:
        bad_sorted = " ".join(sorted(bad))
        raise ValidationError(
            f"Invalid character(s): {bad_sorted}. "
            f"Only digits, '.', '+', '-', 'x' and one '=' are allowed.",
            code="INVALID_CHARACTER",
        )


def _validate_side(side: str, side_name: str) -> None:
    if not side:
        raise ValidationError(
            f"The {side_name} side of the equation is empty.",
            code="EMPTY_SIDE",
        )
    _validate_characters(side)
    if not _SIDE_RE.fullmatch(side):
        raise ValidationError(
            f"Could not read the {side_name} side '{side}' as a sum of terms "
            f"like 3x, -x or 2.5.",
            code="MALFORMED_TERM",
        )
    if side.count('x') > 1:
        raise ValidationError(
            f"The {side_name} side '{side}' has more than one x term. "
            f"Combine them first (e.g. 2x+3x → 5x).",
            code="MULTIPLE_VARIABLE_TERMS",
        )


def _normalize(equation_str: str) -> str:
    """Strip whitespace and enforce the '=' and 'x' requirements, in that order."""
    clean = re.sub(r'\s+', '', equation_str)
    equals = clean.count('=')
    if equals == 0:
        raise ValidationError("missing equals sign", code="MISSING_EQUALS")
    if equals > 1:
        raise ValidationError("multiple equals signs", code="MULTIPLE_EQUALS")
    if 'x' not in clean:
        raise ValidationError("missing variable", code="MISSING_VARIABLE")
    return clean


# ── Coefficient extraction ──────────────────────────────────────────────

def _parse_coefficient(token: str) -> float:
    if token in ('', '+'):
        return 1.0
    if token == '-':
        return -1.0
    return float(token)


def _require_finite(*values: float) -> None:
    if not all(math.isfinite(v) for v in values):
        raise ValidationError(
            "A number in the equation, or a value derived from it, is too "
            "large to represent.",
            code="NUMBER_OUT_OF_RANGE",
        )


def extract_linear_form(side: str) -> LinearForm:
    """Read one side as ``a·x + b``.

    The constant is the first signed number left once the variable term has
    been removed; any further constants on the same side are ignored.
    Raises ``ValidationError`` (``NUMBER_OUT_OF_RANGE``) if either number
    overflows a float.
    """
    match = _VAR_TERM_RE.search(side)
    if match:
        a = _parse_coefficient(match.group(1))
        rest = side[:match.start()] + side[match.end():]
    else:
        a = 0.0
        rest = side
    const = _CONST_RE.search(rest)
    b = float(const.group(0)) if const else 0.0
    _require_finite(a, b)
    return LinearForm(a=a, b=b)


def _describe_form(label: str, form: LinearForm) -> str:
    sign = '+' if form.b >= 0 else '-'
    return f"{label} side: {fmt_num(form.a)}x {sign} {fmt_num(abs(form.b))}"


# ── Verification ────────────────────────────────────────────────────────

def _parse_side(side: str):
    """Parse one validated side into a SymPy expression."""
    explicit = re.sub(r'([\d.])x', r'\1*x', side)
    # "007" is not a valid Python literal
    explicit = re.sub(r'(?<![\d.])0+(?=\d)', '', explicit)
    try:
        return parse_expr(explicit, local_dict={'x': x},
                          transformations=TRANSFORMATIONS)
    except (SyntaxError, TokenError, TypeError) as e:
        raise ValidationError(
            f"Could not parse expression: '{side}'. Error: {e}",
            code="PARSE_ERROR",
        ) from e


def _verify(left: str, right: str, solution: float) -> tuple[list[str], bool]:
    """Substitute *solution* into both original sides and compare."""
    sol_str = fmt_num(solution)
    value = Float(solution)
    lhs_val = float(_parse_side(left).subs(x, value))
    rhs_val = float(_parse_side(right).subs(x, value))

    lhs_shown = left.replace('x', f'({sol_str})')
    rhs_shown = right.replace('x', f'({sol_str})')
    steps = [
        f"Substitute x = {sol_str} into both sides",
        f"Left side: {lhs_shown} = {fmt_num(lhs_val)}",
        f"Right side: {rhs_shown} = {fmt_num(rhs_val)}",
    ]
    ok = math.isclose(lhs_val, rhs_val,
                      rel_tol=_VERIFY_TOLERANCE, abs_tol=_VERIFY_TOLERANCE)
    if ok:
        steps.append(f"Both sides equal {fmt_num(lhs_val)} ✓")
    else:
        steps.append(f"{fmt_num(lhs_val)} ≠ {fmt_num(rhs_val)} ✗")
    return steps, ok


# ── Main public entry point ─────────────────────────────────────────────

def solve_equation(equation_str: str) -> SolveResult:
    """
    Solve a single-variable linear equation step by step.

    Raises ``ValidationError`` when the equation has no '=', more than one
    '=', no ``x``, or a side that is not a plain sum of ``a·x`` and constant
    terms.  Returns a ``SolveResult`` whose ``steps`` are stable for identical
    input.
    """
    clean = _normalize(equation_str)
    left_str, right_str = clean.split('=')
    _validate_side(left_str, "left")
    _validate_side(right_str, "right")

    steps = [f"Initial equation: {equation_str}"]
    steps.append(f"Split sides: left = {left_str}, right = {right_str}")

    left = extract_linear_form(left_str)
    steps.append(_describe_form("Left", left))
    right = extract_linear_form(right_str)
    steps.append(_describe_form("Right", right))

    total_a = left.a - right.a
    total_b = right.b - left.b
    _require_finite(total_a, total_b)
    steps.append(f"Simplified: {fmt_num(total_a)}x = {fmt_num(total_b)}")

    if total_a == 0:
        if total_b == 0:
            steps.append("0 = 0 → infinitely many solutions")
            kind = SolutionKind.INFINITE
        else:
            steps.append(f"{fmt_num(total_b)} ≠ 0 → no solution")
            kind = SolutionKind.NONE
        logger.debug("solved %r: %s", equation_str, kind.value)
        return SolveResult(kind=kind, steps=steps, left=left, right=right)

    solution = total_b / total_a
    _require_finite(solution)
    steps.append(
        f"Solution: x = {fmt_num(total_b)} / {fmt_num(total_a)} = {fmt_num(solution)}"
    )
    verification_steps, verified = _verify(left_str, right_str, solution)
    if not verified:
        logger.warning("verification failed for %r (x = %r)", equation_str, solution)
    logger.debug("solved %r: x = %r", equation_str, solution)

    return SolveResult(
        kind=SolutionKind.UNIQUE,
        steps=steps,
        left=left,
        right=right,
        solution=solution,
        verification_steps=verification_steps,
        verified=verified,
    )
