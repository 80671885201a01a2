"""
MathPanel — plain-text export

Builds the text a "copy" button puts on the clipboard: a solution trail for
an equation and a report for a dataset.
"""

from solver.formatting import fmt_num

_RULE = "=" * 56


def _section(title: str) -> str:
    return f"\n── {title} " + "─" * max(0, 40 - len(title))


def _trail(equation, steps, answer, verification=(), solved_at=None) -> str:
    lines: list[str] = []
    lines.append(_RULE)
    lines.append("  MathPanel — Solution Trail")
    if solved_at is not None:
        lines.append(f"  Solved at {solved_at.strftime('%Y-%m-%d %H:%M:%S')}")
    lines.append(_RULE)

    lines.append(_section("GIVEN"))
    lines.append(f"  Equation: {equation}")

    lines.append(_section("STEPS"))
    for num, step in enumerate(steps, start=1):
        lines.append(f"  Step {num}: {step}")

    if verification:
        lines.append(_section("VERIFICATION"))
        for step in verification:
            lines.append(f"  {step}")

    lines.append(_section("ANSWER"))
    lines.append(f"  {answer}")
    return "\n".join(lines) + "\n"


def solve_result_to_text(equation: str, result) -> str:
    """Convert a solve result into a readable plain-text trail."""
    return _trail(equation, result.steps, result.final_answer,
                  verification=result.verification_steps)


def history_entry_to_text(entry) -> str:
    return _trail(entry.equation, entry.steps, entry.result,
                  solved_at=entry.timestamp)


def statistics_to_text(report, explanations) -> str:
    """Render a statistics report and its explanation cards as plain text."""
    lines: list[str] = []
    lines.append(_RULE)
    lines.append("  MathPanel — Statistical Analysis")
    lines.append(f"  {report.count} observations")
    lines.append(_RULE)

    lines.append(_section("SUMMARY"))
    for label, value in (
        ("Mean", report.mean),
        ("Median", report.median),
        ("Standard deviation", report.standard_deviation),
        ("Variance", report.variance),
        ("Minimum", report.min),
        ("Maximum", report.max),
        ("Range", report.range),
        ("Sum", report.sum),
    ):
        lines.append(f"  {label}: {fmt_num(value)}")

    lines.append(_section("INTERPRETATION"))
    for card in explanations:
        lines.append(f"\n  {card.title} = {card.value}")
        lines.append(f"    Formula: {card.formula}")
        lines.append(f"    {card.description}")
        lines.append(f"    {card.interpretation}")
    return "\n".join(lines) + "\n"
