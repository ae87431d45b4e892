"""Text rendering of estimation results."""
from typing import Iterable

from draw_odds.evaluation.estimator import ReplacementResult

RESULT_MARKER = " >>>"
ERROR_TEXT = "Error"


def format_probabilities(probabilities: Iterable[float]) -> str:
    """Render percentages with one decimal, e.g. '12.5% 0.0%'."""
    return " ".join(f"{probability:.1f}%" for probability in probabilities)


def format_result(result: ReplacementResult) -> str:
    """Category label followed by the five percentages, in input order."""
    return f"{result.reference.label} {format_probabilities(result.probabilities)}"


def format_line(raw_line: str, result: ReplacementResult | None) -> str:
    """
    Build the output line for one input line.

    Args:
        raw_line: Input line as read, without its newline
        result: Estimation result, or None if the line was rejected

    Returns:
        The echoed input, the marker, then the result or 'Error'
    """
    body = ERROR_TEXT if result is None else format_result(result)
    return f"{raw_line}{RESULT_MARKER}{body}"
