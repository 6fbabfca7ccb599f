"""
Input validation for the daily prompt.
"""

import re

WHOLE_NUMBER_PATTERN = re.compile(r"[0-9]+")


class InvalidUsageInput(ValueError):
    """Raised when the prompt answer is not a whole number of litres."""

    def __init__(self, answer: str):
        super().__init__("Please enter a whole number of litres, e.g. 42")
        self.answer = answer


def parse_litres(answer: str) -> float:
    """Parse the prompt answer into litres.

    Surrounding whitespace is ignored; anything other than plain ASCII
    digits (signs, decimal points, inner spaces) is rejected.

    Raises:
        InvalidUsageInput: If the answer is not a whole number
    """
    trimmed = (answer or "").strip()
    if not WHOLE_NUMBER_PATTERN.fullmatch(trimmed):
        raise InvalidUsageInput(answer)
    return float(int(trimmed))
