"""
Arithmetic demo: a division by zero wrapped by the operation that caused it.

Run with:
    python -m feedback.demos.division_by_zero
"""

import sys
from typing import Optional, Tuple

from feedback.config import settings
from feedback.models import ErrorKind, Outcome
from feedback.services import fail, is_failure, show_error, success, wrap
from feedback.utils.logging import get_logger, log_failure, setup_logging

logger = get_logger(__name__, component="demo")


# Error definitions
CANNOT_ADD = ErrorKind(description="An error happened while adding.", name="cannot_add")
DIVISION_BY_ZERO = ErrorKind(description="I can't divide by zero!", name="division_by_zero")
CANNOT_DIVIDE = ErrorKind(description="An error happened while dividing.", name="cannot_divide")


def add(a: int, b: int) -> Tuple[Outcome, Optional[int]]:
    return success(), a + b


def divide(a: int, b: int) -> Tuple[Outcome, Optional[int]]:
    if b == 0:
        return fail(DIVISION_BY_ZERO), None
    return success(), a // b


def complex_operation(a: int, b: int, c: int) -> Tuple[Outcome, Optional[int]]:
    """Compute (a + b) / c, explaining which step failed."""
    outcome, partial_addition = add(a, b)
    outcome = wrap(outcome, CANNOT_ADD)
    if is_failure(outcome):
        return outcome, None

    outcome, result = divide(partial_addition, c)
    outcome = wrap(outcome, CANNOT_DIVIDE)
    if is_failure(outcome):
        return outcome, None

    return success(), result


def main() -> int:
    setup_logging(settings.log_level)

    outcome, _ = complex_operation(1, 2, 0)
    log_failure(logger, outcome, "complex_operation failed")
    show_error(outcome)
    return 0


if __name__ == "__main__":
    sys.exit(main())
