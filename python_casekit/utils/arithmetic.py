"""Validated numeric helpers."""

from __future__ import annotations

import logging
from numbers import Real

from errors import InvalidNumericError, MissingValueError, TypeMismatchError

logger = logging.getLogger(__name__)

def _is_number(value) -> bool:
    # bool is an int subclass but never a valid operand
    return isinstance(value, Real) and not isinstance(value, bool)


def add_numbers(a: Real, b: Real) -> Real:
    """Add two numbers.

    Raises:
        MissingValueError: either argument is ``None``.
        TypeMismatchError: either argument is not a real number (``bool`` included).
        InvalidNumericError: either argument is NaN.
    """
    if a is None:
        raise MissingValueError("First argument is None. Both arguments must be numbers.")
    if b is None:
        raise MissingValueError("Second argument is None. Both arguments must be numbers.")

    if not _is_number(a) or not _is_number(b):
        logger.debug(f"add_numbers rejected types {type(a).__name__}, {type(b).__name__}")
        raise TypeMismatchError(
            f"Invalid input types. Expected numbers but got "
            f"{type(a).__name__} and {type(b).__name__}."
        )

    # NaN is the only value unequal to itself
    if a != a or b != b:
        raise InvalidNumericError("Invalid input: NaN is not a valid number.")

    return a + b
