"""Argument validation helpers."""

from __future__ import annotations

import math
import numbers

from pyrngtimer._errors import (
    ERR_MSG_INVALID_ARGUMENTS,
    ERR_MSG_NON_FINITE,
    InvalidArgumentsError,
    NonFiniteInputError,
)


def validate_finite(value: float, name: str) -> None:
    """Reject non-numeric, NaN and infinite values."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidArgumentsError(
            ERR_MSG_INVALID_ARGUMENTS,
            f"{name} must be a number, got {type(value).__name__}",
        )
    if not math.isfinite(value):
        raise NonFiniteInputError(
            ERR_MSG_NON_FINITE,
            f"{name} must be finite, got {value!r}",
        )


def validate_unsigned(value: int, name: str, maximum: int) -> int:
    """Validate an unsigned integer argument and return it as an int.

    Integral floats such as ``600.0`` are accepted.
    """
    validate_finite(value, name)
    if not isinstance(value, numbers.Integral):
        if not float(value).is_integer():
            raise InvalidArgumentsError(
                ERR_MSG_INVALID_ARGUMENTS,
                f"{name} must be a whole number, got {value!r}",
            )
    value = int(value)
    if not 0 <= value <= maximum:
        raise InvalidArgumentsError(
            ERR_MSG_INVALID_ARGUMENTS,
            f"{name} must be between 0 and {maximum}, got {value}",
        )
    return value
