"""
Constants and enums for the pitch-class set system.

No magic strings - use enums for constrained values.
"""

from enum import Enum

# Size of the pitch-class universe (12-tone equal temperament)
MODULUS = 12

# Interval classes 1..6 (unison is never counted)
INTERVAL_CLASS_COUNT = 6

# The full aggregate, ascending
AGGREGATE: tuple[int, ...] = tuple(range(MODULUS))


class TransformOperation(str, Enum):
    """Operations accepted by the transform tool."""

    T = "T"  # Transposition by n
    I = "I"  # noqa: E741 - inversion, conventional name
    TNI = "TnI"  # Inversion followed by transposition by n
    IXY = "IXY"  # Inversion about the axis x + y
    COMPLEMENT = "complement"
    REVERSE = "reverse"
    ROTATE = "rotate"
    ZERO = "zero"
    SORT = "sort"


class ErrorMessages:
    """Standardized error messages."""

    UNKNOWN_PITCH_CLASS = "Unknown pitch class: {value}"
    UNKNOWN_OPERATION = "Unknown operation: '{operation}'. Expected one of: {expected}."
    MISSING_PARAMETER = "Operation '{operation}' requires parameter '{parameter}'."


class SuccessMessages:
    """Standardized success messages."""

    RELATED_BY_TRANSPOSITION = "Target is T{n} of source."
    RELATED_BY_INVERSION = "Target is T{n}I of source."
    NOT_RELATED = "Sets are not related by a single transposition or inversion."
