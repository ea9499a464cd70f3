"""
Fee validation errors.

Both error kinds are ordinary, recoverable validation failures on the caller's
input. They subclass ValueError so callers that already guard numeric parsing
with ``except ValueError`` keep working.
"""

from fee_engine.core.constants import ERROR_NON_POSITIVE_AMOUNT, ERROR_RATE_OUT_OF_RANGE
from fee_engine.core.response_models import ErrorCode


class FeeError(ValueError):
    """Base class for fee input validation failures."""

    error_code = ErrorCode.VALIDATION_ERROR
    default_message = "invalid fee input"

    def __init__(self, message=None, value=None):
        self.value = value
        super().__init__(message or self.default_message)


class NonPositiveAmount(FeeError):
    """The amount is zero, negative, non-finite, not a decimal number or not below 1E+50."""

    error_code = ErrorCode.NON_POSITIVE_AMOUNT
    default_message = ERROR_NON_POSITIVE_AMOUNT


class RateOutOfRange(FeeError):
    """The basis points value is below 0 or above 10000."""

    error_code = ErrorCode.RATE_OUT_OF_RANGE
    default_message = ERROR_RATE_OUT_OF_RANGE
