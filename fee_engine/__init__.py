"""
Fee Engine

Exact-decimal maker/taker fee calculation, plus a small demo API used as a
target for test tooling.
"""

from fee_engine.fees import (
    FEE_SCHEDULE,
    FeeCalculator,
    FeeError,
    NonPositiveAmount,
    RateOutOfRange,
    Side,
    fee,
    validate_fee_calculation,
)

__version__ = "0.1.0"

__all__ = [
    "FEE_SCHEDULE",
    "FeeCalculator",
    "FeeError",
    "NonPositiveAmount",
    "RateOutOfRange",
    "Side",
    "fee",
    "validate_fee_calculation",
    "__version__"
]
