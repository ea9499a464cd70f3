"""
Centralized constants for the fee engine.

Fee arithmetic constants live here so the calculator, the API layer and the
scripts agree on denominators, limits and output precision.

Usage:
    from fee_engine.core.constants import BPS_DENOMINATOR, FEE_QUANTUM

    rate = Decimal(bps) / BPS_DENOMINATOR
"""

from decimal import Decimal, ROUND_HALF_EVEN

# Basis points
BPS_DENOMINATOR = Decimal('10000')  # 10000 bps = 100%
MIN_BPS = 0
MAX_BPS = 10_000

# Amounts must be strictly below this (exclusive upper bound)
MAX_AMOUNT = Decimal('1E+50')

# Output precision
FEE_DECIMAL_PLACES = 8
FEE_QUANTUM = Decimal('0.00000001')
DEFAULT_ROUNDING = ROUND_HALF_EVEN

# Maker/Taker multipliers
TAKER_MULTIPLIER = Decimal('1')
MAKER_MULTIPLIER = Decimal('0.5')

# Health fixture payload
HEALTH_STATUS_OK = 'ok'
HEALTH_VERSION = 'v1'

# Error Messages
ERROR_NON_POSITIVE_AMOUNT = 'amount must be positive'
ERROR_RATE_OUT_OF_RANGE = 'rate basis points out of range'
ERROR_AMOUNT_TOO_LARGE = 'amount must be below 1E+50'
