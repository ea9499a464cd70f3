"""
Fees Module

This module contains fee calculation and validation components.
"""

from .fee_calculator import FeeCalculator, fee, validate_fee_calculation
from .fee_errors import FeeError, NonPositiveAmount, RateOutOfRange
from .fee_models import FEE_SCHEDULE, Side, resolve_rounding

__all__ = [
    'FeeCalculator',
    'fee',
    'validate_fee_calculation',
    'FeeError',
    'NonPositiveAmount',
    'RateOutOfRange',
    'FEE_SCHEDULE',
    'Side',
    'resolve_rounding'
]
