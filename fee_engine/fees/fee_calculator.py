"""
Maker/Taker Fee Calculator

This module computes the fee owed on a trade from its amount, a fee rate in
basis points and the trade side. All arithmetic is exact decimal arithmetic;
the result is rounded once, at the final step, to 8 decimal places.

Formula: Fee = round(Amount × bps / 10000 × Multiplier(side), 8)

The module-level ``fee`` function is the pure core: no logging, no shared
state, safe to call from any number of threads. ``FeeCalculator`` wraps it for
services that need a configurable rounding mode or schedule, logging, a full
breakdown, or error values instead of exceptions.
"""

import decimal
import logging
import numbers
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Mapping, Optional, Union

from fee_engine.core.constants import (
    BPS_DENOMINATOR,
    DEFAULT_ROUNDING,
    ERROR_AMOUNT_TOO_LARGE,
    FEE_DECIMAL_PLACES,
    FEE_QUANTUM,
    MAX_AMOUNT,
    MAX_BPS,
    MIN_BPS,
)
from fee_engine.core.response_models import ErrorCode, ServiceResponse
from fee_engine.fees.fee_errors import FeeError, NonPositiveAmount, RateOutOfRange
from fee_engine.fees.fee_models import FEE_SCHEDULE, Side, resolve_rounding, validate_schedule

logger = logging.getLogger(__name__)

AmountLike = Union[Decimal, int, float, str]


def _to_amount(amount: AmountLike) -> Decimal:
    """Convert and validate the trade amount."""
    if isinstance(amount, bool):
        raise TypeError("amount must be a decimal number, not bool")
    if isinstance(amount, Decimal):
        value = amount
    elif isinstance(amount, (int, float, str)):
        # str() first so a float contributes its shortest repr, not its binary value
        try:
            value = Decimal(str(amount))
        except InvalidOperation:
            raise NonPositiveAmount(f"amount is not a decimal number: {amount!r}", value=amount) from None
    else:
        raise TypeError(f"amount must be Decimal, int, float or str, got {type(amount).__name__}")

    if not value.is_finite():
        raise NonPositiveAmount(f"amount must be finite, got {value}", value=amount)
    if value <= 0:
        raise NonPositiveAmount(value=amount)
    if value >= MAX_AMOUNT:
        raise NonPositiveAmount(f"{ERROR_AMOUNT_TOO_LARGE}, got {value}", value=amount)
    return value


def _check_bps(bps: int) -> int:
    """Validate the fee rate in basis points."""
    if isinstance(bps, bool) or not isinstance(bps, numbers.Integral):
        raise TypeError(f"bps must be an integer, got {type(bps).__name__}")
    if not MIN_BPS <= bps <= MAX_BPS:
        raise RateOutOfRange(f"rate basis points out of range: {bps} (expected {MIN_BPS}..{MAX_BPS})", value=bps)
    return int(bps)


def _fee_context(amount: Decimal, multiplier: Decimal, rounding: str) -> decimal.Context:
    """
    Build a decimal context wide enough that every step before the final
    quantize is exact.

    amount × bps adds at most 5 digits, the division by 10000 only moves the
    exponent, and the multiplier adds its own digits. The quantize step needs
    room for the integer digits plus 8 fractional ones.
    """
    prec = max(
        28,
        len(amount.as_tuple().digits) + len(multiplier.as_tuple().digits) + 10,
        amount.adjusted() + FEE_DECIMAL_PLACES + 2,
    )
    return decimal.Context(
        prec=prec,
        rounding=rounding,
        Emax=decimal.MAX_EMAX,
        Emin=decimal.MIN_EMIN,
    )


def _compute(
    amount: AmountLike,
    bps: int,
    side: Union[Side, str],
    rounding: str,
    schedule: Mapping[Side, Decimal],
) -> Dict[str, Any]:
    value = _to_amount(amount)
    rate_bps = _check_bps(bps)
    side = Side.parse(side)
    try:
        multiplier = schedule[side]
    except KeyError:
        raise ValueError(f"No fee multiplier configured for side {side.value!r}") from None

    with decimal.localcontext(_fee_context(value, multiplier, rounding)):
        base = value * Decimal(rate_bps) / BPS_DENOMINATOR
        unrounded = base * multiplier
        rounded = unrounded.quantize(FEE_QUANTUM, rounding=rounding)

    return {
        'amount': value,
        'bps': rate_bps,
        'side': side,
        'multiplier': multiplier,
        'base_fee': base,
        'unrounded_fee': unrounded,
        'fee': rounded,
    }


def fee(amount: AmountLike, bps: int, side: Union[Side, str]) -> Decimal:
    """
    Calculate the fee owed on a trade.

    Args:
        amount: Trade amount, strictly positive and below 1E+50
        bps: Fee rate in basis points, 0..10000 inclusive
        side: Side.MAKER (half fee) or Side.TAKER (full fee)

    Returns:
        Fee rounded to 8 decimal places (ROUND_HALF_EVEN)

    Raises:
        NonPositiveAmount: If amount is zero, negative, not finite or not below 1E+50
        RateOutOfRange: If bps is outside 0..10000

    Example:
        >>> fee(Decimal('100'), 25, Side.TAKER)
        Decimal('0.25000000')
    """
    return _compute(amount, bps, side, DEFAULT_ROUNDING, FEE_SCHEDULE)['fee']


class FeeCalculator:
    """
    Configurable maker/taker fee calculator.

    Handles:
    - A rounding mode other than the default ROUND_HALF_EVEN
    - Custom side -> multiplier schedules (multipliers within [0, 1])
    - Fee breakdowns for reporting
    - Error values instead of exceptions for service callers
    """

    def __init__(
        self,
        rounding: str = DEFAULT_ROUNDING,
        schedule: Optional[Mapping[Side, Union[Decimal, int, str]]] = None
    ):
        """
        Initialize the fee calculator.

        Args:
            rounding: Decimal rounding mode name, e.g. "ROUND_HALF_UP"
            schedule: Side -> multiplier mapping; defaults to FEE_SCHEDULE
        """
        self.rounding = resolve_rounding(rounding)
        self.schedule = FEE_SCHEDULE if schedule is None else validate_schedule(schedule)

        logger.debug(f"FeeCalculator initialized with rounding {self.rounding}, "
                     f"schedule {self._schedule_summary()}")

    def _schedule_summary(self) -> Dict[str, str]:
        return {side.value: str(multiplier) for side, multiplier in self.schedule.items()}

    def calculate_fee(self, amount: AmountLike, bps: int, side: Union[Side, str]) -> Decimal:
        """
        Calculate the fee for a single trade.

        Args:
            amount: Trade amount, strictly positive and below 1E+50
            bps: Fee rate in basis points, 0..10000 inclusive
            side: Trade side

        Returns:
            Fee rounded to 8 decimal places

        Raises:
            NonPositiveAmount: If amount is zero, negative, not finite or not below 1E+50
            RateOutOfRange: If bps is outside 0..10000
        """
        try:
            result = _compute(amount, bps, side, self.rounding, self.schedule)
        except FeeError as e:
            logger.warning(f"Fee input rejected ({e.error_code.value}): {e}")
            raise

        logger.debug(f"Fee calculated: {result['fee']} "
                     f"(amount: {result['amount']}, bps: {result['bps']}, "
                     f"side: {result['side'].value})")

        return result['fee']

    def calculate_fee_breakdown(
        self,
        amount: AmountLike,
        bps: int,
        side: Union[Side, str]
    ) -> Dict[str, Any]:
        """
        Calculate the fee together with every intermediate value.

        Args:
            amount: Trade amount, strictly positive and below 1E+50
            bps: Fee rate in basis points
            side: Trade side

        Returns:
            Dictionary with amount, bps, side, rate, multiplier, base_fee,
            fee and fee_percentage_of_amount
        """
        try:
            result = _compute(amount, bps, side, self.rounding, self.schedule)
        except FeeError as e:
            logger.warning(f"Fee breakdown input rejected ({e.error_code.value}): {e}")
            raise

        value = result['amount']
        with decimal.localcontext(_fee_context(value, result['multiplier'], self.rounding)):
            rate = Decimal(result['bps']) / BPS_DENOMINATOR
            percentage = result['fee'] / value * 100

        return {
            'amount': value,
            'bps': result['bps'],
            'side': result['side'].value,
            'rate': rate,
            'multiplier': result['multiplier'],
            'base_fee': result['base_fee'],
            'fee': result['fee'],
            'fee_percentage_of_amount': percentage,
        }

    def try_calculate_fee(
        self,
        amount: AmountLike,
        bps: int,
        side: Union[Side, str]
    ) -> ServiceResponse:
        """
        Calculate the fee, returning validation failures as values.

        Returns:
            ServiceResponse with the fee as data, or with error_code set to
            NON_POSITIVE_AMOUNT / RATE_OUT_OF_RANGE
        """
        try:
            value = self.calculate_fee(amount, bps, side)
        except FeeError as e:
            return ServiceResponse.error_response(
                error=str(e),
                error_code=e.error_code,
                metadata={'bps': bps, 'side': str(getattr(side, 'value', side))}
            )
        return ServiceResponse.success_response(
            data=value,
            metadata={'rounding': self.rounding}
        )

    def get_fee_info(self) -> Dict[str, Any]:
        """
        Get information about the current fee configuration.

        Returns:
            Dictionary with fee configuration details
        """
        return {
            'rounding': self.rounding,
            'decimal_places': FEE_DECIMAL_PLACES,
            'bps_range': (MIN_BPS, MAX_BPS),
            'schedule': self._schedule_summary(),
        }


def validate_fee_calculation(
    amount: AmountLike,
    bps: int,
    side: Union[Side, str],
    expected_fee: AmountLike,
    tolerance: AmountLike = FEE_QUANTUM
) -> bool:
    """
    Validate that a fee calculation is within expected tolerance.

    Args:
        amount: Trade amount
        bps: Fee rate in basis points
        side: Trade side
        expected_fee: Expected fee amount
        tolerance: Acceptable absolute difference (default one unit of the 8th place)

    Returns:
        True if fee is within tolerance, False otherwise (including rejected
        input and an unparseable or non-finite expected_fee or tolerance)
    """
    try:
        calculated_fee = fee(amount, bps, side)
    except FeeError as e:
        logger.warning(f"Fee validation skipped, input rejected: {e}")
        return False

    try:
        expected = Decimal(str(expected_fee))
        allowed = Decimal(str(tolerance))
    except InvalidOperation:
        logger.warning(f"Fee validation skipped, unparseable expected fee {expected_fee!r} or tolerance {tolerance!r}")
        return False

    if not (expected.is_finite() and allowed.is_finite()):
        logger.warning(f"Fee validation skipped, non-finite expected fee {expected} or tolerance {allowed}")
        return False

    difference = abs(calculated_fee - expected)
    is_valid = difference <= allowed

    if not is_valid:
        logger.warning(f"Fee validation failed: calculated={calculated_fee}, "
                       f"expected={expected}, difference={difference}")

    return is_valid
