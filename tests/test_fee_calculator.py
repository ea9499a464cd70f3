"""
Test suite for the maker/taker fee calculator

Validates the fee function and the FeeCalculator wrapper with exact decimal
expectations, covering the documented scenarios, validation failures and the
rounding policy.
"""

import unittest
from decimal import Decimal, ROUND_HALF_EVEN, localcontext

from fee_engine.core.response_models import ErrorCode
from fee_engine.fees import (
    FeeCalculator,
    FeeError,
    NonPositiveAmount,
    RateOutOfRange,
    Side,
    fee,
    validate_fee_calculation
)


class TestFeeFunction(unittest.TestCase):
    """Test cases for the pure fee function"""

    def test_taker_quarter_percent(self):
        """25 bps taker fee on 100 is 0.25"""
        self.assertEqual(fee(Decimal('100'), 25, Side.TAKER), Decimal('0.25'))

    def test_maker_half_fee(self):
        """Maker pays half the taker rate"""
        self.assertEqual(fee(Decimal('100.00'), 10, Side.MAKER), Decimal('0.05'))

    def test_taker_full_fee(self):
        self.assertEqual(fee(Decimal('100.00'), 10, Side.TAKER), Decimal('0.10'))

    def test_public_api_scenario(self):
        self.assertEqual(fee(Decimal('250'), 15, Side.TAKER), Decimal('0.375'))

    def test_result_has_eight_decimal_places(self):
        """Output is quantized to exactly 8 fractional digits"""
        result = fee(Decimal('100'), 25, Side.TAKER)
        self.assertEqual(result.as_tuple().exponent, -8)
        self.assertEqual(str(result), '0.25000000')

    def test_zero_rate_is_free(self):
        self.assertEqual(fee(Decimal('987654.321'), 0, Side.TAKER), Decimal('0'))
        self.assertEqual(fee(Decimal('987654.321'), 0, Side.MAKER), Decimal('0'))

    def test_full_rate_charges_whole_amount(self):
        self.assertEqual(fee(Decimal('1234.5678'), 10_000, Side.TAKER), Decimal('1234.5678'))

    def test_full_rate_rounds_amount_to_eight_places(self):
        self.assertEqual(fee(Decimal('1.123456789'), 10_000, Side.TAKER), Decimal('1.12345679'))

    def test_rejects_zero_amount(self):
        with self.assertRaises(NonPositiveAmount):
            fee(Decimal('0'), 10, Side.TAKER)

    def test_rejects_negative_amount(self):
        with self.assertRaises(NonPositiveAmount):
            fee(Decimal('-100'), 10, Side.MAKER)

    def test_rejects_rate_above_range(self):
        with self.assertRaises(RateOutOfRange):
            fee(Decimal('100'), 10_001, Side.TAKER)

    def test_rejects_negative_rate(self):
        with self.assertRaises(RateOutOfRange):
            fee(Decimal('100'), -1, Side.TAKER)

    def test_amount_checked_before_rate(self):
        with self.assertRaises(NonPositiveAmount):
            fee(Decimal('0'), 10_001, Side.TAKER)

    def test_errors_are_value_errors_with_codes(self):
        """FeeError subclasses ValueError and carries an error code"""
        with self.assertRaises(ValueError) as ctx:
            fee(Decimal('100'), 20_000, Side.TAKER)
        self.assertIsInstance(ctx.exception, FeeError)
        self.assertEqual(ctx.exception.error_code, ErrorCode.RATE_OUT_OF_RANGE)
        self.assertEqual(ctx.exception.value, 20_000)
        self.assertEqual(NonPositiveAmount().error_code, ErrorCode.NON_POSITIVE_AMOUNT)

    def test_non_finite_amounts_rejected(self):
        for amount in (Decimal('NaN'), Decimal('sNaN'), Decimal('Infinity'), Decimal('-Infinity')):
            with self.assertRaises(NonPositiveAmount):
                fee(amount, 10, Side.TAKER)

    def test_unparseable_amount_string_rejected(self):
        with self.assertRaises(NonPositiveAmount):
            fee("BTCUSDT' OR 1=1 --", 10, Side.TAKER)

    def test_amount_coercion(self):
        """int, str and float inputs are converted without binary float error"""
        self.assertEqual(fee(100, 25, Side.TAKER), Decimal('0.25'))
        self.assertEqual(fee('100.00', 10, Side.MAKER), Decimal('0.05'))
        self.assertEqual(fee(0.1, 10_000, Side.TAKER), Decimal('0.1'))

    def test_wrong_types_raise_type_error(self):
        with self.assertRaises(TypeError):
            fee(None, 10, Side.TAKER)
        with self.assertRaises(TypeError):
            fee(True, 10, Side.TAKER)
        with self.assertRaises(TypeError):
            fee(Decimal('100'), 10.0, Side.TAKER)
        with self.assertRaises(TypeError):
            fee(Decimal('100'), True, Side.TAKER)

    def test_side_accepts_names(self):
        self.assertEqual(fee(Decimal('100'), 10, 'maker'), Decimal('0.05'))
        self.assertEqual(fee(Decimal('100'), 10, 'TAKER'), Decimal('0.1'))
        with self.assertRaises(ValueError):
            fee(Decimal('100'), 10, 'vip')

    def test_default_rounding_is_half_even(self):
        """Ties round to the even neighbour"""
        self.assertEqual(fee(Decimal('0.000000025'), 10_000, Side.TAKER), Decimal('0.00000002'))
        self.assertEqual(fee(Decimal('0.000000035'), 10_000, Side.TAKER), Decimal('0.00000004'))

    def test_tiny_amount_rounds_to_zero(self):
        self.assertEqual(fee(Decimal('1E-20'), 10_000, Side.TAKER), Decimal('0'))

    def test_large_amount_is_exact(self):
        """No precision loss for amounts beyond the default 28-digit context"""
        amount = Decimal('123456789012345678901234567890.123456789')
        with localcontext() as ctx:
            ctx.prec = 100
            expected = (amount * 3333 / 10000).quantize(Decimal('0.00000001'), rounding=ROUND_HALF_EVEN)
        self.assertEqual(fee(amount, 3333, Side.TAKER), expected)
        self.assertEqual(fee(Decimal('1E+40'), 10_000, Side.TAKER), Decimal('1E+40'))

    def test_amount_upper_bound(self):
        """Amounts at or above 1E+50 are rejected before any arithmetic"""
        for amount in (Decimal('1E+50'), Decimal('1E+999999999999999999'), '1E+30000000'):
            with self.assertRaises(NonPositiveAmount) as ctx:
                fee(amount, 1, Side.TAKER)
            self.assertIn('below 1E+50', str(ctx.exception))

    def test_largest_accepted_amount_is_exact(self):
        amount = Decimal('9.99999999999999999999E+49')
        self.assertEqual(fee(amount, 10_000, Side.TAKER), amount)
        self.assertEqual(fee(amount, 10_000, Side.MAKER), amount / 2)

    def test_caller_context_is_untouched(self):
        """A low-precision caller context neither affects nor is changed by the calculation"""
        with localcontext() as ctx:
            ctx.prec = 5
            result = fee(Decimal('123456789.123'), 10_000, Side.TAKER)
            self.assertEqual(ctx.prec, 5)
        self.assertEqual(result, Decimal('123456789.123'))


class TestFeeCalculator(unittest.TestCase):
    """Test cases for the FeeCalculator wrapper"""

    def setUp(self):
        """Set up test fixtures"""
        self.calculator = FeeCalculator()
        self.half_up_calculator = FeeCalculator(rounding='half_up')

    def test_matches_fee_function(self):
        self.assertEqual(
            self.calculator.calculate_fee(Decimal('250'), 15, Side.TAKER),
            fee(Decimal('250'), 15, Side.TAKER)
        )

    def test_half_up_rounding(self):
        self.assertEqual(self.half_up_calculator.rounding, 'ROUND_HALF_UP')
        self.assertEqual(
            self.half_up_calculator.calculate_fee(Decimal('0.000000025'), 10_000, Side.TAKER),
            Decimal('0.00000003')
        )

    def test_unknown_rounding_rejected(self):
        with self.assertRaises(ValueError):
            FeeCalculator(rounding='ROUND_SIDEWAYS')

    def test_custom_schedule(self):
        """Adding a tier is a data change"""
        calculator = FeeCalculator(schedule={Side.TAKER: '1', Side.MAKER: '0.25'})
        self.assertEqual(calculator.calculate_fee(Decimal('100'), 100, Side.MAKER), Decimal('0.25'))
        self.assertEqual(calculator.calculate_fee(Decimal('100'), 100, Side.TAKER), Decimal('1'))

    def test_schedule_multiplier_above_one_rejected(self):
        with self.assertRaises(ValueError):
            FeeCalculator(schedule={Side.TAKER: '1.5'})

    def test_schedule_missing_side(self):
        calculator = FeeCalculator(schedule={Side.TAKER: '1'})
        with self.assertRaises(ValueError):
            calculator.calculate_fee(Decimal('100'), 10, Side.MAKER)

    def test_calculate_fee_reraises_validation_errors(self):
        with self.assertLogs('fee_engine.fees.fee_calculator', level='WARNING'):
            with self.assertRaises(NonPositiveAmount):
                self.calculator.calculate_fee(Decimal('-1'), 10, Side.TAKER)

    def test_breakdown(self):
        """Breakdown exposes every intermediate value"""
        result = self.calculator.calculate_fee_breakdown(Decimal('1234.5678'), 12, Side.MAKER)

        expected_keys = {
            'amount', 'bps', 'side', 'rate', 'multiplier',
            'base_fee', 'fee', 'fee_percentage_of_amount'
        }
        self.assertEqual(set(result.keys()), expected_keys)

        self.assertEqual(result['amount'], Decimal('1234.5678'))
        self.assertEqual(result['bps'], 12)
        self.assertEqual(result['side'], 'maker')
        self.assertEqual(result['rate'], Decimal('0.0012'))
        self.assertEqual(result['multiplier'], Decimal('0.5'))
        self.assertEqual(result['base_fee'], Decimal('1.48148136'))
        self.assertEqual(result['fee'], Decimal('0.74074068'))
        self.assertEqual(result['fee_percentage_of_amount'], Decimal('0.06'))

    def test_breakdown_rejects_bad_input(self):
        with self.assertRaises(RateOutOfRange):
            self.calculator.calculate_fee_breakdown(Decimal('100'), 10_001, Side.TAKER)

    def test_try_calculate_fee_success(self):
        response = self.calculator.try_calculate_fee(Decimal('100'), 25, Side.TAKER)
        self.assertTrue(response.success)
        self.assertEqual(response.data, Decimal('0.25'))
        self.assertEqual(response.unwrap(), Decimal('0.25'))
        self.assertEqual(response.metadata, {'rounding': 'ROUND_HALF_EVEN'})

    def test_try_calculate_fee_errors_are_values(self):
        response = self.calculator.try_calculate_fee(Decimal('0'), 10, Side.TAKER)
        self.assertFalse(response.success)
        self.assertEqual(response.error_code, ErrorCode.NON_POSITIVE_AMOUNT)

        response = self.calculator.try_calculate_fee(Decimal('100'), 10_001, Side.MAKER)
        self.assertEqual(response.error_code, ErrorCode.RATE_OUT_OF_RANGE)
        self.assertEqual(response.metadata, {'bps': 10_001, 'side': 'maker'})
        with self.assertRaises(ValueError):
            response.unwrap()

    def test_fee_info(self):
        info = self.calculator.get_fee_info()
        self.assertEqual(info['rounding'], 'ROUND_HALF_EVEN')
        self.assertEqual(info['decimal_places'], 8)
        self.assertEqual(info['bps_range'], (0, 10_000))
        self.assertEqual(info['schedule'], {'taker': '1', 'maker': '0.5'})


class TestValidateFeeCalculation(unittest.TestCase):
    """Test cases for validate_fee_calculation"""

    def test_within_tolerance(self):
        self.assertTrue(validate_fee_calculation(Decimal('100'), 25, Side.TAKER, '0.25'))
        self.assertTrue(validate_fee_calculation(100, 25, Side.TAKER, 0.26, tolerance=0.01))

    def test_outside_tolerance(self):
        with self.assertLogs('fee_engine.fees.fee_calculator', level='WARNING'):
            self.assertFalse(validate_fee_calculation(Decimal('100'), 25, Side.TAKER, '0.26'))

    def test_rejected_input_is_invalid(self):
        self.assertFalse(validate_fee_calculation(Decimal('0'), 25, Side.TAKER, '0'))

    def test_unparseable_expectation_is_invalid(self):
        """Bad expected_fee or tolerance values return False instead of raising"""
        with self.assertLogs('fee_engine.fees.fee_calculator', level='WARNING'):
            self.assertFalse(validate_fee_calculation(Decimal('100'), 25, Side.TAKER, 'abc'))
        self.assertFalse(validate_fee_calculation(Decimal('100'), 25, Side.TAKER, '0.25', tolerance='n/a'))
        self.assertFalse(validate_fee_calculation(Decimal('100'), 25, Side.TAKER, 'NaN'))
        self.assertFalse(validate_fee_calculation(Decimal('100'), 25, Side.TAKER, '0.25', tolerance='Infinity'))


if __name__ == '__main__':
    unittest.main()
