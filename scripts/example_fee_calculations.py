#!/usr/bin/env python3
"""
Example Fee Calculations

This script walks through the maker/taker fee rules with worked examples,
printing the calculated and expected values side by side.
"""

import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from decimal import Decimal
from fee_engine.fees import FeeCalculator, NonPositiveAmount, RateOutOfRange, Side, fee


EXAMPLES = [
    ("Taker, 25 bps on 100", Decimal('100'), 25, Side.TAKER, Decimal('0.25')),
    ("Maker, 10 bps on 100.00", Decimal('100.00'), 10, Side.MAKER, Decimal('0.05')),
    ("Taker, 10 bps on 100.00", Decimal('100.00'), 10, Side.TAKER, Decimal('0.10')),
    ("Taker, 15 bps on 250", Decimal('250'), 15, Side.TAKER, Decimal('0.375')),
    ("Taker, 0 bps", Decimal('1234.5678'), 0, Side.TAKER, Decimal('0')),
    ("Taker, 10000 bps (100%)", Decimal('1234.5678'), 10_000, Side.TAKER, Decimal('1234.5678')),
]


def main():
    """Demonstrate fee calculations with worked examples"""

    print("=" * 80)
    print("MAKER/TAKER FEE CALCULATOR - EXAMPLE CALCULATIONS")
    print("=" * 80)
    print()

    all_match = True
    for number, (title, amount, bps, side, expected) in enumerate(EXAMPLES, start=1):
        print(f"EXAMPLE {number}: {title}")
        print("-" * 50)
        calculated = fee(amount, bps, side)
        match = calculated == expected
        all_match = all_match and match
        print(f"Amount: {amount}  Rate: {bps} bps  Side: {side.value}")
        print(f"Calculated fee: {calculated:f}")
        print(f"Expected: {expected:f}")
        print(f"Match: {'YES' if match else 'NO'}")
        print()

    print("REJECTED INPUT")
    print("-" * 50)
    for amount, bps in ((Decimal('0'), 10), (Decimal('100'), 10_001)):
        try:
            fee(amount, bps, Side.TAKER)
            print(f"fee({amount}, {bps}) was accepted - UNEXPECTED")
            all_match = False
        except (NonPositiveAmount, RateOutOfRange) as e:
            print(f"fee({amount}, {bps}) -> {type(e).__name__}: {e}")
    print()

    print("BREAKDOWN")
    print("-" * 50)
    breakdown = FeeCalculator().calculate_fee_breakdown(Decimal('1234.5678'), 12, Side.MAKER)
    for key, value in breakdown.items():
        print(f"{key:>26}: {format(value, 'f') if isinstance(value, Decimal) else value}")
    print()

    print("=" * 80)
    print(f"All examples match: {'YES' if all_match else 'NO'}")
    return 0 if all_match else 1


if __name__ == "__main__":
    sys.exit(main())
