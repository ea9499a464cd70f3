"""
Fee Models

Value types shared by the fee calculator: the trade side, the multiplier
schedule keyed by side, and the rounding mode lookup.
"""

import decimal
from decimal import Decimal
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Union

from fee_engine.core.constants import MAKER_MULTIPLIER, TAKER_MULTIPLIER


class Side(str, Enum):
    """Trade side selecting the fee schedule multiplier."""
    MAKER = "maker"  # adds liquidity, reduced fee
    TAKER = "taker"  # removes liquidity, full fee

    @classmethod
    def parse(cls, value: Union["Side", str]) -> "Side":
        """Accept a Side or its case-insensitive name/value ("maker", "TAKER")."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown side: {value!r} (expected 'maker' or 'taker')") from None


# Multiplier applied to the base fee for each side. Adding a tier is a data change.
FEE_SCHEDULE: Mapping[Side, Decimal] = MappingProxyType({
    Side.TAKER: TAKER_MULTIPLIER,
    Side.MAKER: MAKER_MULTIPLIER,
})

ROUNDING_MODES = frozenset({
    decimal.ROUND_UP,
    decimal.ROUND_DOWN,
    decimal.ROUND_CEILING,
    decimal.ROUND_FLOOR,
    decimal.ROUND_HALF_UP,
    decimal.ROUND_HALF_DOWN,
    decimal.ROUND_HALF_EVEN,
    decimal.ROUND_05UP,
})


def resolve_rounding(name: str) -> str:
    """
    Map a rounding mode name to the matching ``decimal`` constant.

    Accepts the constant's own value ("ROUND_HALF_EVEN") or the short form
    ("half_even"), case-insensitively.

    Raises:
        ValueError: If the name does not match any decimal rounding mode
    """
    candidate = name.strip().upper()
    if not candidate.startswith("ROUND_"):
        candidate = f"ROUND_{candidate}"
    if candidate not in ROUNDING_MODES:
        raise ValueError(f"Unknown rounding mode: {name!r}")
    return candidate


def validate_schedule(schedule: Mapping[Side, Union[Decimal, int, str]]) -> Mapping[Side, Decimal]:
    """
    Check a side -> multiplier schedule and return a read-only Decimal copy.

    Every multiplier must be a finite decimal in [0, 1]; anything larger would
    let the fee exceed the traded amount.
    """
    if not schedule:
        raise ValueError("Fee schedule cannot be empty")

    checked = {}
    for side, multiplier in schedule.items():
        value = Decimal(str(multiplier))
        if not value.is_finite() or value < 0 or value > 1:
            raise ValueError(f"Multiplier for {Side.parse(side).value} must be within [0, 1], got {multiplier}")
        checked[Side.parse(side)] = value
    return MappingProxyType(checked)
