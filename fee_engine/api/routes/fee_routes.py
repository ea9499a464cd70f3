"""
Fee API Routes

This module exposes the fee calculator over HTTP for integration tests.
"""

from functools import lru_cache
import logging

from fastapi import APIRouter, Depends

from fee_engine.api.models.request_models import FeeQuoteRequest
from fee_engine.api.models.response_models import ErrorResponse, FeeQuoteResponse
from fee_engine.config import settings
from fee_engine.fees.fee_calculator import FeeCalculator

logger = logging.getLogger(__name__)
router = APIRouter()

@lru_cache(maxsize=1)
def get_fee_calculator() -> FeeCalculator:
    """Shared calculator configured from FEE_ROUNDING."""
    return FeeCalculator(rounding=settings.FEE_ROUNDING)

@router.post(
    "/fees/quote",
    response_model=FeeQuoteResponse,
    responses={422: {"model": ErrorResponse}},
    summary="Quote a trading fee"
)
async def quote_fee(
    quote: FeeQuoteRequest,
    calculator: FeeCalculator = Depends(get_fee_calculator)
) -> FeeQuoteResponse:
    """
    Calculate the fee for an amount, a rate in basis points and a side.

    Validation failures (FeeError) are turned into 422 responses by the
    application's exception handler.
    """
    fee = calculator.calculate_fee(quote.amount, quote.bps, quote.side)

    return FeeQuoteResponse(
        amount=quote.amount,
        bps=quote.bps,
        side=quote.side.value,
        fee=format(fee, "f")
    )

@router.get("/fees/info", summary="Fee configuration")
async def fee_info(calculator: FeeCalculator = Depends(get_fee_calculator)):
    """
    Current rounding mode, precision and side multipliers.
    """
    info = calculator.get_fee_info()
    return {
        "rounding": info["rounding"],
        "decimal_places": info["decimal_places"],
        "bps_range": list(info["bps_range"]),
        "schedule": info["schedule"]
    }
