"""
API Request Models

This module contains Pydantic models for API request validation.
"""

from pydantic import BaseModel, Field, StrictInt, StrictStr

from fee_engine.fees.fee_models import Side

class FeeQuoteRequest(BaseModel):
    """Model for fee quote requests."""
    amount: StrictStr = Field(..., max_length=64, description="Trade amount as a decimal string, e.g. \"100.00\"")
    bps: StrictInt = Field(..., description="Fee rate in basis points (0-10000)")
    side: Side = Field(..., description="maker or taker")
