"""
API Response Models

This module contains Pydantic models for API response formatting.
"""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime, timezone

class HealthResponse(BaseModel):
    """Model for health check responses."""
    status: str = Field(..., description="Service status")
    version: str = Field(..., description="API version")

class FeeQuoteResponse(BaseModel):
    """Model for fee quote responses."""
    amount: str = Field(..., description="Trade amount as received")
    bps: int = Field(..., description="Fee rate in basis points")
    side: str = Field(..., description="maker or taker")
    fee: str = Field(..., description="Fee rounded to 8 decimal places")

class ErrorResponse(BaseModel):
    """Model for error responses."""
    error: str = Field(..., description="Error message")
    error_code: str = Field(..., description="Machine-readable error code")
    detail: Optional[str] = Field(None, description="Error details")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), description="Error timestamp")
