"""
API Models Module

This module contains all API data models.
"""

from fee_engine.api.models.request_models import FeeQuoteRequest

from fee_engine.api.models.response_models import (
    HealthResponse,
    FeeQuoteResponse,
    ErrorResponse
)

__all__ = [
    # Request models
    "FeeQuoteRequest",

    # Response models
    "HealthResponse",
    "FeeQuoteResponse",
    "ErrorResponse"
]
