"""
Health Check API Routes

Fixed health payload used as a target by HTTP test tooling.
"""

from fastapi import APIRouter

from fee_engine.api.models.response_models import HealthResponse
from fee_engine.core.constants import HEALTH_STATUS_OK, HEALTH_VERSION

router = APIRouter()

@router.get("/health", response_model=HealthResponse, summary="Health check")
async def health_check() -> HealthResponse:
    """
    Basic health check endpoint. Always returns {"status": "ok", "version": "v1"}.
    """
    return HealthResponse(status=HEALTH_STATUS_OK, version=HEALTH_VERSION)
