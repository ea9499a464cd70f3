"""
API Routes Module

This module contains all API route handlers.
"""

from fee_engine.api.routes.fee_routes import router as fee_router
from fee_engine.api.routes.health_routes import router as health_router

__all__ = [
    "fee_router",
    "health_router"
]
