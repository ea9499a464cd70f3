"""
API Core Module

This module contains core API components.
"""

from fee_engine.api.core.api_config import api_config, APIConfig
from fee_engine.api.core.api_server import app, create_app
from fee_engine.api.core.api_middleware import setup_middleware, LoggingMiddleware, ErrorHandlingMiddleware

__all__ = [
    "api_config",
    "APIConfig",
    "app",
    "create_app",
    "setup_middleware",
    "LoggingMiddleware",
    "ErrorHandlingMiddleware"
]
