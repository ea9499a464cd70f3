"""
API Layer Module

Demo HTTP endpoints used as targets for test tooling.
"""

from fee_engine.api.core.api_server import app, create_app
from fee_engine.api.core.api_config import api_config

__all__ = [
    "app",
    "create_app",
    "api_config"
]
