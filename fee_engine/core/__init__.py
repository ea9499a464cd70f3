"""
Core Module

Shared constants and service response models.
"""

from .response_models import ErrorCode, ServiceResponse

__all__ = [
    'ErrorCode',
    'ServiceResponse'
]
