"""
Configuration Module

Environment-driven settings and logging setup.
"""

from .logging_config import LoggingConfig, setup_logging

__all__ = [
    'LoggingConfig',
    'setup_logging'
]
