"""
Standardized response models for consistent error handling across services.
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Dict
from datetime import datetime, timezone
from enum import Enum


class ErrorCode(Enum):
    """Standardized error codes for consistent error handling."""
    SUCCESS = "SUCCESS"
    NON_POSITIVE_AMOUNT = "NON_POSITIVE_AMOUNT"
    RATE_OUT_OF_RANGE = "RATE_OUT_OF_RANGE"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


@dataclass
class ServiceResponse:
    """Standardized response format for all service operations."""
    success: bool
    data: Optional[Any] = None
    error: Optional[str] = None
    error_code: Optional[ErrorCode] = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    metadata: Optional[Dict[str, Any]] = None

    @classmethod
    def success_response(cls, data: Any = None, metadata: Optional[Dict[str, Any]] = None) -> 'ServiceResponse':
        """Create a successful response."""
        return cls(
            success=True,
            data=data,
            metadata=metadata
        )

    @classmethod
    def error_response(
        cls,
        error: str,
        error_code: ErrorCode = ErrorCode.UNKNOWN_ERROR,
        metadata: Optional[Dict[str, Any]] = None
    ) -> 'ServiceResponse':
        """Create an error response."""
        return cls(
            success=False,
            error=error,
            error_code=error_code,
            metadata=metadata
        )

    @property
    def is_error(self) -> bool:
        return not self.success

    def unwrap(self) -> Any:
        """Return the payload of a successful response, raising on an error response."""
        if not self.success:
            raise ValueError(f"{self.error_code.value if self.error_code else 'ERROR'}: {self.error}")
        return self.data

    def to_dict(self) -> Dict[str, Any]:
        """Convert response to dictionary format."""
        result = {
            "success": self.success,
            "timestamp": self.timestamp.isoformat(),
        }

        if self.data is not None:
            result["data"] = self.data

        if self.error is not None:
            result["error"] = self.error

        if self.error_code is not None:
            result["error_code"] = self.error_code.value

        if self.metadata is not None:
            result["metadata"] = self.metadata

        return result
