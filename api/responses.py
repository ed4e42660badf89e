"""
Standardized API response models and utilities.
Provides consistent error and health payloads across all endpoints.
"""

from typing import Any, Optional
from pydantic import BaseModel, Field
from datetime import datetime


class ErrorDetail(BaseModel):
    """Detailed error information"""

    code: str = Field(..., description="Error code")
    message: str = Field(..., description="Error message")
    details: Optional[Any] = Field(None, description="Additional error details")


class ErrorResponse(BaseModel):
    """Standardized error response"""

    success: bool = Field(False, description="Always false for errors")
    error: ErrorDetail = Field(..., description="Error details")
    timestamp: datetime = Field(
        default_factory=datetime.utcnow, description="Error timestamp"
    )


class HealthResponse(BaseModel):
    """Health check response"""

    status: str = Field(..., description="Service status")
    service: str = Field(..., description="Service name")
    version: Optional[str] = Field(None, description="Service version")
    timestamp: datetime = Field(
        default_factory=datetime.utcnow, description="Check timestamp"
    )


def error_response(code: str, message: str, details: Any = None) -> dict:
    """Create a standardized, JSON-ready error payload"""
    payload = ErrorResponse(
        error=ErrorDetail(code=code, message=message, details=details)
    )
    return payload.model_dump(mode="json", exclude_none=True)
