"""
Common response schemas used across all API endpoints.
"""
from typing import Any, Dict, Optional
from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Error detail information."""
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: Dict[str, Any] = Field(default_factory=dict, description="Additional error context")
    trace_id: Optional[str] = Field(None, description="Request trace ID for debugging")


class ErrorResponse(BaseModel):
    """Standard error response format."""
    error: ErrorDetail

    model_config = {
        "json_schema_extra": {
            "example": {
                "error": {
                    "code": "ALREADY_ENROLLED",
                    "message": "You are already enrolled in this hackathon",
                    "details": {"user_id": "u-001", "hackathon_id": "h-101"},
                    "trace_id": "abc-def-123",
                }
            }
        }
    }


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = Field("healthy", description="Service status")
    version: str = Field(..., description="API version")
    records: Dict[str, int] = Field(default_factory=dict, description="Record counts in the store")
