"""
API response models shared across the Simile Board endpoints.

Resource payloads live in ``app.schemas``; this module holds the
service-level shapes used by the error handlers and health checks.
"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional, Dict, Any
from datetime import datetime, timezone
import uuid


class HealthCheckResponse(BaseModel):
    """Response model for the health check endpoint"""
    status: str = Field(description="Overall system status: healthy, degraded, unhealthy")
    version: str = Field(description="API version")
    environment: str = Field(description="Deployment environment")
    database: Dict[str, Any] = Field(default_factory=dict, description="Database probe result")
    uptime_seconds: int = Field(ge=0, description="Process uptime in seconds")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @field_validator('status')
    @classmethod
    def validate_status(cls, v):
        valid_statuses = {"healthy", "degraded", "unhealthy"}
        if v not in valid_statuses:
            raise ValueError(f"status must be one of: {valid_statuses}")
        return v


class StandardErrorResponse(BaseModel):
    """Error body in the same envelope shape as successful responses"""
    status: str = "error"
    data: None = None
    error: str
    error_code: str
    details: Optional[Dict[str, Any]] = None
    request_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @field_validator('error_code')
    @classmethod
    def validate_error_code(cls, v):
        """Error codes are upper snake case, e.g. PIN_LIMIT_EXCEEDED"""
        if not v or not v.replace('_', '').isalnum() or v != v.upper():
            raise ValueError("error_code must be an upper case identifier")
        return v
