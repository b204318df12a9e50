"""
Data Transfer Objects for the object upload API.
Defines request and response schemas for API endpoints.
"""
from typing import Any, List, Optional
from pydantic import BaseModel, Field
from src.models.upload_candidate import UploadCandidate


UPLOADS_REQUIRED_MESSAGE = (
    "Request body is required and the uploads parameter must be an array with at least one object."
)
UNHANDLED_ERROR_MESSAGE = "Unhandled Error"
HEALTH_MESSAGE = "server and router are running"


class ObjectUploadRequest(BaseModel):
    """Request schema for a batch of key/value uploads."""
    uploads: Optional[List[Any]] = Field(default=None, description="Objects of the form {key, value}")
    bucket_name: Optional[str] = Field(default=None, alias="bucketName", description="Target bucket")
    overwrite: Optional[bool] = Field(default=None, description="Replace keys that already exist")


class UploadSummary(BaseModel):
    """Count of successful writes and the annotated batch."""
    uploads: int
    objects: List[UploadCandidate]


class ObjectUploadResponse(BaseModel):
    """Response schema for a processed batch."""
    success: bool = True
    data: UploadSummary


class ErrorMessage(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    """Response schema for request-level failures."""
    success: bool = False
    data: ErrorMessage
    
    @classmethod
    def with_message(cls, message: str) -> "ErrorResponse":
        return cls(data=ErrorMessage(message=message))


class HealthResponse(BaseModel):
    """Response schema for the health check."""
    success: bool = True
    data: str = HEALTH_MESSAGE
