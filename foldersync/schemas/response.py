from typing import Generic, List, Optional, TypeVar
from datetime import datetime

from pydantic import BaseModel, Field, ConfigDict


T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Standard API response wrapper for all endpoints"""
    success: bool = Field(True, description="Indicates if the request was successful")
    message: Optional[str] = Field(None, description="Human-readable message about the operation")
    data: Optional[T] = Field(None, description="Response data payload")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "success": True,
                "message": "Folders retrieved successfully",
                "data": [{"folder_id": "3f2a9c", "name": "Docs", "path": "/Docs"}],
            }
        }
    )


class ErrorDetail(BaseModel):
    """Detailed error information for validation and business logic errors"""
    code: str = Field(..., description="Error code identifier")
    message: str = Field(..., description="Human-readable error message")
    field: Optional[str] = Field(None, description="Field name that caused the error (for validation errors)")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "code": "invalid_move",
                "message": "Cannot move a folder into its descendant",
                "field": "parent_id"
            }
        }
    )


class ApiError(BaseModel):
    """Error response wrapper for failed operations"""
    success: bool = Field(False, description="Always false for error responses")
    message: str = Field(..., description="Main error message")
    code: Optional[str] = Field(None, description="Error kind: invalid_input, not_found, invalid_move, store_failure")
    errors: Optional[List[ErrorDetail]] = Field(None, description="Detailed error information")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Error timestamp")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "success": False,
                "message": "Folder not found",
                "code": "not_found",
                "errors": [
                    {
                        "code": "not_found",
                        "message": "Folder not found",
                        "field": "folder_id"
                    }
                ],
                "timestamp": "2024-01-15T10:30:00Z"
            }
        }
    )


class HealthCheck(BaseModel):
    """Health check response schema"""
    status: str = Field(..., description="Service status")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Health check timestamp")
    version: Optional[str] = Field(None, description="API version")
