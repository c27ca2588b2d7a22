from datetime import datetime
from enum import Enum
from typing import Any, Optional

import pytz
from pydantic import BaseModel

CENTRAL_TZ = pytz.timezone("US/Central")

# ------------------------------- Base Models ------------------------------- #

class ApiStatus(str, Enum):
    """Standard API response statuses"""
    SUCCESS = "success"
    ERROR = "error"
    VALIDATION_ERROR = "validation_error"
    AUTHENTICATION_ERROR = "authentication_error"
    AUTHORIZATION_ERROR = "authorization_error"
    NOT_FOUND = "not_found"
    SERVER_ERROR = "server_error"

class BaseResponse(BaseModel):
    """
    Base response model that all API responses should extend.
    Provides consistent structure across all endpoints.
    """
    status: ApiStatus
    message: str
    data: Optional[Any] = None
    error_code: Optional[str] = None
    timestamp: Optional[str] = None

class HealthResponse(BaseModel):
    status: str
    timestamp: str

def now_timestamp() -> str:
    """Current time as an ISO string in US/Central."""
    return datetime.now(CENTRAL_TZ).isoformat()

# ------------------------------- Response Helpers ------------------------------- #

def success_response(
    message: str = "Operation completed successfully",
    data: Any = None,
    timestamp: Optional[str] = None
) -> dict:
    """Helper function to create a standardized success response"""
    return {
        "status": ApiStatus.SUCCESS.value,
        "message": message,
        "data": data,
        "timestamp": timestamp or now_timestamp()
    }

def error_response(
    message: str = "An error occurred",
    status: ApiStatus = ApiStatus.ERROR,
    error_code: Optional[str] = None,
    data: Any = None,
    timestamp: Optional[str] = None
) -> dict:
    """Helper function to create a standardized error response"""
    return {
        "status": status.value,
        "message": message,
        "data": data,
        "error_code": error_code,
        "timestamp": timestamp or now_timestamp()
    }
