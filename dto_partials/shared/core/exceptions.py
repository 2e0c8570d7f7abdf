# 📄 File: dto_partials/shared/core/exceptions.py
# 🧭 Purpose (Layman Explanation):
# This file defines the special error types the data layer uses to say what went wrong,
# for example a data class pointing at a nested class that does not exist.
# 🧪 Purpose (Technical Summary):
# Custom exception hierarchy providing specific error types with HTTP status codes,
# error details, and proper serialization for API responses and error handling.
# 🔗 Dependencies:
# FastAPI HTTPException, typing, HTTP status constants
# 🔄 Connected Modules / Calls From:
# Data schema discovery, data object creation, presentation layer

from typing import Any, Dict, Optional
from fastapi import HTTPException, status


class DataLayerException(Exception):
    """
    Base exception class for the data layer.
    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.error_code = error_code or self.__class__.__name__.upper()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format."""
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
                "status_code": self.status_code
            }
        }

    def to_http_exception(self) -> HTTPException:
        """Convert to FastAPI HTTPException."""
        return HTTPException(
            status_code=self.status_code,
            detail=self.to_dict()["error"]
        )


# =============================================================================
# CONFIGURATION EXCEPTIONS
# =============================================================================

class DataConfigurationError(DataLayerException):
    """
    Exception raised when a data class is declared incorrectly.
    Used when a field points at a nested data class that cannot be resolved.
    """

    def __init__(
        self,
        message: str = "Invalid data class configuration",
        data_class: Optional[str] = None,
        field_name: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if data_class:
            details["data_class"] = data_class
        if field_name:
            details["field"] = field_name

        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details,
            error_code="DATA_CONFIGURATION_ERROR"
        )


# =============================================================================
# CREATION EXCEPTIONS
# =============================================================================

class CannotCreateDataError(DataLayerException):
    """
    Exception raised when a data object cannot be created from a payload.
    """

    def __init__(
        self,
        data_class: str,
        payload_type: str,
        message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        details["data_class"] = data_class
        details["payload_type"] = payload_type

        super().__init__(
            message=message or f"Could not create {data_class} from a {payload_type} payload",
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            details=details,
            error_code="CANNOT_CREATE_DATA"
        )
