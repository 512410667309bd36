# api/utils/errors.py
from fastapi import HTTPException, status
from typing import Optional, Dict, Any
import logging
import traceback

from building_shell_generator.core.errors import GeometryError

logger = logging.getLogger("shell_generator.api")

class APIError(Exception):
    """
    Base class for API-specific exceptions.

    This class extends the standard Exception to include HTTP status codes
    and structured error details for API responses.
    """
    def __init__(
        self,
        status_code: int,
        detail: str,
        internal_code: Optional[str] = None,
        extra: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize the APIError with HTTP status and details.

        Args:
            status_code: HTTP status code to return
            detail: Human-readable error message
            internal_code: Optional internal error code for client reference
            extra: Optional additional error context
        """
        self.status_code = status_code
        self.detail = detail
        self.internal_code = internal_code
        self.extra = extra or {}
        super().__init__(detail)

    def to_http_exception(self) -> HTTPException:
        """
        Convert to FastAPI HTTPException.

        Returns:
            HTTPException with appropriate status code and details
        """
        error_response = {
            "detail": self.detail,
        }

        if self.internal_code:
            error_response["code"] = self.internal_code

        if self.extra:
            error_response["extra"] = self.extra

        return HTTPException(
            status_code=self.status_code,
            detail=error_response
        )

class GeometryValidationError(APIError):
    """Error raised when the geometry core rejects the request."""
    def __init__(self, error: GeometryError):
        """
        Initialize from a geometry core error.

        Args:
            error: The InvalidDimension or DegenerateProfile raised by the core
        """
        super().__init__(
            status_code=422,
            detail=error.detail,
            internal_code=error.code,
            extra=error.extra
        )

def handle_exception(e: Exception, resource_type: str = "resource") -> HTTPException:
    """
    Handle exceptions and convert to appropriate HTTPExceptions.

    Args:
        e: The exception to handle
        resource_type: Type of resource being processed (for context)

    Returns:
        HTTPException with appropriate status code and details
    """
    if isinstance(e, APIError):
        return e.to_http_exception()

    if isinstance(e, GeometryError):
        return GeometryValidationError(e).to_http_exception()

    if isinstance(e, HTTPException):
        return e

    # Log the full error
    error_detail = traceback.format_exc()
    logger.error(f"Unhandled exception: {str(e)}\n{error_detail}")

    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail={
            "detail": f"An unexpected error occurred: {str(e)}",
            "code": "internal_server_error",
            "resource_type": resource_type,
        }
    )
