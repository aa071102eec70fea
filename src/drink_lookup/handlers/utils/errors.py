"""
Error taxonomy for the drink lookup handler.

Every service error carries the fixed, client-facing message and the HTTP status
code it maps to. Internal causes are kept on the exception for logging only.
"""

from typing import Any, Dict, Optional

# Client-facing messages
INVALID_REQUEST_BODY = 'Invalid request body'
INVALID_JSON_PAYLOAD = 'Invalid JSON payload'
ITEM_NOT_FOUND = 'Item not found'
INTERNAL_SERVER_ERROR = 'Internal Server Error'


class BaseServiceError(Exception):
    """Base exception class for service errors."""

    status_code: int = 500
    error_code: str = 'INTERNAL_SERVER_ERROR'

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for logging."""
        return {
            'error_code': self.error_code,
            'status_code': self.status_code,
            'error_message': self.message,
            'error_cause': repr(self.cause) if self.cause else None,
        }


class ClientInputError(BaseServiceError):
    """Raised when the request body or one of its fields is invalid."""

    status_code = 400
    error_code = 'CLIENT_INPUT_ERROR'


class NotFoundError(BaseServiceError):
    """Raised when no record matches the requested key."""

    status_code = 404
    error_code = 'RESOURCE_NOT_FOUND'

    def __init__(self, message: str = ITEM_NOT_FOUND, cause: Optional[BaseException] = None):
        super().__init__(message, cause)


class BackendError(BaseServiceError):
    """Raised when the key-value store cannot serve a request."""

    status_code = 500
    error_code = 'BACKEND_ERROR'

    def __init__(self, message: str = INTERNAL_SERVER_ERROR, cause: Optional[BaseException] = None):
        super().__init__(message, cause)


class TelemetryError(BaseServiceError):
    """Raised when a trace segment cannot be emitted. Never reaches the caller."""

    error_code = 'TELEMETRY_ERROR'


def field_missing(field_name: str) -> ClientInputError:
    return ClientInputError(f'{field_name} is missing')


def field_not_a_string(field_name: str) -> ClientInputError:
    return ClientInputError(f'{field_name} is not a string')
