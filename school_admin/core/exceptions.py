# school_admin/core/exceptions.py
"""Custom exceptions for the school administration core."""
from typing import Optional


class SchoolAdminException(Exception):
    """Base exception for the school administration core."""
    status_code: int = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(SchoolAdminException):
    """Raised when a mutation targets a record that does not exist."""
    status_code = 404

    def __init__(self, resource: str, public_id: Optional[str] = None):
        message = f"{resource} not found"
        if public_id:
            message += f" with id: {public_id}"
        self.resource = resource
        self.public_id = public_id
        super().__init__(message)


class ValidationError(SchoolAdminException):
    """Raised for structurally invalid payloads, filters or pagination."""
    status_code = 422

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        super().__init__(message)


class InvalidStateTransition(SchoolAdminException):
    """Raised when a status change is not allowed from the current state."""
    status_code = 409

    def __init__(self, current: str, action: str, message: Optional[str] = None):
        self.current = current
        self.action = action
        super().__init__(message or f"Cannot {action} from status {current}")


class TransportError(SchoolAdminException):
    """Raised when the remote backend cannot be reached or answers unexpectedly."""
    status_code = 502
