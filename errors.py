"""
Exceptions raised by the complaint portal core.

Every error carries a stable code and the HTTP status the API layer answers
with, so the boundary can render any of them without inspecting the type.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(str, Enum):
    UNAUTHORIZED = "UNAUTHORIZED"
    NOT_FOUND = "NOT_FOUND"
    DUPLICATE_CREDENTIAL = "DUPLICATE_CREDENTIAL"
    ADMIN_ALREADY_EXISTS = "ADMIN_ALREADY_EXISTS"
    INVALID_REQUEST = "INVALID_REQUEST"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ComplaintPortalError(Exception):
    """Base class for all errors reported to API callers."""

    error_code = ErrorCode.INTERNAL_ERROR
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message, "code": self.error_code.value}

    def __str__(self) -> str:
        return f"{self.error_code.value}: {self.message}"


class Unauthorized(ComplaintPortalError):
    """Missing, unknown or insufficiently privileged credential.

    The message is the same in every case so callers cannot tell an
    unknown account apart from a non-admin one.
    """

    error_code = ErrorCode.UNAUTHORIZED
    status_code = 401
    default_message = "Unauthorized"


class NotFound(ComplaintPortalError):
    error_code = ErrorCode.NOT_FOUND
    status_code = 404
    default_message = "Not found"


class DuplicateCredential(ComplaintPortalError):
    error_code = ErrorCode.DUPLICATE_CREDENTIAL
    status_code = 409
    default_message = "User already exists"


class AdminAlreadyExists(ComplaintPortalError):
    error_code = ErrorCode.ADMIN_ALREADY_EXISTS
    status_code = 403
    default_message = "Admin already exists. Cannot register as admin"
