"""Error Hierarchy: typed, categorized exceptions for every API failure mode.

Invariants:
    - Every error has a code (str), title (str), category, severity and http_status
    - to_response() produces the public envelope {"error", "message", "code"}
    - StorageError never carries driver detail in its message
    - Not-found is a 404 outcome, not a failure: severity INFO

Design Decisions:
    - Single hierarchy with BlogApiError base: one global handler renders all of them
    - Projection has no error type; it is total over validated entities
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    STORAGE = "storage"
    INTERNAL = "internal"


class BlogApiError(Exception):
    """Base exception for all blog API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        title: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.title = title
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the public JSON error envelope."""
        return {
            "error": self.title,
            "message": self.message,
            "code": self.code,
        }


class ResourceNotFoundError(BlogApiError):
    """Requested resource does not exist (or is soft-deleted)."""
    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", f"{resource_type} not found",
            ErrorCategory.RESOURCE_NOT_FOUND, ErrorSeverity.INFO, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class StorageError(BlogApiError):
    """Query against the relational store failed (connectivity, timeout, bad query)."""
    def __init__(self, operation: str):
        super().__init__(
            "A database error occurred",
            "STORAGE_ERROR", f"Failed to execute {operation}",
            ErrorCategory.STORAGE, ErrorSeverity.CRITICAL, 500,
        )
        self.operation = operation
