"""
Inner Peace Backend — Custom Exception Hierarchy
=================================================

What:  Application-specific exceptions for the failure scenarios the API
       distinguishes.
How:   Each exception carries a message (returned to the client as the
       `error` field) and an optional context dict (logged, never returned).
       Global handlers registered in main.py map each type to a status code.
Who:   Raised by the service layer; caught by the global handlers.

Exception Hierarchy:
    InnerPeaceError (base)
    ├── ValidationError     → 400 Bad Request
    ├── UnauthorizedError   → 403 Forbidden
    ├── NotFoundError       → 404 Not Found
    └── DatabaseError       → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class InnerPeaceError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  Client-facing error description (the JSON `error` field)
        context:  Additional debug info (logged but NOT returned to client)
    """

    status_code = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(InnerPeaceError):
    """
    Raised when the request body is missing required fields.

    HTTP:    400 Bad Request
    Example: {"error": "Author and content required"}
    """

    status_code = 400

    def __init__(
        self,
        message: str = "Author and content required",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class UnauthorizedError(InnerPeaceError):
    """
    Raised when the admin secret supplied with a destructive request does
    not match the configured one.

    HTTP:    403 Forbidden
    The message is always the generic "Unauthorized"; the supplied value is
    never echoed back or logged.
    """

    status_code = 403

    def __init__(self, context: Optional[Dict[str, Any]] = None):
        super().__init__(message="Unauthorized", context=context)


class NotFoundError(InnerPeaceError):
    """
    Raised when a delete targets a row that does not exist.

    HTTP:    404 Not Found
    Example: {"error": "Post not found"}
    """

    status_code = 404

    def __init__(
        self,
        resource: str = "Post",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=f"{resource} not found", context=ctx)


class DatabaseError(InnerPeaceError):
    """
    Raised when a store interaction fails (connectivity, constraint
    violation, malformed statement).

    HTTP:    500 Internal Server Error
    The underlying driver message is returned to the client unchanged.
    """

    status_code = 500

    def __init__(
        self,
        message: str = "A database error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
