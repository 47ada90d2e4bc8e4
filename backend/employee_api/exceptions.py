"""
Employee List Backend — Custom Exception Hierarchy
====================================================

What:  Defines application-specific exceptions for the employee list API.
Why:   Custom exceptions enable targeted error handling with appropriate HTTP
       status codes and user-friendly messages, instead of leaking driver
       errors (SQL text, connection strings) to the client.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with correct HTTP status codes.
Who:   Raised by the service layer and the store handle; caught by global handlers.
When:  During request processing when recoverable errors occur.

Exception Hierarchy:
    EmployeeListError (base)
    ├── ValidationError          → 400 Bad Request (client can fix)
    ├── NotFoundError            → 404 Not Found
    ├── StorageUnavailableError  → 503 Service Unavailable (persistence not established)
    └── DatabaseError            → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class EmployeeListError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(EmployeeListError):
    """
    Raised when client input fails validation.

    When:    Missing or ill-typed employee fields, malformed identifiers,
             or a storage constraint (NOT NULL, type) rejecting the record.
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "salary: Field required",
            "details": {"field": "salary"}
        }
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(EmployeeListError):
    """
    Raised when a requested resource does not exist.

    What:    The client asked for an employee that is not in the store.
    When:    GET/DELETE /api/employeelist/{id} or PUT with an unknown _id.
    HTTP:    404 Not Found

    SQLAlchemy returns None for missing records (not an exception), so the
    service layer converts None → NotFoundError.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        message: Optional[str] = None,
    ):
        if message is None:
            message = f"The requested {resource} was not found"
            if resource_id:
                message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class StorageUnavailableError(EmployeeListError):
    """
    Raised when a data operation is attempted without an established store.

    What:    Persistence was never set up: DATABASE_URL is empty, still holds
             placeholder markers, or the startup connection attempt failed.
    HTTP:    503 Service Unavailable

    Why 503 (not 500):
        The server itself is fine and keeps answering /health and /; it is the
        persistence dependency that is missing. 503 tells operators and clients
        that the condition is environmental, not a bug in the request.
    """

    def __init__(
        self,
        reason: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = "Employee storage is not available. Check the DATABASE_URL configuration."
        ctx = context or {}
        if reason:
            ctx["reason"] = reason
        super().__init__(message=message, context=ctx)
        self.reason = reason


class DatabaseError(EmployeeListError):
    """
    Raised when database operations fail unexpectedly.

    What:    A query, insert, update or delete failed.
    When:    Connection lost mid-query, deadlock, driver error, etc.
    HTTP:    500 Internal Server Error

    Security Note:
        The driver's error text (SQL, constraint names, hosts) goes into
        `context` and the server log only, never into the response body.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
