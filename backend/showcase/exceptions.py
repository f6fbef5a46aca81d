"""
Showcase Backend - Custom Exception Hierarchy
===============================================

What:  Application-specific exceptions for the error scenarios of the API.
How:   Each exception carries a message and an optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with the right status code.
Who:   Raised by identifiers, services and the store dependency.
When:  During request processing.

Exception Hierarchy:
    ShowcaseError (base)
    ├── InvalidIdentifierError   → 400 Bad Request
    ├── NotFoundError            → 404 Not Found
    ├── StoreUnavailableError    → 503 Service Unavailable
    └── DatabaseError            → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class ShowcaseError(Exception):
    """
    Base exception for all Showcase application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged, returned only where the
                  handler chooses to)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class InvalidIdentifierError(ShowcaseError):
    """
    Raised when a path parameter is not a valid document identifier.

    When:    GET/PATCH/PUT/DELETE /artworks/{id} or DELETE /favorites/{id}
             with anything other than a 24-character hex ObjectId.
    HTTP:    400 Bad Request
    """

    def __init__(
        self,
        value: str = "",
        resource: str = "document",
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"'{value}' is not a valid {resource} identifier"
        ctx = context or {}
        ctx["resource"] = resource
        ctx["value"] = value
        super().__init__(message=message, context=ctx)
        self.value = value
        self.resource = resource


class NotFoundError(ShowcaseError):
    """
    Raised when a requested resource does not exist.

    When:    GET /artworks/{id} with a well-formed id that matches nothing.
    HTTP:    404 Not Found

    The driver returns None for a missed find_one; the service layer turns
    that None into this exception.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class StoreUnavailableError(ShowcaseError):
    """
    Raised when the document store cannot be reached.

    When:    Server selection timed out, the connection dropped, or the
             store client was never initialized.
    HTTP:    503 Service Unavailable

    No retry is attempted; the client is told to try again later.
    """

    def __init__(
        self,
        message: str = "The artwork store is temporarily unavailable. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseError(ShowcaseError):
    """
    Raised when a store operation fails for any reason other than reachability.

    HTTP:    500 Internal Server Error

    The message returned to the client is always generic. The driver error
    is logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
