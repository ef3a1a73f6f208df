"""
EduLibrary Backend — Custom Exception Hierarchy
=================================================

What:  Application-specific exceptions for the three failure classes of the API.
How:   Each exception carries a user-facing message and an optional context dict.
       Global exception handlers (registered in main.py) turn them into
       structured JSON error responses with the matching HTTP status code.
Who:   Raised by the service layer; caught by the handlers in main.py.

Exception Hierarchy:
    EduLibraryError (base)   → 500 Internal Server Error
    ├── ValidationError      → 400 Bad Request (client can fix the payload)
    ├── NotFoundError        → 404 Not Found (client can fix the id)
    └── StorageError         → 500 Internal Server Error (generic message)

There is no transient-failure class: nothing in the request path is retried.
"""

from typing import Any, Dict, List, Optional, Sequence


class EduLibraryError(Exception):
    """
    Base exception for all EduLibrary application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged, NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(EduLibraryError):
    """
    Raised when a request payload fails resource validation.

    HTTP: 400 Bad Request

    `errors` holds one FieldError per failing field, in the order the
    validator reported them. `details` renders them as a single string:

        {
            "error": "validation_error",
            "message": "Invalid resource data",
            "details": "title: Field required; skillLevel: Input should be ...",
            "fields": [{"field": "title", "message": "Field required"}, ...]
        }
    """

    def __init__(
        self,
        message: str = "Invalid resource data",
        errors: Optional[Sequence[Any]] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.errors = list(errors or [])
        ctx = context or {}
        if self.errors:
            ctx["fields"] = [e.field for e in self.errors]
        super().__init__(message=message, context=ctx)

    @property
    def details(self) -> str:
        if not self.errors:
            return self.message
        return "; ".join(f"{e.field}: {e.message}" for e in self.errors)

    def field_errors(self) -> List[Dict[str, str]]:
        return [{"field": e.field, "message": e.message} for e in self.errors]


class NotFoundError(EduLibraryError):
    """
    Raised when a requested record does not exist.

    HTTP: 404 Not Found

    Storage returns None for missing ids; the service layer converts that
    into this exception so routes stay free of None checks.
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


class StorageError(EduLibraryError):
    """
    Raised when the storage backend fails unexpectedly.

    HTTP: 500 Internal Server Error

    The message returned to the client is always generic. The original
    exception is chained (`raise ... from`) and logged server-side only.
    """

    def __init__(
        self,
        message: str = "A storage error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
