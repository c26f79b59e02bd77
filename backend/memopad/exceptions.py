"""
MemoPad Backend — Custom Exception Hierarchy
==============================================

What:  Application-specific exceptions for the two failure kinds the API has.
How:   Each exception carries a message and an optional context dict.
       Global exception handlers (registered in main.py) translate them into
       bodiless HTTP responses with the right status code.
Who:   Raised by MemoStore and MemoService; caught by global handlers.

Exception Hierarchy:
    MemoPadError (base)
    ├── ValidationError   → 400 Bad Request (required field missing / forbidden field present)
    └── NotFoundError     → 404 Not Found   (memo id not in the store)
"""

from typing import Any, Dict, Optional


class MemoPadError(Exception):
    """
    Base exception for all MemoPad application errors.

    Attributes:
        message:  Human-readable error description (logged, never sent to the client)
        context:  Additional debug info (logged only)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(MemoPadError):
    """
    Raised when a request body violates the field rules of an operation.

    When:    PUT without title or contents; PATCH without title, or with contents;
             unparseable or missing request body.
    HTTP:    400 Bad Request, empty body.
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


class NotFoundError(MemoPadError):
    """
    Raised when a memo id does not exist in the store.

    When:    GET / PUT / PATCH / DELETE /memos/{id} with an unknown id.
    HTTP:    404 Not Found, empty body.
    """

    def __init__(
        self,
        resource: str = "memo",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id is not None:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource_id = resource_id
