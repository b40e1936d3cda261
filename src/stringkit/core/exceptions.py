"""Custom exceptions for formatted-string rendering.

This module provides specific exception types for render operations,
enabling callers to tell an allocation failure apart from a bad template.
"""


class RenderError(Exception):
    """Base exception for render errors.

    All render exceptions inherit from this class, allowing callers
    to catch both failure kinds with a single except clause if desired.
    """


class AllocationError(RenderError):
    """Raised when a render buffer cannot be allocated.

    Attributes:
        requested_size: Number of bytes that were requested, or None when
            memory ran out while producing the rendered text itself.
        limit: Configured maximum buffer size, or None if unbounded.
    """

    def __init__(self, requested_size: int | None, limit: int | None = None) -> None:
        """Initialize the exception.

        Args:
            requested_size: Number of bytes that were requested, if known.
            limit: Configured maximum buffer size, if one was exceeded.
        """
        self.requested_size = requested_size
        self.limit = limit
        if requested_size is None:
            message = "Out of memory while rendering template"
        elif limit is not None:
            message = (
                f"Cannot allocate render buffer of {requested_size} bytes: "
                f"exceeds limit of {limit} bytes"
            )
        else:
            message = f"Cannot allocate render buffer of {requested_size} bytes"
        super().__init__(message)


class FormatError(RenderError):
    """Raised when a template cannot be rendered with its arguments.

    Covers malformed directives, argument count or type mismatches, and
    rendered text that cannot be encoded.

    Attributes:
        template: The template that failed to render.
    """

    def __init__(self, template: str, reason: str | None = None) -> None:
        """Initialize the exception.

        Args:
            template: The template that failed to render.
            reason: Optional description of the underlying failure.
        """
        self.template = template
        self.reason = reason
        message = f"Cannot render template {template!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
