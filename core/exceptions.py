"""
Custom exception classes for the DMS toolkit.

Every decoding failure is reported as a MalformedInputError; callers that
need to tell failures apart use its category.
"""


class ErrorCategory:
    HEMISPHERE = "hemisphere"
    SYNTAX = "syntax"
    COMPONENT = "component"
    RANGE = "range"
    EMPTY = "empty"
    VALID_CATEGORIES = [HEMISPHERE, SYNTAX, COMPONENT, RANGE, EMPTY]


class DMSError(Exception):
    """Base exception for all DMS toolkit errors."""

    def __init__(self, message: str, details: str = None):
        self.message = message
        self.details = details
        super().__init__(self.message)

    def __str__(self):
        if self.details:
            return f"{self.message} (details: {self.details})"
        return self.message


class MalformedInputError(DMSError):
    """Raised when a DMS string, or the value it decodes to, is not acceptable."""

    def __init__(self, message: str, fragment: str = None,
                 category: str = ErrorCategory.SYNTAX):
        self.fragment = fragment
        self.category = category
        super().__init__(message, details=fragment)
