"""
User-friendly error messages for the DMS toolkit.

Maps malformed-input categories and exception types to helpful messages.
"""

from core.exceptions import DMSError, ErrorCategory, MalformedInputError


# Messages for MalformedInputError, keyed by category
CATEGORY_MESSAGES = {
    ErrorCategory.HEMISPHERE: {
        "title": "Hemisphere Designator Error",
        "message": "The hemisphere letters (N, S, E, W) could not be interpreted.",
        "suggestions": [
            "Use a single hemisphere letter at the start or the end of the value",
            "Do not combine a sign with a leading hemisphere letter (e.g. -N20)",
            "Give one latitude (N/S) and one longitude (E/W)"
        ]
    },

    ErrorCategory.SYNTAX: {
        "title": "DMS Syntax Error",
        "message": "The angle contains characters that are not allowed.",
        "suggestions": [
            "Use digits, a decimal point and the markers d, ' and \"",
            "Use either colons or unit markers, not both",
            "Remove spaces and signs inside the value"
        ]
    },

    ErrorCategory.COMPONENT: {
        "title": "DMS Component Error",
        "message": "The degree, minute and second components are not in a valid order.",
        "suggestions": [
            "Give components in the order degrees, minutes, seconds",
            "Only the last component may have a decimal fraction",
            "Every marker or colon must follow a number"
        ]
    },

    ErrorCategory.RANGE: {
        "title": "Value Out of Range",
        "message": "The angle is outside the allowed range.",
        "suggestions": [
            "Minutes and seconds must be less than 60",
            "Latitudes must be within [-90, 90]",
            "Longitudes and azimuths must be within [-540, 540)"
        ]
    },

    ErrorCategory.EMPTY: {
        "title": "Empty Value",
        "message": "No angle was given.",
        "suggestions": [
            "Enter a number such as 20.5 or 20d30'"
        ]
    },
}

# Messages for other exception types
ERROR_MESSAGES = {
    DMSError: {
        "title": "DMS Error",
        "message": "The angle could not be processed.",
        "suggestions": [
            "Check the value and try again"
        ]
    },

    # Generic fallback
    Exception: {
        "title": "Unexpected Error",
        "message": "An unexpected error occurred.",
        "suggestions": [
            "Try the operation again",
            "If the problem persists, check the application logs"
        ]
    }
}


def get_error_message(exception: Exception) -> dict:
    """
    Get user-friendly error message for an exception.

    Args:
        exception: The exception that occurred

    Returns:
        Dictionary with title, message, suggestions and, when available, details
    """
    if isinstance(exception, MalformedInputError) and exception.category in CATEGORY_MESSAGES:
        template = CATEGORY_MESSAGES[exception.category]
    else:
        for exc_class in type(exception).__mro__:
            if exc_class in ERROR_MESSAGES:
                template = ERROR_MESSAGES[exc_class]
                break
        else:
            template = ERROR_MESSAGES[Exception]

    error_info = dict(template, suggestions=list(template["suggestions"]))

    if isinstance(exception, DMSError):
        error_info['details'] = exception.message
    elif str(exception):
        error_info['details'] = str(exception)

    return error_info


def format_error_message(exception: Exception) -> str:
    """
    Format error message as a string for display.

    Args:
        exception: The exception that occurred

    Returns:
        Formatted error message string
    """
    error_info = get_error_message(exception)

    message = f"{error_info['message']}\n"

    if 'details' in error_info:
        message += f"\nDetails: {error_info['details']}\n"

    if error_info['suggestions']:
        message += "\nSuggestions:\n"
        for suggestion in error_info['suggestions']:
            message += f"• {suggestion}\n"

    return message.strip()
