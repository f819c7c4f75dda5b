"""
Error handling utilities for the DMS toolkit.

Provides the handle_errors decorator, which logs a failure and attaches
the user-facing message and suggestions to DMS errors.
"""

import functools
from typing import Callable, Type
from utils.logger import get_logger
from utils.error_messages import get_error_message
from core.exceptions import DMSError


logger = get_logger(__name__)


def handle_errors(
    error_type: Type[Exception] = Exception,
    user_message: str = None,
    log_level: str = "ERROR",
    reraise: bool = False,
    default_return=None
):
    """
    Decorator for consistent error handling.

    Args:
        error_type: Type of exception to catch (default: Exception for all)
        user_message: Custom user message (overrides default)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        reraise: Whether to re-raise the exception after handling
        default_return: Value to return if exception occurs and not reraising

    Example:
        @handle_errors(
            error_type=MalformedInputError,
            user_message="The latitude could not be read",
            log_level="DEBUG",
            default_return=(False, None)
        )
        def read_latitude(...):
            # function code
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except error_type as e:
                log_func = getattr(logger, log_level.lower(), logger.error)
                log_func(
                    f"Error in {func.__name__}: {type(e).__name__}: {str(e)}",
                    exc_info=True
                )

                error_info = get_error_message(e)
                if user_message:
                    error_info['message'] = user_message

                # Attach error info to exception for callers to display
                if isinstance(e, DMSError):
                    e.user_message = error_info['message']
                    e.suggestions = error_info.get('suggestions', [])

                if reraise:
                    raise

                return default_return

        return wrapper
    return decorator

