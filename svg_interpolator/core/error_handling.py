"""Centralized error handling framework for SVG Interpolator."""

import functools
import logging
import traceback
from contextlib import contextmanager
from typing import Any, Callable, Dict, Optional, Type, TypeVar

logger = logging.getLogger(__name__)

# Type variable for decorated functions
F = TypeVar("F", bound=Callable[..., Any])


class SVGInterpolatorError(Exception):
    """Base exception for all SVG Interpolator errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(SVGInterpolatorError):
    """Raised when validation fails."""

    pass


class EmptyPointCloudError(ValidationError):
    """Raised when an operation needs at least one point but the cloud is empty."""

    pass


class EmptyPathError(ValidationError):
    """Raised when a path with no commands is interpolated."""

    pass


class MissingFieldError(ValidationError):
    """Raised when a path command lacks a field its code requires."""

    def __init__(self, code: str, field: str):
        super().__init__(
            f"Command '{code}' is missing required field '{field}'",
            details={"code": code, "field": field},
        )
        self.code = code
        self.field = field


class UnsupportedCommandError(SVGInterpolatorError):
    """Raised when a path command cannot be turned into points."""

    def __init__(self, code: str):
        super().__init__(f"Unsupported SVG command {code}", details={"code": code})
        self.code = code


class ConfigurationError(SVGInterpolatorError):
    """Raised when configuration is invalid."""

    pass


class ParsingError(SVGInterpolatorError):
    """Raised when file parsing fails."""

    pass


class FileProcessingError(SVGInterpolatorError):
    """Raised when file processing fails."""

    pass


def handle_errors(
    error_types: Optional[Dict[Type[Exception], Type[SVGInterpolatorError]]] = None,
    default_error: Type[SVGInterpolatorError] = SVGInterpolatorError,
    log_errors: bool = True,
    reraise: bool = True,
) -> Callable[[F], F]:
    """
    Decorator for standardized error handling.

    Errors that are already SVG Interpolator errors pass through untouched.

    Args:
        error_types: Mapping of exception types to SVG Interpolator error types
        default_error: Default error type for unmapped exceptions
        log_errors: Whether to log errors
        reraise: Whether to reraise as SVG Interpolator errors
    """
    if error_types is None:
        error_types = {}

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except SVGInterpolatorError:
                raise
            except Exception as e:
                if log_errors:
                    logger.error(f"Error in {func.__name__}: {e}", exc_info=True)

                if not reraise:
                    return None

                error_type = error_types.get(type(e), default_error)

                # Preserve original error details
                details = {
                    "original_error": str(e),
                    "original_type": type(e).__name__,
                    "function": func.__name__,
                    "traceback": traceback.format_exc(),
                }

                raise error_type(
                    f"Error in {func.__name__}: {e}", details=details
                ) from e

        return wrapper

    return decorator


@contextmanager
def error_context(operation: str, **context_kwargs):
    """
    Context manager for error handling with operation context.

    Args:
        operation: Description of the operation being performed
        **context_kwargs: Additional context information
    """
    try:
        yield
    except Exception as e:
        logger.debug(f"Error during {operation}: {e}")

        if isinstance(e, SVGInterpolatorError):
            e.details.update({"operation": operation, **context_kwargs})

        raise


# Common error type mappings
COMMON_ERROR_MAPPINGS = {
    FileNotFoundError: FileProcessingError,
    PermissionError: FileProcessingError,
    IsADirectoryError: FileProcessingError,
    ValueError: ValidationError,
    KeyError: ConfigurationError,
    TypeError: ValidationError,
}
