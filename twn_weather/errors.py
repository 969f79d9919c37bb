"""
Error taxonomy for TWN Weather.

Failures are contained per query: the orchestrator catches everything at the
task boundary and logs it with a category from categorize_error().
"""

from enum import Enum
from typing import Optional, Tuple

from bs4 import FeatureNotFound
from curl_cffi.requests.exceptions import HTTPError, RequestException, Timeout
from selenium.common.exceptions import TimeoutException, WebDriverException


class ErrorType(Enum):
    """Categories of errors for task-boundary logging."""
    TIMEOUT = "timeout"
    HTTP_ERROR = "http_error"
    BROWSER_ERROR = "browser_error"
    PARSE_ERROR = "parse_error"
    UNKNOWN = "unknown"


class TwnWeatherError(Exception):
    """Base class for errors raised by this package."""


class EmptyQueryError(TwnWeatherError):
    """Raised when the input line holds no queries."""

    def __init__(self, message: str = "Query cannot be empty."):
        super().__init__(message)


class FetchError(TwnWeatherError):
    """Raised when a page cannot be retrieved from the site."""

    def __init__(self, url: str, reason: str, status_code: Optional[int] = None):
        self.url = url
        self.reason = reason
        self.status_code = status_code
        super().__init__(f"Failed to fetch {url}: {reason}")


def categorize_error(exception: Exception) -> Tuple[ErrorType, str]:
    """
    Categorize an exception for logging purposes.

    FetchError is unwrapped to its cause so a wrapped timeout still
    reports as a timeout.

    Returns:
        Tuple of (ErrorType, error_message)
    """
    error_msg = str(exception)[:200]  # Truncate long messages

    if isinstance(exception, FetchError):
        if exception.status_code is not None:
            return (ErrorType.HTTP_ERROR, f"HTTP {exception.status_code}: {exception.url}")
        if exception.__cause__ is not None:
            cause_type, _ = categorize_error(exception.__cause__)
            return (cause_type, error_msg)
        return (ErrorType.HTTP_ERROR, error_msg)

    if isinstance(exception, (Timeout, TimeoutException)):
        return (ErrorType.TIMEOUT, f"Timeout: {error_msg}")

    elif isinstance(exception, HTTPError):
        return (ErrorType.HTTP_ERROR, f"HTTP error: {error_msg}")

    elif isinstance(exception, RequestException):
        return (ErrorType.HTTP_ERROR, f"Request error: {error_msg}")

    elif isinstance(exception, WebDriverException):
        return (ErrorType.BROWSER_ERROR, f"Browser error: {error_msg}")

    elif isinstance(exception, (FeatureNotFound, KeyError, ValueError, TypeError, AttributeError)):
        return (ErrorType.PARSE_ERROR, f"Parse error: {error_msg}")

    else:
        return (ErrorType.UNKNOWN, error_msg)
