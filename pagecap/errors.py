"""
Error taxonomy shared by the environment builder, the runners and the
in-container entrypoint
"""

import asyncio
import logging
from enum import Enum
from typing import Optional

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

logger = logging.getLogger(__name__)


class ErrorKind(Enum):
    """Classification of the ways an invocation can fail"""
    ENVIRONMENT_BUILD = "environment_build"
    INVALID_PARAMETERS = "invalid_parameters"
    NAVIGATION_TIMEOUT = "navigation_timeout"
    NAVIGATION_FAILED = "navigation_failed"
    SELECTOR_NOT_FOUND = "selector_not_found"
    CONTAINER_ERROR = "container_error"
    UNKNOWN = "unknown"


# Process exit codes used by the entrypoint; 1 stays the generic failure
EXIT_CODES = {
    ErrorKind.UNKNOWN: 1,
    ErrorKind.INVALID_PARAMETERS: 2,
    ErrorKind.NAVIGATION_TIMEOUT: 3,
    ErrorKind.NAVIGATION_FAILED: 4,
    ErrorKind.SELECTOR_NOT_FOUND: 5,
}


class PagecapError(Exception):
    """Base class for all pagecap errors"""

    kind = ErrorKind.UNKNOWN

    def __init__(self, message: str, kind: Optional[ErrorKind] = None):
        super().__init__(message)
        self.message = message
        if kind is not None:
            self.kind = kind


class ActionError(PagecapError):
    """A browser action failed"""


class EnvironmentBuildError(PagecapError):
    """The execution environment could not be built"""

    kind = ErrorKind.ENVIRONMENT_BUILD


def classify_error(error: Exception) -> ErrorKind:
    """Classify an exception into an ErrorKind"""
    if isinstance(error, PagecapError):
        return error.kind
    if isinstance(error, (PlaywrightTimeoutError, asyncio.TimeoutError)):
        return ErrorKind.NAVIGATION_TIMEOUT
    if isinstance(error, PlaywrightError):
        message = str(error).lower()
        if "selector" in message or "element" in message:
            return ErrorKind.SELECTOR_NOT_FOUND
        return ErrorKind.NAVIGATION_FAILED

    return ErrorKind.UNKNOWN


def exit_code_for(kind: ErrorKind) -> int:
    """Exit code the entrypoint reports for an error kind"""
    return EXIT_CODES.get(kind, EXIT_CODES[ErrorKind.UNKNOWN])


def kind_for_exit_code(code: int) -> ErrorKind:
    """Map an entrypoint exit code back to its error kind"""
    for kind, value in EXIT_CODES.items():
        if value == code:
            return kind

    logger.debug(f"Unrecognised exit code {code}, treating as container error")
    return ErrorKind.CONTAINER_ERROR
