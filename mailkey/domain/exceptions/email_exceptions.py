"""Email value object related exceptions."""

from enum import Enum
from typing import Any

from .base import DomainException


class EmailErrorKind(Enum):
    """Closed set of failure kinds raised by the Email value object."""

    INVALID_FORMAT = "invalid_format"
    UNSUPPORTED_SCAN_TYPE = "unsupported_scan_type"


class EmailError(DomainException):
    """Base exception for email errors."""

    kind: EmailErrorKind


class InvalidEmailFormatError(EmailError, ValueError):
    """Exception raised when a string is not a valid email address.

    The message never includes the rejected input, whatever path it came
    through (constructor, JSON decode or storage scan).
    """

    kind = EmailErrorKind.INVALID_FORMAT

    def __init__(self, message: str = "failed to parse email address") -> None:
        """Initialize the exception.

        Args:
            message: The error message
        """
        super().__init__(message)


class UnsupportedScanTypeError(EmailError, TypeError):
    """Exception raised when a storage driver hands over an unusable type."""

    kind = EmailErrorKind.UNSUPPORTED_SCAN_TYPE

    def __init__(self, value: Any, message: str | None = None) -> None:
        """Initialize the exception.

        Args:
            value: The value received from the driver
            message: Custom error message
        """
        if message is None:
            message = (
                f"failed to scan email: unsupported type "
                f"{type(value).__name__} ({value!r})"
            )
        super().__init__(message)
        self.value = value
