"""Domain exception package."""

from .base import DomainException
from .email_exceptions import (
    EmailError,
    EmailErrorKind,
    InvalidEmailFormatError,
    UnsupportedScanTypeError,
)

__all__ = [
    # Base
    "DomainException",
    # Email
    "EmailError",
    "EmailErrorKind",
    "InvalidEmailFormatError",
    "UnsupportedScanTypeError",
]
