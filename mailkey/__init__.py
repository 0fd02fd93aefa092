"""Validated, hashable email address value object."""

from .domain.exceptions import (
    EmailError,
    EmailErrorKind,
    InvalidEmailFormatError,
    UnsupportedScanTypeError,
)
from .domain.value_objects import EMPTY_EMAIL, Email

__all__ = [
    "EMPTY_EMAIL",
    "Email",
    "EmailError",
    "EmailErrorKind",
    "InvalidEmailFormatError",
    "UnsupportedScanTypeError",
]
