"""Value object package."""

from .email import EMPTY_EMAIL, Email

__all__ = [
    "EMPTY_EMAIL",
    "Email",
]
