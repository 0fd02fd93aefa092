"""Database column types."""

from .types import EmailType

__all__ = [
    "EmailType",
]
