"""Email value object implementation."""

import hashlib
import json
import re
from dataclasses import dataclass, field
from typing import Any, Final

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import CoreSchema, core_schema

from ..exceptions import InvalidEmailFormatError, UnsupportedScanTypeError

_ATEXT = r"[a-z0-9!#$%&'*+/=?^_`{|}~\u0080-\U0010ffff-]"
_DOT_ATOM = rf"{_ATEXT}+(?:\.{_ATEXT}+)*"
_QUOTED_STRING = (
    r'"(?:[\x20\x21\x23-\x5b\x5d-\x7e\u0080-\U0010ffff]'
    r"|\\[\x20-\x7e\u0080-\U0010ffff])+\""
)


@dataclass(frozen=True, eq=False)
class Email:
    """Value object representing an email address.

    ``address`` holds the normalized (trimmed, lowercased) address and ``key``
    its MD5 hex digest. ``Email()`` is the empty value standing for "no email"
    (SQL NULL); see ``EMPTY_EMAIL``.

    ``str()`` returns the key, not the address, so that addresses do not end
    up in logs by accident. Use ``address`` when the raw value is needed.
    """

    address: str = field(default="", repr=False)
    key: str = field(init=False, default="")

    # RFC 5322 addr-spec (UTF-8 atext per RFC 6532), no domain literals
    EMAIL_PATTERN = re.compile(
        rf"(?:{_DOT_ATOM}|{_QUOTED_STRING})@{_DOT_ATOM}",
        re.IGNORECASE,
    )
    MAX_LENGTH = 254  # RFC 5321

    def __post_init__(self) -> None:
        """Normalize and validate a non-empty address, then derive the key."""
        if not isinstance(self.address, str):
            raise InvalidEmailFormatError()

        if self.address == "":
            return

        normalized = self.normalize(self.address)
        if len(normalized) > self.MAX_LENGTH or not self.EMAIL_PATTERN.fullmatch(
            normalized
        ):
            raise InvalidEmailFormatError()

        object.__setattr__(self, "address", normalized)
        object.__setattr__(self, "key", self.derive_key(normalized))

    @staticmethod
    def normalize(raw: str) -> str:
        """Trim surrounding whitespace and lowercase."""
        return raw.strip().lower()

    @staticmethod
    def derive_key(address: str) -> str:
        """Return the 32-character hex MD5 digest of an address."""
        return hashlib.md5(
            address.encode("utf-8"), usedforsecurity=False
        ).hexdigest()

    @classmethod
    def parse(cls, raw: str) -> "Email":
        """Create an Email from user input.

        Unlike ``Email(raw)``, an empty or blank string is rejected here
        instead of producing the empty value.

        Raises:
            InvalidEmailFormatError: If ``raw`` is not a valid address.
        """
        if not isinstance(raw, str) or not cls.normalize(raw):
            raise InvalidEmailFormatError()
        return cls(raw)

    @property
    def is_empty(self) -> bool:
        """Whether this is the empty ("no email") value."""
        return self.address == ""

    @property
    def local_part(self) -> str:
        """The part before the last ``@``."""
        return self.address.rpartition("@")[0]

    @property
    def domain(self) -> str:
        """The part after the last ``@``."""
        return self.address.rpartition("@")[2]

    def equal(self, other: "Email") -> bool:
        """Compare two emails by key."""
        return self.key == other.key

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Email):
            return NotImplemented
        return self.equal(other)

    def __hash__(self) -> int:
        return hash(self.key)

    def __bool__(self) -> bool:
        return not self.is_empty

    def __str__(self) -> str:
        """Return the key."""
        return self.key

    # JSON

    @classmethod
    def from_json(cls, data: str | bytes) -> "Email":
        """Decode an Email from a JSON string scalar.

        Malformed JSON, a non-string JSON value and an invalid address all
        raise the same error.

        Raises:
            InvalidEmailFormatError: If ``data`` does not hold a valid address.
        """
        try:
            decoded = json.loads(data)
        except (TypeError, ValueError, RecursionError):
            raise InvalidEmailFormatError() from None

        if not isinstance(decoded, str):
            raise InvalidEmailFormatError()

        return cls.parse(decoded)

    def to_json(self) -> str:
        """Encode the address (not the key) as a JSON string scalar."""
        return json.dumps(self.address)

    # Storage

    @classmethod
    def from_db(cls, value: Any) -> "Email":
        """Convert a value read by a database driver.

        ``None`` gives ``EMPTY_EMAIL``; ``str`` and byte sequences are parsed.

        Raises:
            InvalidEmailFormatError: If the text is not a valid address.
            UnsupportedScanTypeError: For any other type.
        """
        if value is None:
            return EMPTY_EMAIL

        if isinstance(value, str):
            return cls.parse(value)

        if isinstance(value, (bytes, bytearray, memoryview)):
            try:
                text = bytes(value).decode("utf-8")
            except UnicodeDecodeError:
                raise InvalidEmailFormatError() from None
            return cls.parse(text)

        raise UnsupportedScanTypeError(value)

    def to_db(self) -> str | None:
        """Return the address for storage, or ``None`` (NULL) when empty."""
        if self.is_empty:
            return None
        return self.address

    # pydantic

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda email: email.address,
                return_schema=core_schema.str_schema(),
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {"type": "string", "format": "email"}

    @classmethod
    def _validate(cls, value: Any) -> "Email":
        if isinstance(value, Email):
            return value
        return cls.parse(value)


EMPTY_EMAIL: Final = Email()
