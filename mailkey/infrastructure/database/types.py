"""SQLAlchemyカスタム型定義。"""

import logging
from typing import Any

from sqlalchemy import String
from sqlalchemy.types import TypeDecorator

from mailkey.domain.value_objects import Email

from ..config.settings import get_settings

logger = logging.getLogger(__name__)


class EmailType(TypeDecorator):
    """Email値オブジェクトを1つのNULL許容文字列列に格納する型。

    書き込み時は正規化済みアドレス（キーではない）を格納し、空のEmailは
    NULLになる。読み込み時はNULLを ``EMPTY_EMAIL`` に変換する。
    """

    impl = String
    cache_ok = True

    def __init__(self, length: int | None = None, **kwargs: Any) -> None:
        if length is None:
            length = get_settings().email_column_length
        super().__init__(length, **kwargs)

    @property
    def python_type(self) -> type[Email]:
        return Email

    def process_bind_param(self, value: Any, dialect: Any) -> str | None:
        if value is None:
            return None
        if isinstance(value, str):
            value = Email.parse(value)
        elif not isinstance(value, Email):
            raise TypeError(
                f"EmailType expects Email or str, got {type(value).__name__}"
            )
        return value.to_db()

    def process_result_value(self, value: Any, dialect: Any) -> Email:
        email = Email.from_db(value)
        if email.is_empty:
            logger.debug("Loaded NULL email column as empty Email")
        return email
