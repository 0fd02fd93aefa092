"""EmailType（SQLAlchemyカスタム型）のテスト。"""

import logging

import pytest
from sqlalchemy import String
from sqlalchemy.dialects import postgresql, sqlite

from mailkey.domain.exceptions import InvalidEmailFormatError, UnsupportedScanTypeError
from mailkey.domain.value_objects import EMPTY_EMAIL, Email
from mailkey.infrastructure.database import EmailType

SAMPLE_KEY = "45e67126a4c44c6ae030279e21437c79"


class TestEmailType:
    """EmailTypeのテストクラス。"""

    def test_default_length_from_settings(self) -> None:
        """設定の列長が使われることをテストする。"""
        column_type = EmailType()
        assert isinstance(column_type.impl, String)
        assert column_type.impl.length == 254

    def test_explicit_length(self) -> None:
        """明示的な列長をテストする。"""
        assert EmailType(320).impl.length == 320

    def test_python_type(self) -> None:
        """python_typeがEmailであることをテストする。"""
        assert EmailType().python_type is Email

    def test_ddl(self) -> None:
        """DDLの型名をテストする。"""
        column_type = EmailType()
        assert column_type.compile(dialect=sqlite.dialect()) == "VARCHAR(254)"
        assert column_type.compile(dialect=postgresql.dialect()) == "VARCHAR(254)"

    def test_bind_email(self, sample_email: Email) -> None:
        """Emailの書き込みはアドレス（キーではない）になることをテストする。"""
        column_type = EmailType()
        assert column_type.process_bind_param(sample_email, None) == "sample@example.com"

    def test_bind_empty_and_none(self) -> None:
        """空のEmailとNoneはNULLになることをテストする。"""
        column_type = EmailType()
        assert column_type.process_bind_param(EMPTY_EMAIL, None) is None
        assert column_type.process_bind_param(None, None) is None

    def test_bind_raw_string(self) -> None:
        """生の文字列は検証・正規化されることをテストする。"""
        column_type = EmailType()
        assert (
            column_type.process_bind_param(" Sample@Example.com ", None)
            == "sample@example.com"
        )

        with pytest.raises(InvalidEmailFormatError):
            column_type.process_bind_param("BAD_EMAIL", None)

    def test_bind_wrong_type(self) -> None:
        """Email・文字列以外の書き込みをテストする。"""
        with pytest.raises(TypeError, match="EmailType expects Email or str"):
            EmailType().process_bind_param(123, None)

    def test_result_values(self) -> None:
        """読み込み時の変換をテストする。"""
        column_type = EmailType()

        assert column_type.process_result_value(None, None) is EMPTY_EMAIL
        assert column_type.process_result_value("sample@example.com", None).key == (
            SAMPLE_KEY
        )
        assert column_type.process_result_value(b"sample@example.com", None).key == (
            SAMPLE_KEY
        )

    def test_result_errors(self) -> None:
        """読み込み時のエラーをテストする。"""
        column_type = EmailType()

        with pytest.raises(InvalidEmailFormatError):
            column_type.process_result_value(b"not-an-email", None)

        with pytest.raises(UnsupportedScanTypeError):
            column_type.process_result_value(123, None)

    def test_null_result_logs_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        """NULL読み込み時のデバッグログをテストする。"""
        caplog.set_level(logging.DEBUG, logger="mailkey.infrastructure.database.types")

        EmailType().process_result_value(None, None)

        assert "Loaded NULL email column as empty Email" in caplog.text
