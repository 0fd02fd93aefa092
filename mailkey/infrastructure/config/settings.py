"""ライブラリ設定管理。"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """mailkey設定。

    環境変数（接頭辞 ``MAILKEY_``）から設定を読み込み、バリデーションを行う。
    """

    # Column Configuration
    email_column_length: int = Field(
        default=254, description="メールアドレス列の最大長"
    )

    # Logging Configuration
    log_level: str = Field(default="INFO", description="ログレベル")

    model_config = SettingsConfigDict(
        env_prefix="MAILKEY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("email_column_length")
    @classmethod
    def validate_email_column_length(cls, v: int) -> int:
        """列長のバリデーション。"""
        if not 1 <= v <= 1024:
            raise ValueError(
                f"Invalid email column length: {v}. Must be between 1 and 1024"
            )
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """ログレベルのバリデーション。"""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v_upper


@lru_cache
def get_settings() -> Settings:
    """設定のシングルトンインスタンスを取得する。

    Returns:
        Settings: ライブラリ設定
    """
    return Settings()
