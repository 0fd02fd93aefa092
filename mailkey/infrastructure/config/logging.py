"""ロギング設定。"""

import logging

from .settings import Settings, get_settings

LOGGER_NAME = "mailkey"


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """``mailkey`` ロガーに設定のログレベルを適用する。

    ハンドラーの設定はアプリケーション側に任せる。

    Args:
        settings: 使用する設定（省略時は ``get_settings()``）

    Returns:
        logging.Logger: 設定済みのロガー
    """
    settings = settings or get_settings()
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(settings.log_level)
    return logger
