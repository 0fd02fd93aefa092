"""pytest共通設定。"""

import os

# テスト実行時のログレベルを設定
os.environ.setdefault("MAILKEY_LOG_LEVEL", "DEBUG")
