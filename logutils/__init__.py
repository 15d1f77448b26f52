"""
ロギングモジュール

ライブラリ全体で使用するロギング機能を提供します
"""

# log.pyからすべてのシンボルを公開
from .log import (
    setup_logging,
    get_logger,
    get_level,
    parse_level,
    log_print,
    log_trace,
    LOG_LEVEL_ENV,
    DEBUG,
    INFO,
    WARNING,
    ERROR,
    CRITICAL
)
