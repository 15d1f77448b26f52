"""
ロギング用ユーティリティ

ライブラリ全体でのロギング操作を統一的に扱うためのユーティリティ関数群
"""
import os
import sys
import traceback
from typing import Optional, Any, Union

# Pythonの標準loggingモジュールをインポート
import logging as py_logging

# ログレベルの定数定義
DEBUG = 10
INFO = 20
WARNING = 30
ERROR = 40
CRITICAL = 50

# 環境変数でログレベルを指定する場合の変数名
LOG_LEVEL_ENV = "FILECOLL_LOG_LEVEL"

_LEVEL_NAMES = {
    "DEBUG": DEBUG,
    "INFO": INFO,
    "WARNING": WARNING,
    "ERROR": ERROR,
    "CRITICAL": CRITICAL,
}

# 現在のログレベル（Noneの場合は初回使用時に環境変数から決定）
_log_level: Optional[int] = None

# ロガーオブジェクトの格納用辞書
_loggers = {}

# ロギング先のファイルパス
_log_file: Optional[str] = None

_FORMAT = '%(asctime)s [%(name)s] %(levelname)s: %(message)s'


def parse_level(value: Union[int, str, None], default: int = ERROR) -> int:
    """
    ログレベル指定を数値に変換する

    Args:
        value: レベル名（"DEBUG"など）または数値、数値文字列
        default: 解釈できなかった場合の値

    Returns:
        ログレベルの数値
    """
    if value is None:
        return default
    if isinstance(value, int):
        return value
    text = value.strip().upper()
    if text in _LEVEL_NAMES:
        return _LEVEL_NAMES[text]
    if text.isdigit():
        return int(text)
    return default


def get_level() -> int:
    """現在のログレベルを取得する（未設定なら環境変数を参照）"""
    global _log_level
    if _log_level is None:
        _log_level = parse_level(os.environ.get(LOG_LEVEL_ENV), ERROR)
    return _log_level


def setup_logging(level: Union[int, str] = ERROR, logfile: str = None) -> None:
    """
    ロギングシステムをセットアップする

    Args:
        level: ログレベル（デフォルトはERROR）
        logfile: ログの出力先ファイル（デフォルトはNone）
    """
    global _log_level, _log_file
    _log_level = parse_level(level)

    if logfile:
        try:
            # ログディレクトリが存在しない場合は作成
            log_dir = os.path.dirname(logfile)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            _log_file = logfile
        except OSError as e:
            sys.stderr.write(f"ログファイルを開けませんでした: {e}\n")
            _log_file = None

    # 既存のロガーを新しい設定に合わせる
    for logger in _loggers.values():
        logger.setLevel(_log_level)
        _attach_handlers(logger)


def _attach_handlers(logger: py_logging.Logger) -> None:
    """ロガーにコンソール/ファイルハンドラを（重複しないように）追加する"""
    formatter = py_logging.Formatter(_FORMAT)

    has_console = any(type(h) is py_logging.StreamHandler for h in logger.handlers)
    if not has_console:
        console = py_logging.StreamHandler()
        console.setFormatter(formatter)
        logger.addHandler(console)

    if _log_file:
        target = os.path.abspath(_log_file)
        has_file = any(
            isinstance(h, py_logging.FileHandler) and h.baseFilename == target
            for h in logger.handlers
        )
        if not has_file:
            file_handler = py_logging.FileHandler(_log_file, encoding='utf-8')
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)


def get_logger(name: str) -> py_logging.Logger:
    """
    名前付きのロガーを取得する

    Args:
        name: ロガー名

    Returns:
        設定済みのロガーオブジェクト
    """
    if name in _loggers:
        return _loggers[name]

    logger = py_logging.getLogger(name)
    logger.setLevel(get_level())
    # ルートロガーへの二重出力を防ぐ
    logger.propagate = False
    _attach_handlers(logger)

    _loggers[name] = logger
    return logger


def log_print(level: int, message: Any, *args, name: str = None, **kwargs) -> None:
    """
    指定したレベルでメッセージをログに出力する

    Args:
        level: ログレベル
        message: 出力するメッセージ
        *args: メッセージのフォーマット引数
        name: ロガー名（デフォルトは'filecoll'）
        **kwargs: その他のキーワード引数
    """
    if level < get_level():
        return

    logger = get_logger(name or 'filecoll')
    logger.log(level, message, *args, **kwargs)


def log_trace(e: Optional[BaseException], level: int, message: Any, *args, name: str = None, **kwargs) -> None:
    """
    例外のトレース情報を含めてログに出力する

    Args:
        e: 例外オブジェクト（NoneでもOK）
        level: ログレベル
        message: 出力するメッセージ
        *args: メッセージのフォーマット引数
        name: ロガー名（デフォルトは'filecoll'）
        **kwargs: その他のキーワード引数
    """
    if level < get_level():
        return

    log_print(level, message, *args, name=name, **kwargs)

    if e is not None:
        stack = ''.join(traceback.format_exception(type(e), e, e.__traceback__))
    else:
        stack = ''.join(traceback.format_stack()[:-1])  # 自分自身の呼び出しを除外

    get_logger(name or 'filecoll').log(level, "スタックトレース:\n%s", stack)
