"""
パス文字列を扱うためのユーティリティ

コレクション内の論理パスは常に '/' 区切りで扱う
"""

import os


def normalize_path(path: str) -> str:
    """
    OSに依存しないパス正規化関数

    Args:
        path: 正規化する元のパス文字列

    Returns:
        正規化されたパス文字列
    """
    if path is None:
        return ""

    # バックスラッシュをスラッシュに変換
    normalized = path.replace('\\', '/')

    # 連続するスラッシュを1つに
    while '//' in normalized:
        normalized = normalized.replace('//', '/')

    # WindowsドライブレターのUNIX形式表現を修正（例: /C:/path → C:/path）
    if len(normalized) > 2 and normalized[0] == '/' and normalized[2] == ':':
        normalized = normalized[1:]

    return normalized


def strip_trailing_slash(path: str) -> str:
    """末尾のスラッシュを除去する（ルートの '/' はそのまま）"""
    if path.endswith('/') and len(path) > 1:
        return path.rstrip('/') or '/'
    return path


def join_path(*parts: str) -> str:
    """
    論理パスを '/' で結合する

    空の要素は無視されるため、空文字列の相対ディレクトリと
    名前を結合するとその名前だけが返る。

    Args:
        *parts: 結合するパス要素

    Returns:
        結合されたパス
    """
    result = ""
    for part in parts:
        if not part:
            continue
        if not result:
            result = part
        elif result.endswith('/'):
            result += part.lstrip('/')
        else:
            result += '/' + part.lstrip('/')
    return result


def basename(path: str) -> str:
    """
    パスの末尾要素を取得する

    Args:
        path: 対象のパス

    Returns:
        最後の '/' 以降の文字列。区切りがなければパス全体
    """
    norm_path = strip_trailing_slash(normalize_path(path))
    last_slash = norm_path.rfind('/')
    if last_slash >= 0:
        return norm_path[last_slash + 1:]
    return norm_path


def parent_path(path: str) -> str:
    """
    親ディレクトリのパスを取得する

    Args:
        path: 対象のパス

    Returns:
        親ディレクトリのパス。親がない場合は空文字列
    """
    norm_path = strip_trailing_slash(normalize_path(path))
    last_slash = norm_path.rfind('/')
    if last_slash >= 0:
        return norm_path[:last_slash]
    return ""


def is_directory(path: str) -> bool:
    """指定したパスが実在するディレクトリかどうか"""
    try:
        return bool(path) and os.path.isdir(path)
    except (OSError, ValueError):
        return False
