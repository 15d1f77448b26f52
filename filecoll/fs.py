"""
物理ファイルシステムへのアクセス

DirectoryCollection が利用するディレクトリ列挙とエントリ生成の既定実装
"""

import os
import stat
from datetime import datetime
from typing import List

from .entry import EntryInfo, EntryType
from .path_utils import basename

# 列挙結果に含まれうる移動用の擬似エントリ名
NAVIGATION_NAMES = ('.', '..')


def list_children(path: str) -> List[str]:
    """
    ディレクトリ直下の名前を列挙する

    並び順はファイルシステムが返した順のままで、ソートしない。

    Args:
        path: 列挙するディレクトリのパス

    Returns:
        子要素の名前のリスト

    Raises:
        OSError: ディレクトリを読み取れない場合
    """
    with os.scandir(path) as scanner:
        return [entry.name for entry in scanner]


def _is_hidden(name: str, stat_info: os.stat_result) -> bool:
    """隠しファイルかどうかを判定する（プラットフォーム依存）"""
    if os.name == 'nt' and hasattr(stat_info, 'st_file_attributes'):
        return bool(stat_info.st_file_attributes & stat.FILE_ATTRIBUTE_HIDDEN)
    return name.startswith('.')


def make_entry(full_path: str, rel_name: str) -> EntryInfo:
    """
    実体パスからエントリ情報を作成する

    Args:
        full_path: ファイル/ディレクトリの実体パス
        rel_name: コレクションのルートからの相対名

    Returns:
        エントリ情報

    Raises:
        OSError: パスの情報を取得できない場合
    """
    try:
        stat_info = os.stat(full_path)
    except FileNotFoundError:
        # リンク先が存在しないシンボリックリンクはリンク自体の情報を使う
        stat_info = os.lstat(full_path)

    if stat.S_ISLNK(stat_info.st_mode):
        entry_type = EntryType.SYMLINK
    elif stat.S_ISDIR(stat_info.st_mode):
        entry_type = EntryType.DIRECTORY
    elif stat.S_ISREG(stat_info.st_mode):
        entry_type = EntryType.FILE
    else:
        # デバイスファイルやFIFOなど
        entry_type = EntryType.UNKNOWN

    return EntryInfo(
        name=rel_name,
        path=full_path,
        type=entry_type,
        size=stat_info.st_size if entry_type == EntryType.FILE else 0,
        modified_time=datetime.fromtimestamp(stat_info.st_mtime),
        created_time=datetime.fromtimestamp(stat_info.st_ctime),
        # "." などの相対表記は実際のディレクトリ名で判定する
        is_hidden=_is_hidden(basename(os.path.abspath(full_path)), stat_info),
    )
