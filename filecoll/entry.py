"""
コレクションエントリ情報と型定義

コレクション内のファイル/ディレクトリ情報を表すクラス
"""

import datetime
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .path_utils import basename


class EntryType(Enum):
    """エントリタイプを表す列挙型"""
    UNKNOWN = 0
    FILE = 1
    DIRECTORY = 2
    SYMLINK = 4

    def is_dir(self) -> bool:
        """ディレクトリタイプかどうかを判定する"""
        return self == EntryType.DIRECTORY

    def is_file(self) -> bool:
        """ファイルタイプかどうかを判定する"""
        return self == EntryType.FILE


class MatchPath(Enum):
    """
    名前検索時の照合方法

    MATCH: コレクション内の相対パス全体で照合する
    IGNORE: パス部分を無視し、末尾の名前（basename）だけで照合する
    """
    MATCH = 1
    IGNORE = 2


@dataclass(frozen=True)
class EntryInfo:
    """
    コレクション内のファイル/ディレクトリの情報を表すクラス

    一度作成されたエントリは変更できません。コレクションから返された
    エントリはそのまま他のスレッドや呼び出し元と共有して構いません。

    Attributes:
        name: コレクションのルートからの相対パス（ルート自体は空文字列）
        path: 内容を開くための実体パス（アーカイブの場合はアーカイブ内の名前）
        type: エントリのタイプ（FILE, DIRECTORY など）
        size: サイズ（バイト）
        modified_time: 更新日時
        created_time: 作成日時
        is_hidden: 隠しファイル/ディレクトリかどうか
    """
    name: str
    path: str = ""
    type: EntryType = EntryType.FILE
    size: int = 0
    modified_time: Optional[datetime.datetime] = None
    created_time: Optional[datetime.datetime] = None
    is_hidden: bool = False

    @property
    def filename(self) -> str:
        """パス部分を除いたエントリ名"""
        return basename(self.name)

    def is_directory(self) -> bool:
        return self.type.is_dir()

    def is_file(self) -> bool:
        return self.type.is_file()

    def matches(self, name: str, match: MatchPath = MatchPath.MATCH) -> bool:
        """
        指定された名前がこのエントリを指すかどうかを判定する

        Args:
            name: 検索する名前
            match: 照合方法

        Returns:
            一致する場合はTrue
        """
        # IGNOREでは検索名はそのまま末尾の名前と比較する
        if match == MatchPath.IGNORE:
            return self.filename == name
        return self.name == name
