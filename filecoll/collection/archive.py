"""
アーカイブコレクション基底クラス

アーカイブファイル内のメンバーをエントリの集合として提供する
コレクションの共通処理
"""
import datetime
import io
import os
from typing import BinaryIO, Iterable, List, Optional, Set, Tuple

from ..entry import EntryInfo, EntryType, MatchPath
from ..path_utils import normalize_path, parent_path, strip_trailing_slash
from .base import FileCollection

# (アーカイブ内の名前, ディレクトリかどうか, サイズ, 更新日時タプル)
MemberInfo = Tuple[str, bool, int, Optional[tuple]]


def to_datetime(date_time: Optional[tuple]) -> Optional[datetime.datetime]:
    """アーカイブの日時タプルをdatetimeに変換する（不正な値はNone）"""
    if not date_time:
        return None
    try:
        return datetime.datetime(*date_time[:6])
    except (TypeError, ValueError):
        return None


class ArchiveCollection(FileCollection):
    """
    アーカイブファイルから作成されるコレクションの基底クラス

    作成時にアーカイブの目次を読み込み、以後はその内容を返す。
    アーカイブ内に明示的なディレクトリメンバーがなくても、
    ファイルの親ディレクトリはディレクトリエントリとして補完される。

    サブクラスは supported_extensions、_is_archive()、_read_members()、
    _read_member() を実装する。
    """

    # このコレクションが扱うファイル拡張子のリスト
    supported_extensions: List[str] = []

    # 目次の読み込み失敗として扱う例外
    read_errors: Tuple[type, ...] = (OSError, ValueError)

    def __init__(self, path: Optional[str] = None):
        """
        アーカイブコレクションを初期化する

        Args:
            path: アーカイブファイルのパス。読み込めない場合は無効なコレクションになる
        """
        super().__init__(path if path else "-")
        self._archive_path = path or ""
        self._entries: List[EntryInfo] = []

        if not path:
            return

        if not os.path.isfile(path) or not self._is_archive(path):
            self.debug_info(f"アーカイブとして開けないため無効なコレクションになります: {path}")
            return

        try:
            self._entries = self._build_entries(self._read_members(path))
        except self.read_errors as e:
            self.debug_error(f"アーカイブ読み込みエラー: {path}, {e}", trace=True)
            self._entries = []
            return

        self._valid = True
        self.debug_info(f"{len(self._entries)} エントリを読み込みました: {path}")

    @classmethod
    def can_handle(cls, path: str) -> bool:
        """
        指定されたパスをこのコレクションで扱えるかどうか（拡張子で判定）

        Args:
            path: 判定するパス

        Returns:
            扱える場合はTrue
        """
        norm_path = strip_trailing_slash(normalize_path(path))
        _, ext = os.path.splitext(norm_path.lower())
        return ext in cls.supported_extensions

    @property
    def archive_path(self) -> str:
        """アーカイブファイルのパス（close() 後は空文字列）"""
        return self._archive_path

    def close(self) -> None:
        super().close()
        self._entries = []
        self._archive_path = ""

    def entries(self) -> List[EntryInfo]:
        self.must_be_valid()
        return list(self._entries)

    def size(self) -> int:
        self.must_be_valid()
        return len(self._entries)

    def get_input_stream(self, name: str, match: MatchPath = MatchPath.MATCH) -> Optional[BinaryIO]:
        """
        アーカイブ内のファイルの内容をメモリ上のストリームとして取得する

        Args:
            name: 検索するエントリ名
            match: 照合方法

        Returns:
            展開済みの内容を持つストリーム。エントリがない、またはディレクトリの場合はNone
        """
        entry = self.get_entry(name, match)
        if entry is None or entry.is_directory():
            return None

        return io.BytesIO(self._read_member(self._archive_path, entry.path))

    def clone(self) -> "ArchiveCollection":
        """同じアーカイブを開き直した独立したコレクションを作成する"""
        if not self._valid:
            return self.__class__()
        return self.__class__(self._archive_path)

    def _build_entries(self, members: Iterable[MemberInfo]) -> List[EntryInfo]:
        """
        メンバー情報からエントリのリストを作成する

        明示されていない親ディレクトリは、その配下の最初のメンバーの直前に補完する。
        """
        entries: List[EntryInfo] = []
        seen_dirs: Set[str] = set()

        for member_name, is_dir, size, date_time in members:
            rel_name = strip_trailing_slash(normalize_path(member_name)).lstrip('/')
            if not rel_name:
                continue

            # 親ディレクトリを浅い順に補完
            missing = []
            parent = parent_path(rel_name)
            while parent and parent not in seen_dirs:
                missing.append(parent)
                parent = parent_path(parent)
            for dir_name in reversed(missing):
                seen_dirs.add(dir_name)
                entries.append(EntryInfo(name=dir_name, path=dir_name + '/', type=EntryType.DIRECTORY))

            if is_dir:
                if rel_name in seen_dirs:
                    continue
                seen_dirs.add(rel_name)

            entries.append(EntryInfo(
                name=rel_name,
                path=member_name,
                type=EntryType.DIRECTORY if is_dir else EntryType.FILE,
                size=0 if is_dir else size,
                modified_time=to_datetime(date_time),
                is_hidden=rel_name.rsplit('/', 1)[-1].startswith('.'),
            ))

        return entries

    def _is_archive(self, path: str) -> bool:
        """ファイルがこの形式のアーカイブかどうか"""
        # サブクラスで実装
        return False

    def _read_members(self, path: str) -> List[MemberInfo]:
        """アーカイブの目次を読み込む"""
        # サブクラスで実装
        raise NotImplementedError

    def _read_member(self, path: str, member_name: str) -> bytes:
        """アーカイブ内のメンバーを展開して読み込む"""
        # サブクラスで実装
        raise NotImplementedError
