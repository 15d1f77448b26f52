"""
ディレクトリコレクション

ディスク上のディレクトリを読み込み、その配下のファイルと
サブディレクトリをエントリの集合として提供するコレクション
"""

import os
import threading
from typing import BinaryIO, Callable, Iterable, List, Optional

from ..entry import EntryInfo, MatchPath
from ..exceptions import TraversalError
from ..fs import NAVIGATION_NAMES, list_children as default_list_children, make_entry as default_make_entry
from ..path_utils import is_directory, join_path
from .base import FileCollection

ListChildren = Callable[[str], Iterable[str]]
MakeEntry = Callable[[str, str], EntryInfo]


class DirectoryCollection(FileCollection):
    """
    ディレクトリから作成されるコレクション

    作成時にはディレクトリかどうかだけを確認し、エントリの読み込みは
    最初の問い合わせ（entries()、get_entry()、size()、get_input_stream()）
    まで遅延される。読み込みは一度だけ行われ、以降はその時点の
    スナップショットが返される。

    エントリはルートディレクトリ自身（名前は空文字列）が先頭になり、
    続いて走査順に並ぶ。同じディレクトリ内の並び順は列挙関数が
    返した順のままで、ソートはしない。

    読み込み中に列挙に失敗した場合、コレクションは close() と同じ
    無効状態に戻されてから TraversalError が送出される。途中までの
    エントリが見えることはない。
    """

    def __init__(self,
                 path: Optional[str] = None,
                 recursive: bool = True,
                 list_children: Optional[ListChildren] = None,
                 make_entry: Optional[MakeEntry] = None):
        """
        ディレクトリコレクションを初期化する

        Args:
            path: ディレクトリのパス。ディレクトリでない場合（通常ファイルや
                  存在しないパス）は無効なコレクションになる
            recursive: サブディレクトリ配下も読み込むかどうか
            list_children: ディレクトリ直下の名前を列挙する関数
            make_entry: (実体パス, 相対名) からエントリを作る関数
        """
        super().__init__(path if path else "-")
        self._recursive = recursive
        self._root_path = path or ""
        self._list_children = list_children or default_list_children
        self._make_entry = make_entry or default_make_entry

        self._entries: List[EntryInfo] = []
        self._loaded = False
        # close() と読み込みの両方で使うため再入可能なロック
        self._load_lock = threading.RLock()

        self._valid = is_directory(self._root_path)
        if path and not self._valid:
            self.debug_info(f"ディレクトリではないため無効なコレクションになります: {path}")

    @property
    def recursive(self) -> bool:
        """サブディレクトリ配下も読み込むかどうか"""
        return self._recursive

    @property
    def root_path(self) -> str:
        """ルートディレクトリのパス（close() 後は空文字列）"""
        return self._root_path

    def is_loaded(self) -> bool:
        """エントリが読み込み済みかどうか"""
        return self._loaded

    def close(self) -> None:
        """
        コレクションを閉じる

        以降の問い合わせはすべて InvalidStateError になる。
        何度呼び出しても構わない。読み込み中の場合は完了を待ってから閉じる。
        """
        with self._load_lock:
            super().close()
            self._loaded = False
            self._entries = []
            self._root_path = ""

    def entries(self) -> List[EntryInfo]:
        self._load_entries()
        return list(self._entries)

    def get_entry(self, name: str, match: MatchPath = MatchPath.MATCH) -> Optional[EntryInfo]:
        self._load_entries()
        for entry in self._entries:
            if entry.matches(name, match):
                return entry
        return None

    def size(self) -> int:
        self._load_entries()
        return len(self._entries)

    def get_input_stream(self, name: str, match: MatchPath = MatchPath.MATCH) -> Optional[BinaryIO]:
        """
        エントリの内容を読み出すファイルストリームを取得する

        ストリームは常にバイナリモードで開かれ、呼び出し元が close する。

        Args:
            name: 検索するエントリ名
            match: 照合方法

        Returns:
            ファイルストリーム。エントリがない、または通常ファイルでない場合はNone
        """
        entry = self.get_entry(name, match)
        # ディレクトリ、リンク切れ、FIFOなどの特殊ファイルは開かない
        if entry is None or not entry.is_file():
            return None

        return open(entry.path, 'rb')

    def clone(self) -> "DirectoryCollection":
        """
        同じディレクトリを指す独立したコレクションを作成する

        読み込み済みのエントリは引き継がず、複製側は最初の問い合わせで
        改めて読み込む。
        """
        other = DirectoryCollection(self._root_path or None, self._recursive,
                                    self._list_children, self._make_entry)
        other._valid = self._valid
        other._name = self._name
        return other

    def _load_entries(self) -> None:
        """
        エントリを読み込む（初回のみ）

        close() された後に呼ばれる可能性があるため、毎回有効性を確認する。
        """
        self.must_be_valid()

        if self._loaded:
            return

        with self._load_lock:
            # ロック待ちの間に他のスレッドが読み込み、または close した場合
            self.must_be_valid()
            if self._loaded:
                return

            root = self._root_path
            entries: List[EntryInfo] = []
            try:
                # ルートディレクトリ自身を先頭に追加
                entries.append(self._make_entry(root, ""))
                self._walk(root, entries)
            except OSError as e:
                failed_path = e.filename if getattr(e, 'filename', None) else root
                self.debug_error(f"ディレクトリ走査エラー: {failed_path}, {e}")
                self.close()
                raise TraversalError(str(failed_path), e.strerror or str(e)) from e

            self._entries = entries
            self._loaded = True
            self.debug_info(f"{len(entries)} エントリを読み込みました: {root}")

    def _walk(self, root: str, entries: List[EntryInfo]) -> None:
        """
        ルートディレクトリ配下を深さ優先で走査してエントリを追加する

        再帰呼び出しの代わりに列挙中のイテレータをスタックに積むため、
        階層が深くてもPythonの再帰制限に掛からない。

        Args:
            root: 走査するルートディレクトリ
            entries: エントリの追加先
        """
        root_real = os.path.realpath(root)
        # (相対ディレクトリ, 子要素のイテレータ, 実パス)
        stack = [("", iter(self._list_children(root)), root_real)]

        while stack:
            subdir, children, _ = stack[-1]
            child = next(children, None)
            if child is None:
                stack.pop()
                continue

            # "." と ".." は対象外
            if child in NAVIGATION_NAMES:
                continue

            rel_name = join_path(subdir, child)
            full_path = os.path.join(root, rel_name)
            entry = self._make_entry(full_path, rel_name)
            entries.append(entry)

            if not (self._recursive and entry.is_directory()):
                continue

            # シンボリックリンクで祖先ディレクトリに戻る場合は降りない
            real_path = os.path.realpath(full_path)
            if any(real_path == ancestor for _, _, ancestor in stack):
                self.debug_warning(f"循環したディレクトリリンクをスキップします: {full_path}")
                continue

            stack.append((rel_name, iter(self._list_children(full_path)), real_path))
